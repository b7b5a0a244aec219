class InternalURIs:
    API = "/api"
    HEALTHZ = "/healthz"
    VERIFY = API + "/verify"
    FETCH_RELATED_DOCS = API + "/fetch-related-docs"
    FETCH_CREDENTIAL_DETAILS = API + "/fetch-credential-details"


class ExternalURIs:
    VERIFY = "/vc/verify"
    RELATED_DOC = "/vc/fetch/related/docs/{vc_id}"


class ContentLimits:
    MAX_LENGTH = 10_000
    MIN_TRIMMED_LENGTH = 10
