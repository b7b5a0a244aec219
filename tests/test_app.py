"""App-level wiring: health check, OpenAPI contract, payload helpers."""

from service.verification_service import build_verification_payload


def test_healthz(client):
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_openapi_documents_routes_and_models(client):
    schema = client.get("/openapi.json").json()

    for path in (
        "/api/verify",
        "/api/fetch-related-docs",
        "/api/fetch-credential-details",
    ):
        assert "post" in schema["paths"][path]

    components = schema["components"]["schemas"]
    for name in ("VerificationProof", "CredentialEnvelope", "ErrorResponse"):
        assert name in components


def test_payload_title_only_when_truthy():
    assert build_verification_payload("content here", "T") == {
        "content": "content here",
        "title": "T",
    }
    assert build_verification_payload("content here", None) == {
        "content": "content here"
    }
    assert build_verification_payload("content here", "") == {
        "content": "content here"
    }
