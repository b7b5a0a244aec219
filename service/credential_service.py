# service/credential_service.py
import logging
from typing import Any, List, Optional
import httpx
from config.settings import Settings
from core.dholakpur_client import DholakpurClient
from core.fanout import gather_settled
from util.enums import ErrorMessage
from util.errors import (
    AppError,
    ConfigurationError,
    InternalError,
    InvalidInputError,
    UpstreamError,
)

logger = logging.getLogger(__name__)


class CredentialService:
    """
    Fetches credential documents by VC id, singly or as a fan-out batch.
    """

    def __init__(self, settings: Settings, http: httpx.AsyncClient) -> None:
        self._settings = settings
        self._http = http

    def _client(self, not_configured: ErrorMessage) -> DholakpurClient:
        token = self._settings.DHOLAKPUR_API_TOKEN
        if not token:
            logger.error("Missing DHOLAKPUR_API_TOKEN environment variable")
            raise ConfigurationError.of(not_configured)
        return DholakpurClient(self._http, self._settings.DHOLAKPUR_API_URL, token)

    async def fetch_related_documents(self, vc_ids: Any) -> List[Any]:
        """
        GET every id at once; ids whose fetch fails are dropped, the rest keep input order.
        """
        if not vc_ids or not isinstance(vc_ids, list):
            raise InvalidInputError.of(ErrorMessage.VC_IDS_REQUIRED)

        client = self._client(ErrorMessage.RELATED_NOT_CONFIGURED)

        async def _one(vc_id: Any) -> Optional[Any]:
            res = await client.fetch_related_doc(str(vc_id))
            if not res.is_success:
                logger.warning(
                    "Related doc %s returned %s %s",
                    vc_id,
                    res.status_code,
                    res.reason_phrase,
                )
                return None
            return res.json()

        try:
            documents = await gather_settled(vc_ids, _one)
        except Exception as e:
            logger.error("Fetch related docs error: %s", e, exc_info=True)
            raise InternalError.of(ErrorMessage.RELATED_FAILED) from e

        logger.info("Fetched %d of %d related documents", len(documents), len(vc_ids))
        return documents

    async def fetch_credential_details(self, vc_id: Any) -> Any:
        if not vc_id or not isinstance(vc_id, str):
            raise InvalidInputError.of(ErrorMessage.VC_ID_REQUIRED)

        client = self._client(ErrorMessage.DETAILS_NOT_CONFIGURED)

        try:
            res = await client.fetch_related_doc(vc_id)
            if not res.is_success:
                reason = res.reason_phrase or httpx.codes.get_reason_phrase(
                    res.status_code
                )
                raise UpstreamError(
                    f"{ErrorMessage.DETAILS_FAILED.value.message}: {reason}",
                    res.status_code,
                )
            return res.json()
        except AppError:
            raise
        except Exception as e:
            logger.error("Error fetching credential details: %s", e, exc_info=True)
            raise InternalError.of(ErrorMessage.DETAILS_FAILED) from e
