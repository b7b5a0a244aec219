# service/verification_service.py
import logging
from typing import Any, Dict
import httpx
from config.settings import Settings
from core.dholakpur_client import DholakpurClient
from util.constants import ContentLimits
from util.enums import ErrorMessage
from util.errors import (
    AppError,
    ConfigurationError,
    InternalError,
    InvalidInputError,
    UpstreamError,
)

logger = logging.getLogger(__name__)


def validate_content(content: Any) -> str:
    """
    Checks run in order: presence/type, raw max length, trimmed min length.
    """
    if not content or not isinstance(content, str):
        raise InvalidInputError.of(ErrorMessage.CONTENT_REQUIRED)
    if len(content) > ContentLimits.MAX_LENGTH:
        raise InvalidInputError.of(ErrorMessage.CONTENT_TOO_LONG)
    if len(content.strip()) < ContentLimits.MIN_TRIMMED_LENGTH:
        raise InvalidInputError.of(ErrorMessage.CONTENT_TOO_SHORT)
    return content


def build_verification_payload(content: str, title: Any = None) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"content": content}
    if title:
        payload["title"] = title
    return payload


class VerificationService:
    """
    Forwards document text to the external verifier and relays its verdict.

    Flow:
    - Validate content before anything touches the network.
    - Require the bearer token (ConfigurationError otherwise).
    - One POST upstream, no retry. Non-2xx -> UpstreamError with the same status;
      transport or JSON failures -> InternalError. Details are logged only.
    """

    def __init__(self, settings: Settings, http: httpx.AsyncClient) -> None:
        self._settings = settings
        self._http = http

    async def verify(self, content: Any, title: Any = None) -> Any:
        content = validate_content(content)

        token = self._settings.DHOLAKPUR_API_TOKEN
        if not token:
            logger.error("Missing DHOLAKPUR_API_TOKEN environment variable")
            raise ConfigurationError.of(ErrorMessage.VERIFY_NOT_CONFIGURED)

        client = DholakpurClient(self._http, self._settings.DHOLAKPUR_API_URL, token)
        payload = build_verification_payload(content, title)

        try:
            res = await client.verify(payload)
            if not res.is_success:
                logger.error(
                    "Dholakpur API error (%s): %s", res.status_code, _error_body(res)
                )
                raise UpstreamError.of(
                    ErrorMessage.VERIFY_UPSTREAM, http_status=res.status_code
                )
            return res.json()
        except AppError:
            raise
        except Exception as e:
            logger.error("Verification error: %s", e, exc_info=True)
            raise InternalError.of(ErrorMessage.VERIFY_FAILED) from e


def _error_body(res: httpx.Response) -> Any:
    try:
        return res.json()
    except ValueError:
        return {}
