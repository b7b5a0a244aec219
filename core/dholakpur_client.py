# core/dholakpur_client.py
from typing import Any, Dict
from urllib.parse import quote
import httpx
from util.constants import ExternalURIs


class DholakpurClient:
    """
    Thin wrapper over the credential service endpoints.
    Returns raw `httpx.Response` objects; status interpretation is left to callers.
    """

    def __init__(self, http: httpx.AsyncClient, base_url: str, api_token: str) -> None:
        self._http = http
        self._base_url = base_url.rstrip("/")
        self._api_token = api_token

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_token}",
            "Content-Type": "application/json",
        }

    def verify_url(self) -> str:
        return self._base_url + ExternalURIs.VERIFY

    def related_doc_url(self, vc_id: str) -> str:
        return self._base_url + ExternalURIs.RELATED_DOC.format(
            vc_id=quote(vc_id, safe="")
        )

    async def verify(self, payload: Dict[str, Any]) -> httpx.Response:
        return await self._http.post(
            self.verify_url(), headers=self._headers(), json=payload
        )

    async def fetch_related_doc(self, vc_id: str) -> httpx.Response:
        return await self._http.get(self.related_doc_url(vc_id), headers=self._headers())
