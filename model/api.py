# model/api.py
from typing import Any
from pydantic import BaseModel


# Request fields are left loose: presence/type checks and their messages
# belong to the services, not to FastAPI's 422 validation.


class VerifyRequest(BaseModel):
    content: Any = None
    title: Any = None


class RelatedDocsRequest(BaseModel):
    vcIds: Any = None


class CredentialDetailsRequest(BaseModel):
    vcId: Any = None


class RelatedDocsResponse(BaseModel):
    documents: list[Any]


class ErrorResponse(BaseModel):
    error: str
