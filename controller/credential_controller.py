# controller/credential_controller.py
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from model.api import (
    CredentialDetailsRequest,
    ErrorResponse,
    RelatedDocsRequest,
    RelatedDocsResponse,
)
from model.credential import CredentialEnvelope
from service.credential_service import CredentialService
from util.constants import InternalURIs
from controller.controller_dependencies import get_credential_service

credential_router = APIRouter()


@credential_router.post(
    InternalURIs.FETCH_RELATED_DOCS,
    response_model=RelatedDocsResponse,
    status_code=status.HTTP_200_OK,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def fetch_related_docs(
    payload: RelatedDocsRequest,
    service: CredentialService = Depends(get_credential_service),
) -> RelatedDocsResponse:
    documents = await service.fetch_related_documents(payload.vcIds)
    return RelatedDocsResponse(documents=documents)


@credential_router.post(
    InternalURIs.FETCH_CREDENTIAL_DETAILS,
    status_code=status.HTTP_200_OK,
    responses={
        200: {"model": CredentialEnvelope},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def fetch_credential_details(
    payload: CredentialDetailsRequest,
    service: CredentialService = Depends(get_credential_service),
) -> JSONResponse:
    document = await service.fetch_credential_details(payload.vcId)
    return JSONResponse(document, status_code=status.HTTP_200_OK)
