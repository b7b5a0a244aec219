# controller/verification_controller.py
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from model.api import ErrorResponse, VerifyRequest
from model.credential import VerificationProof
from service.verification_service import VerificationService
from util.constants import InternalURIs
from controller.controller_dependencies import get_verification_service

verification_router = APIRouter()


@verification_router.post(
    InternalURIs.VERIFY,
    status_code=status.HTTP_200_OK,
    responses={
        200: {"model": VerificationProof},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def verify(
    payload: VerifyRequest,
    service: VerificationService = Depends(get_verification_service),
) -> JSONResponse:
    result = await service.verify(payload.content, payload.title)
    return JSONResponse(result, status_code=status.HTTP_200_OK)
