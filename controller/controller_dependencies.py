# controller/controller_dependencies.py
import httpx
from fastapi import Depends
from config.http_client import get_http_client
from config.settings import Settings, settings
from service.credential_service import CredentialService
from service.verification_service import VerificationService


def get_settings() -> Settings:
    return settings


def get_verification_service(
    app_settings: Settings = Depends(get_settings),
    http: httpx.AsyncClient = Depends(get_http_client),
) -> VerificationService:
    return VerificationService(app_settings, http)


def get_credential_service(
    app_settings: Settings = Depends(get_settings),
    http: httpx.AsyncClient = Depends(get_http_client),
) -> CredentialService:
    return CredentialService(app_settings, http)
