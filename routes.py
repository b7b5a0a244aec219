# routes.py
from fastapi import FastAPI
from controller.credential_controller import credential_router
from controller.verification_controller import verification_router


def register_routes(app: FastAPI) -> None:
    """Register & Access control controllers here."""
    app.include_router(verification_router)
    app.include_router(credential_router)
