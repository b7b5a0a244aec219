# main.py
import logging
import routes
from contextlib import asynccontextmanager
from util.constants import InternalURIs
from util.enums import Environment, Color
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware
from config.settings import settings
from config.http_client import close_http_client, get_http_client
from controller.error_handlers import register_error_handlers

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)


@asynccontextmanager
async def lifespan(fastApi: FastAPI):
    print(f"{Color.GREEN}Server Started{Color.RESET}")
    print(f"{Color.GREEN}Initializing...{Color.RESET}")

    if not settings.DHOLAKPUR_API_TOKEN:
        print(
            f"{Color.YELLOW}DHOLAKPUR_API_TOKEN is not set; "
            f"proxy routes will answer 500 until it is{Color.RESET}"
        )

    # Warm outbound client
    await get_http_client()

    try:
        yield
    finally:
        try:
            await close_http_client()
        except Exception as e:
            print("Error closing HTTP client:", e)

        print(f"{Color.RED}Server Shutdown{Color.RESET}")


app: FastAPI = FastAPI(title="Credential Verification Proxy", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.ALLOWED_ORIGIN],
    allow_credentials=True,  # Allow cookies and other credentials
    allow_methods=["GET", "POST"],  # Allowed HTTP Methods
    allow_headers=["Authorization", "Content-Type", "Accept"],  # Allowed HTTP Headers
)


@app.get(InternalURIs.HEALTHZ)
async def healthz():
    return {"ok": True}


register_error_handlers(app)
routes.register_routes(app)

if __name__ == "__main__":
    import uvicorn

    reload = settings.APP_ENV == Environment.DEV
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=reload)
