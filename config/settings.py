# config/settings.py
import os
import sys
from typing import Optional
from dotenv import load_dotenv
from pydantic import ValidationError, Field
from pydantic_settings import BaseSettings
from util.enums import Environment


if os.getenv("APP_ENV", Environment.DEV) == Environment.DEV:
    load_dotenv()


class Settings(BaseSettings):
    # App
    APP_ENV: str = Field(Environment.DEV.value, validation_alias="APP_ENV")
    HOST: str = Field("127.0.0.1", validation_alias="HOST")
    PORT: int = Field(8000, validation_alias="PORT")
    LOG_LEVEL: str = Field("INFO", validation_alias="LOG_LEVEL")

    # CORS
    ALLOWED_ORIGIN: str = Field(
        "http://localhost:3000", validation_alias="ALLOWED_ORIGIN"
    )

    # Dholakpur credential service
    # Token is checked per request; a missing token must not stop the server.
    DHOLAKPUR_API_TOKEN: Optional[str] = Field(
        None, validation_alias="DHOLAKPUR_API_TOKEN"
    )
    DHOLAKPUR_API_URL: str = Field(
        "https://api.dholakpur.fun", validation_alias="DHOLAKPUR_API_URL"
    )

    # Outbound HTTP
    UPSTREAM_TIMEOUT_SECONDS: float = Field(
        30.0, validation_alias="UPSTREAM_TIMEOUT_SECONDS"
    )
    UPSTREAM_CONNECT_TIMEOUT_SECONDS: float = Field(
        5.0, validation_alias="UPSTREAM_CONNECT_TIMEOUT_SECONDS"
    )


try:
    settings = Settings()
except ValidationError as e:
    print("❌ Missing/invalid environment variables:", file=sys.stderr)
    for err in e.errors():
        loc = ".".join(str(x) for x in err.get("loc", []))
        msg = err.get("msg", "")
        print(f" - {loc}: {msg}", file=sys.stderr)
    sys.exit(1)
except Exception as e:
    print(f"❌ Settings initialization failed: {e}", file=sys.stderr)
    sys.exit(1)
