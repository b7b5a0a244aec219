# util/enums.py
from enum import Enum
from typing import NamedTuple
from util.constants import ContentLimits


class Color(str, Enum):
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    BOLD = "\033[1m"

    def __str__(self):
        return self.value


class Environment(str, Enum):
    DEV = "dev"
    PROD = "prod"


class ErrorDetail(NamedTuple):
    message: str
    http_status: int


class ErrorMessage(Enum):
    """Client-facing error messages. Upstream details are never included."""

    INVALID_BODY = ErrorDetail("Invalid request body", 400)

    # verify
    CONTENT_REQUIRED = ErrorDetail("No content provided", 400)
    CONTENT_TOO_LONG = ErrorDetail(
        f"Content exceeds {ContentLimits.MAX_LENGTH} character limit", 400
    )
    CONTENT_TOO_SHORT = ErrorDetail(
        f"Content must be at least {ContentLimits.MIN_TRIMMED_LENGTH} characters long",
        400,
    )
    VERIFY_NOT_CONFIGURED = ErrorDetail("Verification service not configured", 500)
    VERIFY_UPSTREAM = ErrorDetail(
        "Verification service returned an error. Please try again.", 502
    )
    VERIFY_FAILED = ErrorDetail("Verification failed. Please try again.", 500)

    # fetch-related-docs
    VC_IDS_REQUIRED = ErrorDetail("No VC IDs provided", 400)
    RELATED_NOT_CONFIGURED = ErrorDetail("Service not configured", 500)
    RELATED_FAILED = ErrorDetail("Failed to fetch related documents", 500)

    # fetch-credential-details
    VC_ID_REQUIRED = ErrorDetail("VC ID is required", 400)
    DETAILS_NOT_CONFIGURED = ErrorDetail("API token not configured", 500)
    DETAILS_FAILED = ErrorDetail("Failed to fetch credential details", 500)
