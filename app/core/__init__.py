"""Core module - config, exceptions."""

from app.core.config import get_settings, Settings
from app.core.exceptions import (
    AppException,
    BadRequestException,
    UpstreamException,
    GatewayTimeoutException,
)

__all__ = [
    "get_settings",
    "Settings",
    "AppException",
    "BadRequestException",
    "UpstreamException",
    "GatewayTimeoutException",
]
