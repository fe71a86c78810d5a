"""Rate limiter shared by the API routers."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from translation_hub.core.config import (
    Environment,
    get_settings,
)

_settings = get_settings()

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=_settings.RATE_LIMIT_ENDPOINTS["default"],
    enabled=_settings.APP_ENV != Environment.TEST,
)
