from slowapi import Limiter
from slowapi.util import get_remote_address

from src.config.settings import settings

# Per-route limits are applied with @limiter.limit(...); tracking endpoints
# are the only public write surface.
limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.RATE_LIMIT_ENABLED,
)
