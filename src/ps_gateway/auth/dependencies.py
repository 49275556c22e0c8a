"""FastAPI dependency: require_client_key.

The client app authenticates with a single static bearer key
(CLIENT_AUTH_KEY). There are no user accounts on this side of the proxy.

Usage in any protected router:
    router = APIRouter(dependencies=[Depends(require_client_key)])
"""

import hmac
import logging

from fastapi import Header

from config.settings import settings
from src.ps_common.errors import ForbiddenError

logger = logging.getLogger(__name__)

_BEARER_PREFIX = "Bearer "


async def require_client_key(authorization: str = Header(default="")) -> None:
    """Raise ForbiddenError (403) unless the bearer key matches CLIENT_AUTH_KEY."""
    token = authorization.removeprefix(_BEARER_PREFIX)
    if not hmac.compare_digest(token.encode(), settings.CLIENT_AUTH_KEY.encode()):
        logger.warning("Invalid client auth")
        raise ForbiddenError()
