"""
Admin authentication.

The /admin/* endpoints use HTTP Basic Auth with credentials from
ADMIN_USERNAME and ADMIN_PASSWORD. Without ADMIN_PASSWORD every admin
request is refused with 503, so a misconfigured deployment never exposes
them.

Usage:
    @admin_router.post("/cache/sweep")
    async def sweep_cache(admin: str = Depends(verify_admin_credentials)):
        ...
"""

import logging
import secrets

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from . import config

logger = logging.getLogger(__name__)

security = HTTPBasic(realm="Mensa Menu Admin")


def verify_admin_credentials(
    credentials: HTTPBasicCredentials = Depends(security),
) -> str:
    """
    Check HTTP Basic credentials against the configured admin account.

    Returns:
        The authenticated username

    Raises:
        HTTPException (503): If ADMIN_PASSWORD is not set
        HTTPException (401): If the credentials are wrong
    """
    if not config.ADMIN_PASSWORD:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Admin authentication not configured. Set ADMIN_PASSWORD environment variable.",
        )

    # compare_digest on both fields, so timing does not reveal which one was wrong
    username_correct = secrets.compare_digest(
        credentials.username.encode("utf-8"),
        config.ADMIN_USERNAME.encode("utf-8"),
    )
    password_correct = secrets.compare_digest(
        credentials.password.encode("utf-8"),
        config.ADMIN_PASSWORD.encode("utf-8"),
    )

    if not (username_correct and password_correct):
        logger.warning("Rejected admin credentials for user %r", credentials.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid admin credentials",
            headers={"WWW-Authenticate": "Basic"},
        )

    return credentials.username
