from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from fastapi import Depends, HTTPException, status
from config import config

import logging

logger = logging.getLogger(__name__)

# auto_error is off so a missing header can be allowed through when no tokens are configured
bearer_scheme = HTTPBearer(auto_error=False)

if not config.auth_enabled:
    logger.info("No bearer token set - authentication disabled for local development")


def get_current_client(credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme)):
    """Validates the Bearer token for every tool endpoint."""
    if not config.auth_enabled:
        return None

    if (
        credentials is None
        or credentials.scheme.lower() != "bearer"
        or credentials.credentials not in config.valid_tokens
    ):
        logger.info("Rejected tool call with invalid or missing bearer token.")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing Bearer token.",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return credentials.credentials
