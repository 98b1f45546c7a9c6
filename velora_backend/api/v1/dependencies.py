from typing import Optional

# External package imports
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer


# Missing or non-Bearer headers are reported by the use case, not by FastAPI
security_scheme = HTTPBearer(auto_error=False)


async def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> Optional[str]:
    """
    FastAPI dependency extracting the token from "Authorization: Bearer <token>"

    Args:
        credentials: Parsed Authorization header, None when absent

    Returns:
        The raw token string, or None
    """
    if credentials is None:
        return None
    return credentials.credentials or None
