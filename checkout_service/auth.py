from typing import Optional

from fastapi import Header, HTTPException
from jose import jwt

from checkout_service import config


def verify_token(authorization: Optional[str] = Header(None)) -> str:
    """Validate the bearer token and return the caller's user id (``sub`` claim)."""
    try:
        scheme, token = authorization.split()
        if scheme.lower() != "bearer":
            raise ValueError("unsupported auth scheme")
        claims = jwt.decode(token, config.JWT_SECRET, algorithms=["HS256"])
        user_id = claims.get("sub") or claims.get("id")
        if not user_id:
            raise ValueError("token carries no user id")
    except Exception:
        raise HTTPException(status_code=401, detail="Invalid or missing token")
    return str(user_id)
