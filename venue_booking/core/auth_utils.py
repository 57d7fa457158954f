from datetime import datetime, timedelta, timezone

import jwt
from fastapi import HTTPException

from venue_booking.core.config import settings


def create_access_token(subject: str, role: str = "admin", expires_minutes: int | None = None) -> str:
    expire = datetime.now(timezone.utc) + timedelta(
        minutes=expires_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES
    )
    payload = {"sub": subject, "role": role, "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=401, detail="Invalid token")


# ---------------- ADMIN VALIDATION ----------------
def require_admin(token: str):
    payload = decode_token(token)

    if payload.get("role") != "admin":
        raise HTTPException(status_code=401, detail="Admins only")

    return payload["sub"]
