import os
import secrets
from fastapi import Header, HTTPException
from health_companion.core.env import load_env
load_env()

def verify_internal_key(x_internal_key: str | None = Header(default=None)) -> None:
    """Guards endpoints that return stored assessment data."""
    secret = os.getenv("INTERNAL_SERVICE_SECRET")

    if not secret:
        raise HTTPException(
            status_code=500,
            detail="Internal service secret not configured."
        )

    # compare bytes; str compare_digest rejects non-ASCII input
    if not x_internal_key or not secrets.compare_digest(x_internal_key.encode("utf-8"), secret.encode("utf-8")):
        raise HTTPException(
            status_code=401,
            detail="Missing or invalid X-Internal-Key."
        )
