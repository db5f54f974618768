# app/utils/share_token.py
import jwt
from datetime import datetime, timedelta, timezone
from config.settings import SHARE_SECRET, SHARE_ALGORITHM, SHARE_TOKEN_DAYS


def share_token_for_caregiver(caregiver, share_id: str, permission: str = "readWrite") -> str:
    payload = {
        "sub": caregiver.id,
        "name": caregiver.display_name,
        "share_id": share_id,
        "permission": permission,
        "exp": datetime.now(timezone.utc) + timedelta(days=SHARE_TOKEN_DAYS),
    }
    return jwt.encode(payload, SHARE_SECRET, algorithm=SHARE_ALGORITHM)


def decode_share_token(token: str) -> dict:
    """Raises jwt.InvalidTokenError for bad signatures, expired or malformed tokens."""
    payload = jwt.decode(token, SHARE_SECRET, algorithms=[SHARE_ALGORITHM])
    if not payload.get("sub") or not payload.get("name"):
        raise jwt.InvalidTokenError("Share token is missing the caregiver")
    return payload
