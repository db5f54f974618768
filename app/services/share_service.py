# app/services/share_service.py

import uuid
from typing import Optional

from sqlalchemy.orm import Session

from app.models.caregiver_model import Caregiver
from app.models.share_model import CaregiverShare
from app.services.cloud_share_client import (
    ACCOUNT_AVAILABLE,
    ACCOUNT_UNKNOWN,
    AccountUnavailableError,
    CloudShareClient,
    ShareError,
)
from app.utils.share_token import decode_share_token, share_token_for_caregiver
from config.logging_config import get_logger
from config.settings import SHARE_TITLE

logger = get_logger(__name__)


def check_account_status(client: CloudShareClient) -> str:
    try:
        return client.account_status()
    except ShareError as e:
        logger.warning("Failed to check account status: %s", e)
        return ACCOUNT_UNKNOWN


def prepare_share(db: Session, client: CloudShareClient, caregiver: Caregiver,
                  permission: Optional[str] = None) -> CaregiverShare:
    """
    Returns a share for the caregiver that carries a server-assigned URL:
    1. an existing share that already has a URL is reused
    2. an existing share without a URL, or whose permission changed, is pushed again
    3. otherwise a new share is created and pushed
    Without a permission an existing share keeps its own, a new one is readWrite.
    """
    status = check_account_status(client)
    if status != ACCOUNT_AVAILABLE:
        raise AccountUnavailableError(
            "Sharing needs an available cloud account. Sign in and try again."
        )

    share = db.query(CaregiverShare).filter_by(caregiver_id=caregiver.id).first()

    if share and permission and share.permission != permission:
        # A new permission needs a new token, so the server copy is stale
        logger.info("Changing share %s permission to %s", share.id, permission)
        share.permission = permission
        share.token = share_token_for_caregiver(caregiver, share.id, permission)
        share.url = None
        db.commit()

    if share and share.url:
        logger.info("Reusing share %s for caregiver %s", share.id, caregiver.id)
        return share

    if share is None:
        permission = permission or "readWrite"
        share_id = str(uuid.uuid4())
        share = CaregiverShare(
            id=share_id,
            caregiver_id=caregiver.id,
            title=SHARE_TITLE,
            permission=permission,
            token=share_token_for_caregiver(caregiver, share_id, permission),
        )
        db.add(share)
        # Kept locally even if the push below fails, so the next attempt re-pushes it
        db.commit()
        logger.info("Created share %s for caregiver %s", share.id, caregiver.id)
    else:
        logger.info("Re-pushing share %s without URL", share.id)

    share.url = client.push_share(share)
    db.commit()
    db.refresh(share)
    return share


def stop_sharing(db: Session, client: CloudShareClient, caregiver: Caregiver) -> bool:
    share = db.query(CaregiverShare).filter_by(caregiver_id=caregiver.id).first()
    if share is None:
        return False

    if share.url:
        client.revoke_share(share.id)

    db.delete(share)
    db.commit()
    logger.info("Stopped sharing caregiver %s", caregiver.id)
    return True


def accept_share(db: Session, token: str):
    """
    Registers the sharer as a local caregiver. Raises jwt.InvalidTokenError for
    tokens that do not verify.
    """
    payload = decode_share_token(token)
    caregiver = db.get(Caregiver, payload["sub"])

    if caregiver is None:
        caregiver = Caregiver(id=payload["sub"], name=payload["name"], is_current_user=False)
        db.add(caregiver)
        logger.info("Accepted share from new caregiver %s", caregiver.id)
    elif not caregiver.is_current_user:
        caregiver.name = payload["name"]

    db.commit()
    db.refresh(caregiver)
    return caregiver, payload.get("permission", "readWrite")
