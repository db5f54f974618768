import jwt
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.models.caregiver_model import Caregiver
from app.schemas.share_schema import (
    AccountStatusResponse,
    ShareRequest,
    ShareResponse,
    AcceptShareRequest,
    AcceptShareResponse,
)
from app.services import share_service
from app.services.cloud_share_client import (
    ACCOUNT_AVAILABLE,
    AccountUnavailableError,
    CloudShareClient,
    ShareConflictError,
    ShareError,
)
from app.dependencies.current_caregiver import get_share_client
from config.database import get_db
from config.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/shares", tags=["sharing"])


def _share_http_error(error: ShareError, action: str) -> HTTPException:
    # Sharing is the one place where failures are shown to the user
    logger.error("Failed to %s: %s", action, error)
    if isinstance(error, AccountUnavailableError):
        return HTTPException(status_code=503, detail=str(error))
    if isinstance(error, ShareConflictError):
        return HTTPException(status_code=409, detail=str(error))
    return HTTPException(status_code=502, detail=f"Could not {action}. {error}")


def _get_caregiver_or_404(db: Session, caregiver_id: str) -> Caregiver:
    caregiver = db.get(Caregiver, caregiver_id)
    if not caregiver:
        raise HTTPException(status_code=404, detail="Caregiver not found.")
    return caregiver


@router.get("/account-status", response_model=AccountStatusResponse)
def account_status(client: CloudShareClient = Depends(get_share_client)):
    status = share_service.check_account_status(client)
    return {"status": status, "available": status == ACCOUNT_AVAILABLE}


@router.post("/caregivers/{caregiver_id}", response_model=ShareResponse)
def prepare_share(
    caregiver_id: str,
    data: Optional[ShareRequest] = None,
    db: Session = Depends(get_db),
    client: CloudShareClient = Depends(get_share_client),
):
    """
    Returns a share link for the caregiver's data, creating or re-pushing the
    share as needed. The response always carries the server-assigned URL.
    Asking for a different permission re-signs and re-pushes the existing share;
    without a body an existing share keeps its permission.
    """
    caregiver = _get_caregiver_or_404(db, caregiver_id)
    try:
        return share_service.prepare_share(db, client, caregiver, data.permission if data else None)
    except ShareError as e:
        raise _share_http_error(e, "prepare the share")


@router.delete("/caregivers/{caregiver_id}")
def stop_sharing(
    caregiver_id: str,
    db: Session = Depends(get_db),
    client: CloudShareClient = Depends(get_share_client),
):
    caregiver = _get_caregiver_or_404(db, caregiver_id)
    try:
        stopped = share_service.stop_sharing(db, client, caregiver)
    except ShareError as e:
        raise _share_http_error(e, "stop sharing")

    if not stopped:
        raise HTTPException(status_code=404, detail="Caregiver is not shared.")
    return {"msg": "Sharing stopped.", "caregiver_id": caregiver_id}


@router.post("/accept", response_model=AcceptShareResponse)
def accept_share(data: AcceptShareRequest, db: Session = Depends(get_db)):
    try:
        caregiver, permission = share_service.accept_share(db, data.token)
    except jwt.InvalidTokenError as e:
        logger.warning("Rejected share invitation: %s", e)
        raise HTTPException(status_code=400, detail="Invalid or expired share invitation.")

    return {"caregiver_id": caregiver.id, "name": caregiver.name, "permission": permission}
