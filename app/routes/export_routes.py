from fastapi import APIRouter, Depends
from fastapi.responses import Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload
from datetime import date

from app.models.activity_log_model import ActivityLog
from app.utils.csv_exporter import generate_csv
from config.database import get_db
from config.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/export", tags=["export"])


@router.get("/csv")
def export_csv(db: Session = Depends(get_db)):
    """Every entry, newest first, as CSV for the share/export sheet."""
    try:
        logs = (
            db.query(ActivityLog)
            .options(joinedload(ActivityLog.caregiver))
            .order_by(ActivityLog.start_time.desc())
            .all()
        )
    except SQLAlchemyError as e:
        logger.error("Failed to fetch logs for export: %s", e)
        logs = []

    filename = f"aryalog-export-{date.today().isoformat()}.csv"
    return Response(
        content=generate_csv(logs),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
