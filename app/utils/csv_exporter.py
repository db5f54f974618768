# app/utils/csv_exporter.py

import csv
import io

from app.models.activity_type import ActivityType

CSV_HEADER = ["Date", "Time", "Type", "Left (min)", "Right (min)", "Volume (mL)", "Caregiver", "Notes"]


def _clean_notes(notes) -> str:
    if not notes:
        return ""
    # One entry per line, and commas would shift the columns for naive readers
    return notes.replace(",", ";").replace("\r", " ").replace("\n", " ")


def log_to_row(log) -> list:
    activity = log.type
    return [
        log.start_time.strftime("%Y-%m-%d"),
        log.start_time.strftime("%H:%M"),
        activity.display_name,
        str(log.left_duration) if activity is ActivityType.BREASTFEEDING else "",
        str(log.right_duration) if activity is ActivityType.BREASTFEEDING else "",
        str(log.volume_ml) if activity.uses_volume else "",
        log.caregiver_name,
        _clean_notes(log.notes),
    ]


def generate_csv(logs) -> str:
    """Header plus one row per entry, in the order given."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for log in logs:
        writer.writerow(log_to_row(log))
    return buffer.getvalue()
