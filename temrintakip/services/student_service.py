"""
Student store for TemrinTakip.

Thin facade over a Supabase table. Reads degrade to an empty list, writes
propagate their errors to the calling route.
"""
import time
import uuid
import logging

from supabase import create_client, Client

from temrintakip.config import config
from temrintakip.students import calculate_average

logger = logging.getLogger(__name__)

supabase: Client = None


class StoreNotConfigured(Exception):
    """Supabase credentials are missing from the environment."""


def get_supabase() -> Client:
    """Get or create Supabase client."""
    global supabase
    if supabase is None:
        url = config.supabase_url
        key = config.supabase_service_key
        if not url or not key:
            raise StoreNotConfigured(
                "Supabase credentials not configured. Check SUPABASE_URL and SUPABASE_SERVICE_KEY in .env"
            )
        supabase = create_client(url, key)
    return supabase


def _table():
    return get_supabase().table(config.students_table)


def _now_ms() -> int:
    return int(time.time() * 1000)


def _parse_id(student_id):
    """Canonical uuid string, or None when the id can never match a row."""
    try:
        return str(uuid.UUID(str(student_id)))
    except ValueError:
        return None


def _row_to_student(row: dict) -> dict:
    return {
        "id": str(row.get("id")),
        "student_no": row.get("student_no", ""),
        "full_name": row.get("full_name", ""),
        "gender": row.get("gender", ""),
        "scores": row.get("scores") or {},
        "average": float(row.get("average") or 0),
        "created_at": row.get("created_at"),
    }


def get_all() -> list:
    """All students, newest first. Returns [] if the store can't be read."""
    try:
        result = _table().select("*").order("created_at", desc=True).execute()
        return [_row_to_student(row) for row in result.data]
    except Exception as e:
        logger.error("Error fetching students: %s", e)
        return []


def get(student_id: str):
    """Single student by id, or None."""
    row_id = _parse_id(student_id)
    if row_id is None:
        return None
    result = _table().select("*").eq("id", row_id).limit(1).execute()
    if not result.data:
        return None
    return _row_to_student(result.data[0])


def add(form: dict) -> dict:
    """
    Insert a student from normalised form data.

    The average is derived from the scores and created_at is stamped here;
    the store assigns the id.
    """
    record = {
        "student_no": form["student_no"],
        "full_name": form["full_name"],
        "gender": form["gender"],
        "scores": form["scores"],
        "average": calculate_average(form["scores"]),
        "created_at": _now_ms(),
    }
    result = _table().insert(record).execute()
    if not result.data:
        raise Exception("Failed to save student")

    student = _row_to_student(result.data[0])
    logger.info("Student added: %s", student["id"])
    return student


def update(student_id: str, form: dict):
    """Replace editable fields and recompute the average. id and created_at are kept."""
    row_id = _parse_id(student_id)
    if row_id is None:
        return None

    changes = {
        "student_no": form["student_no"],
        "full_name": form["full_name"],
        "gender": form["gender"],
        "scores": form["scores"],
        "average": calculate_average(form["scores"]),
    }
    result = _table().update(changes).eq("id", row_id).execute()
    if not result.data:
        return None

    logger.info("Student updated: %s", student_id)
    return _row_to_student(result.data[0])


def delete(student_id: str) -> bool:
    row_id = _parse_id(student_id)
    if row_id is None:
        return False
    result = _table().delete().eq("id", row_id).execute()
    deleted = bool(result.data)
    if deleted:
        logger.info("Student deleted: %s", student_id)
    return deleted
