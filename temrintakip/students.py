"""
Student record helpers.

A student is stored as a plain dict:

    {
        "id": "...",             # assigned by the store
        "student_no": "123",
        "full_name": "Ahmet Yılmaz",
        "gender": "Erkek",
        "scores": {"t1": 80, "t2": 75, "t3": 90, "t4": 60, "t5": 100},
        "average": 81.0,
        "created_at": 1718000000000,   # epoch milliseconds
    }

Everything here is pure: form normalisation, score clamping, the average
and the list search used by the pages and the API.
"""
import math
from collections.abc import Mapping
from enum import Enum

from .config import EXERCISE_COUNT, MIN_SCORE, MAX_SCORE

SCORE_KEYS = [f"t{i}" for i in range(1, EXERCISE_COUNT + 1)]


class Gender(str, Enum):
    MALE = "Erkek"
    FEMALE = "Kadın"


class StudentValidationError(ValueError):
    """Raised when submitted student data cannot be saved."""


def clamp_score(value) -> int:
    """Coerce a submitted score to an int in [MIN_SCORE, MAX_SCORE].

    Empty or non-numeric input counts as 0, fractions are truncated.
    """
    try:
        score = float(value) if value not in (None, "") else 0.0
    except (ValueError, TypeError):
        score = 0.0
    if math.isnan(score):
        score = 0.0
    return int(max(MIN_SCORE, min(MAX_SCORE, score)))


def calculate_average(scores: dict) -> float:
    """Mean of the exercise scores, rounded to one decimal place."""
    values = list(scores.values())
    if not values:
        return 0
    return round(sum(values) / len(values), 1)


def parse_gender(value) -> Gender:
    """Accept either the stored value ('Erkek') or the enum name ('male')."""
    if isinstance(value, Gender):
        return value
    if value in (None, ""):
        return Gender.MALE
    text = str(value).strip()
    for gender in Gender:
        if text == gender.value or text.upper() == gender.name:
            return gender
    raise StudentValidationError(f"Geçersiz cinsiyet: {value}")


def normalize_scores(data: dict) -> dict:
    """Read t1..t5 from a nested 'scores' mapping or from flat form keys."""
    raw = data.get("scores")
    if not isinstance(raw, dict):
        raw = data
    return {key: clamp_score(raw.get(key)) for key in SCORE_KEYS}


def normalize_student_form(data: dict) -> dict:
    """
    Validate submitted student data and return the storable form fields.

    Accepts JSON bodies (nested 'scores') and HTML form posts (flat t1..t5).
    Both camelCase and snake_case keys are understood for the text fields.
    The derived average, id and creation time are never taken from input.

    Raises:
        StudentValidationError: a required field is missing or gender is unknown
    """
    if not isinstance(data, Mapping):
        raise StudentValidationError("Öğrenci verisi gönderilmedi")

    student_no = str(data.get("student_no", data.get("studentNo")) or "").strip()
    full_name = str(data.get("full_name", data.get("fullName")) or "").strip()

    if not student_no:
        raise StudentValidationError("Öğrenci No zorunludur")
    if not full_name:
        raise StudentValidationError("Ad Soyad zorunludur")

    return {
        "student_no": student_no,
        "full_name": full_name,
        "gender": parse_gender(data.get("gender")).value,
        "scores": normalize_scores(data),
    }


def empty_form() -> dict:
    """Defaults for the 'new student' form."""
    return {
        "student_no": "",
        "full_name": "",
        "gender": Gender.MALE.value,
        "scores": {key: 0 for key in SCORE_KEYS},
    }


def is_passing(student: dict, threshold: float) -> bool:
    return (student.get("average") or 0) >= threshold


def filter_students(students: list, term: str) -> list:
    """Search by name (case-insensitive) or by student number (substring)."""
    if not term:
        return list(students)
    needle = term.lower()
    return [
        s for s in students
        if needle in (s.get("full_name") or "").lower()
        or term in (s.get("student_no") or "")
    ]
