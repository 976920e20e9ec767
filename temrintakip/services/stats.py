"""
Class statistics for the dashboard.

Recomputed from the full student list on every render; the list is small
so every figure is a single pass.
"""
import math

from temrintakip.config import PASS_THRESHOLD
from temrintakip.students import Gender, SCORE_KEYS, is_passing


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def exercise_averages(students: list) -> list:
    """Per-exercise class average, rounded to a whole point."""
    total = len(students)
    averages = []
    for i, key in enumerate(SCORE_KEYS, start=1):
        score_sum = sum((s.get("scores") or {}).get(key, 0) for s in students)
        averages.append({
            "name": f"Temrin {i}",
            "score": _round_half_up(score_sum / total) if total else 0,
        })
    return averages


def gender_counts(students: list) -> list:
    return [
        {"name": gender.value, "value": sum(1 for s in students if s.get("gender") == gender.value)}
        for gender in Gender
    ]


def top_exercise(averages: list):
    """Exercise with the highest average; on a tie the later one wins."""
    if not averages:
        return None
    best = averages[0]
    for current in averages[1:]:
        best = best if best["score"] > current["score"] else current
    return best["name"]


def compute_class_stats(students: list, pass_threshold: float = PASS_THRESHOLD):
    """
    Aggregate figures for the dashboard and the AI prompt.

    Returns None for an empty class, otherwise a dict with:
    - total_students
    - avg_score: mean of the student averages (unrounded)
    - exercise_averages: [{"name": "Temrin 1", "score": 72}, ...]
    - gender_data: [{"name": "Erkek", "value": 3}, {"name": "Kadın", "value": 2}]
    - success_rate: percentage of students with average >= pass_threshold
    - top_exercise: name of the best exercise
    - student_averages: [{"name": full_name, "avg": average}, ...]
    """
    if not students:
        return None

    total = len(students)
    avg_score = sum(s.get("average") or 0 for s in students) / total
    t_stats = exercise_averages(students)
    passed = sum(1 for s in students if is_passing(s, pass_threshold))

    return {
        "total_students": total,
        "avg_score": avg_score,
        "exercise_averages": t_stats,
        "gender_data": gender_counts(students),
        "success_rate": passed / total * 100,
        "top_exercise": top_exercise(t_stats),
        "student_averages": [
            {"name": s.get("full_name", ""), "avg": s.get("average") or 0}
            for s in students
        ],
    }
