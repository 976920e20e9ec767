"""
Test: Class statistics — averages, gender split, pass rate, best exercise.
"""
import pytest
from temrintakip.services.stats import (
    compute_class_stats, exercise_averages, gender_counts, top_exercise,
)


def _student(name, gender, scores, average):
    return {
        "full_name": name,
        "gender": gender,
        "scores": {f"t{i}": s for i, s in enumerate(scores, start=1)},
        "average": average,
    }


CLASS = [
    _student("Ahmet Yılmaz", "Erkek", (80, 70, 90, 60, 100), 80.0),
    _student("Ayşe Demir", "Kadın", (40, 30, 50, 20, 45), 37.0),
    _student("Mehmet Kaya", "Erkek", (55, 65, 75, 45, 50), 58.0),
]


class TestComputeClassStats:
    def test_empty_class(self):
        assert compute_class_stats([]) is None

    def test_totals(self):
        stats = compute_class_stats(CLASS)
        assert stats["total_students"] == 3
        assert stats["avg_score"] == pytest.approx(175 / 3)

    def test_success_rate(self):
        stats = compute_class_stats(CLASS)
        assert stats["success_rate"] == pytest.approx(200 / 3)

    def test_average_exactly_at_threshold_passes(self):
        stats = compute_class_stats([_student("A", "Erkek", (50,) * 5, 50.0)])
        assert stats["success_rate"] == 100

    def test_custom_threshold(self):
        stats = compute_class_stats(CLASS, pass_threshold=60)
        assert stats["success_rate"] == pytest.approx(100 / 3)

    def test_top_exercise(self):
        assert compute_class_stats(CLASS)["top_exercise"] == "Temrin 3"

    def test_student_averages(self):
        stats = compute_class_stats(CLASS)
        assert stats["student_averages"][1] == {"name": "Ayşe Demir", "avg": 37.0}


class TestExerciseAverages:
    def test_rounded_per_exercise(self):
        result = exercise_averages(CLASS)
        assert [e["name"] for e in result] == [f"Temrin {i}" for i in range(1, 6)]
        assert [e["score"] for e in result] == [58, 55, 72, 42, 65]

    def test_half_rounds_up(self):
        students = [_student("A", "Erkek", (50, 0, 0, 0, 0), 10), _student("B", "Erkek", (51, 0, 0, 0, 0), 10)]
        assert exercise_averages(students)[0]["score"] == 51

    def test_empty(self):
        assert all(e["score"] == 0 for e in exercise_averages([]))


class TestGenderCounts:
    def test_counts(self):
        assert gender_counts(CLASS) == [
            {"name": "Erkek", "value": 2},
            {"name": "Kadın", "value": 1},
        ]


class TestTopExercise:
    def test_tie_keeps_later(self):
        averages = [{"name": "Temrin 1", "score": 70}, {"name": "Temrin 2", "score": 70}]
        assert top_exercise(averages) == "Temrin 2"

    def test_empty(self):
        assert top_exercise([]) is None
