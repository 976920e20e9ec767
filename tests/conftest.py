"""
Shared test fixtures for TemrinTakip.
Monkeypatches the Supabase client and the Gemini SDK with in-memory fakes.
Zero network calls.
"""
import itertools
import json
import uuid
from types import SimpleNamespace

import pytest


class FakeQuery:
    """Just enough of the supabase-py query builder for the student store."""

    def __init__(self, table, op="select", payload=None):
        self.table = table
        self.op = op
        self.payload = payload
        self.filters = []
        self.order_by = None
        self.limit_n = None

    def select(self, *_columns):
        self.op = "select"
        return self

    def insert(self, payload):
        self.op, self.payload = "insert", payload
        return self

    def update(self, payload):
        self.op, self.payload = "update", payload
        return self

    def delete(self):
        self.op = "delete"
        return self

    def eq(self, column, value):
        if column == "id":
            try:
                uuid.UUID(str(value))
            except ValueError:
                raise RuntimeError("invalid input syntax for type uuid: \"%s\"" % value)
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.order_by = (column, desc)
        return self

    def limit(self, n):
        self.limit_n = n
        return self

    def _matches(self, row):
        return all(row.get(col) == val for col, val in self.filters)

    def execute(self):
        if self.table.fail:
            raise RuntimeError("store unavailable")

        rows = self.table.rows
        if self.op == "insert":
            row = dict(self.payload, id=str(uuid.uuid4()))
            rows.append(row)
            data = [dict(row)]
        elif self.op == "update":
            data = []
            for row in rows:
                if self._matches(row):
                    row.update(self.payload)
                    data.append(dict(row))
        elif self.op == "delete":
            data = [dict(r) for r in rows if self._matches(r)]
            self.table.rows = [r for r in rows if not self._matches(r)]
        else:
            data = [dict(r) for r in rows if self._matches(r)]
            if self.order_by:
                column, desc = self.order_by
                data.sort(key=lambda r: r.get(column), reverse=desc)
            if self.limit_n is not None:
                data = data[:self.limit_n]
        return SimpleNamespace(data=data)


class FakeTable:
    def __init__(self):
        self.rows = []
        self.fail = False

    def select(self, *columns):
        return FakeQuery(self).select(*columns)

    def insert(self, payload):
        return FakeQuery(self).insert(payload)

    def update(self, payload):
        return FakeQuery(self).update(payload)

    def delete(self):
        return FakeQuery(self).delete()


class FakeSupabase:
    def __init__(self):
        self.tables = {}

    def table(self, name):
        return self.tables.setdefault(name, FakeTable())


class FakeGemini:
    """Stands in for the google.generativeai module."""

    def __init__(self):
        self.reply = None
        self.error = None
        self.calls = []

    def configure(self, api_key=None):
        self.api_key = api_key

    def GenerationConfig(self, **kwargs):
        return kwargs

    def GenerativeModel(self, model_name, system_instruction=None):
        fake = self

        class _Model:
            def generate_content(self, prompt, generation_config=None):
                fake.calls.append({
                    "model": model_name,
                    "system_instruction": system_instruction,
                    "prompt": prompt,
                    "generation_config": generation_config,
                })
                if fake.error:
                    raise fake.error
                return SimpleNamespace(text=fake.reply)

        return _Model()


SAMPLE_ANALYSIS = {
    "summary": "Sınıf genel olarak başarılı.",
    "strengths": ["Temrin 3 yüksek"],
    "weaknesses": ["Temrin 1 düşük"],
    "recommendations": ["Tekrar yapın", "Grup çalışması", "Ek ödev"],
}


@pytest.fixture
def fake_db(monkeypatch):
    """In-memory Supabase client wired into the student store.
    Creation times tick one second per insert so ordering is deterministic."""
    from temrintakip.services import student_service
    db = FakeSupabase()
    clock = itertools.count(1_700_000_000_000, 1000)
    monkeypatch.setattr(student_service, "supabase", db)
    monkeypatch.setattr(student_service, "_now_ms", lambda: next(clock))
    return db


@pytest.fixture
def students_table(fake_db):
    from temrintakip.config import config
    return fake_db.table(config.students_table)


@pytest.fixture
def fake_gemini(monkeypatch):
    from temrintakip.config import config
    from temrintakip.services import ai_analysis
    gemini = FakeGemini()
    gemini.reply = json.dumps(SAMPLE_ANALYSIS, ensure_ascii=False)
    monkeypatch.setattr(ai_analysis, "genai", gemini)
    monkeypatch.setattr(config, "gemini_api_key", "test-key")
    return gemini


@pytest.fixture(autouse=True)
def _reset_analysis():
    from temrintakip.routes.analytics_routes import reset_analysis
    reset_analysis()
    yield
    reset_analysis()


@pytest.fixture
def app(fake_db):
    from temrintakip.app import create_app
    return create_app({"TESTING": True})


@pytest.fixture
def client(app):
    return app.test_client()


def _make_form(student_no="101", full_name="Ahmet Yılmaz", gender="Erkek", scores=(80, 70, 90, 60, 100)):
    return {
        "student_no": student_no,
        "full_name": full_name,
        "gender": gender,
        "scores": {f"t{i}": s for i, s in enumerate(scores, start=1)},
    }


@pytest.fixture
def sample_students(fake_db):
    """Three stored students, created oldest to newest."""
    from temrintakip.services import student_service
    created = []
    for form in (
        _make_form("101", "Ahmet Yılmaz", "Erkek", (80, 70, 90, 60, 100)),
        _make_form("102", "Ayşe Demir", "Kadın", (40, 30, 50, 20, 45)),
        _make_form("203", "Mehmet Kaya", "Erkek", (55, 65, 75, 45, 50)),
    ):
        created.append(student_service.add(form))
    return created


@pytest.fixture
def make_form():
    """Factory for normalised student form data."""
    return _make_form
