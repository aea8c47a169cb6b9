"""
Pytest Configuration and Shared Fixtures.

- fake_client: stand-in for genai.Client with a scripted aio.models.generate_content
- make_record: builds a complete raw oracle record
- sample_records: ten valid raw records with distinct ratios
"""

import json
from types import SimpleNamespace

import pytest


class FakeModels:
    """Scripted replacement for client.aio.models"""

    def __init__(self):
        self.calls = []
        self.text = None
        self.error = None

    async def generate_content(self, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


class FakeClient:
    def __init__(self):
        self.models = FakeModels()
        self.aio = SimpleNamespace(models=self.models)

    def respond_with(self, text):
        self.models.text = text
        self.models.error = None

    def respond_with_records(self, records):
        self.respond_with(json.dumps(records))

    def fail_with(self, error):
        self.models.error = error

    @property
    def calls(self):
        return self.models.calls


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()


def _make_record(record_id="item-1", views=1000, likes=50, comments=10, **overrides) -> dict:
    record = {
        "id": record_id,
        "title": f"Title {record_id}",
        "author": "Test Author",
        "views": views,
        "likes": likes,
        "comments": comments,
        "description": f"Description of {record_id}",
        "thumbnail": "https://example.com/oracle-thumb.jpg",
        "publishedAt": "2024-01-15T12:00:00Z",
    }
    record.update(overrides)
    return record


@pytest.fixture
def make_record():
    """Return a factory for complete raw records"""
    return _make_record


@pytest.fixture
def sample_records() -> list:
    """Ten valid records; record i has ratio (i + 1) / 100"""
    return [
        _make_record(f"item-{i}", views=100, likes=i + 1, comments=0)
        for i in range(10)
    ]
