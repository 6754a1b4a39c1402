from __future__ import annotations

import pytest
import requests

from smartattend.analytics.model import TrendPoint
from smartattend.container import build_container
from smartattend.core.constants import INSIGHT_FALLBACK_TEXT
from smartattend.insights.gateway import DisabledInsightGateway, HttpInsightGateway
from smartattend.insights.model import AtRiskEntry, InsightRequest
from smartattend.storage.memory_store import InMemoryRecordStore


class FakeResponse:
    def __init__(self, *, status_code=200, body=None, invalid_json=False):
        self.status_code = status_code
        self._body = body
        self._invalid_json = invalid_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)

    def json(self):
        if self._invalid_json:
            raise ValueError("not json")
        return self._body


class FakeSession:
    def __init__(self, response=None, error=None):
        self._response = response
        self._error = error
        self.calls = []

    def post(self, url, *, headers, json, timeout):
        self.calls.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        if self._error:
            raise self._error
        return self._response


def _request():
    return InsightRequest(
        batch_name="CS 2024 - A",
        total_classes=3,
        attendance_rate=50.0,
        recent_trend=[TrendPoint(name="2026-02-01", present=1, absent=1)],
        at_risk_students=[AtRiskEntry(name="Ben", rate=0.0, absent_count=3)],
    )


def test_posts_summary_and_returns_text():
    session = FakeSession(FakeResponse(body={"text": "  Attendance is steady.  "}))
    gateway = HttpInsightGateway("https://insights.local/generate", api_key="k", timeout=3, session=session)

    assert gateway.generate(_request()) == "Attendance is steady."

    call = session.calls[0]
    assert call["timeout"] == 3
    assert call["headers"]["Authorization"] == "Bearer k"
    assert call["json"] == {
        "batchName": "CS 2024 - A",
        "totalClasses": 3,
        "attendanceRate": 50.0,
        "recentTrend": [{"name": "2026-02-01", "present": 1, "absent": 1}],
        "atRiskStudents": [{"name": "Ben", "rate": 0.0, "absentCount": 3}],
    }


@pytest.mark.parametrize(
    "session",
    [
        FakeSession(error=requests.Timeout("slow")),
        FakeSession(error=requests.ConnectionError("down")),
        FakeSession(FakeResponse(status_code=502, body={"text": "x"})),
        FakeSession(FakeResponse(invalid_json=True)),
        FakeSession(FakeResponse(body={"text": ""})),
        FakeSession(FakeResponse(body={"message": "no text"})),
        FakeSession(FakeResponse(body=["text"])),
    ],
)
def test_failures_fall_back_to_fixed_text(session):
    gateway = HttpInsightGateway("https://insights.local/generate", session=session)

    assert gateway.generate(_request()) == INSIGHT_FALLBACK_TEXT


def test_disabled_gateway_returns_fallback():
    assert DisabledInsightGateway().generate(_request()) == INSIGHT_FALLBACK_TEXT


def test_service_builds_request_from_range_and_leaves_store_untouched():
    store = InMemoryRecordStore()
    session = FakeSession(error=requests.Timeout("slow"))
    container = build_container(store=store, gateway=HttpInsightGateway("https://x", session=session))

    batch = container.batch_service.create_batch("CS 2024 - A")
    ann = container.student_service.add_student(batch.id, "Ann")
    container.student_service.add_student(batch.id, "Ben")
    for day in range(1, 10):
        container.attendance_service.mark_batch(batch.id, f"2026-02-{day:02d}", {ann.id: "ABSENT"})
    before = dict(store.raw)

    text = container.insight_service.generate_for_batch(batch.id, "2026-02-01", "2026-02-28")

    assert text == INSIGHT_FALLBACK_TEXT
    assert store.raw == before

    payload = session.calls[0]["json"]
    assert payload["batchName"] == "CS 2024 - A"
    assert payload["totalClasses"] == 9
    assert payload["attendanceRate"] == 50.0
    assert len(payload["recentTrend"]) == 7
    assert payload["recentTrend"][-1]["name"] == "2026-02-09"
    assert payload["atRiskStudents"] == [{"name": "Ann", "rate": 0.0, "absentCount": 9}]
