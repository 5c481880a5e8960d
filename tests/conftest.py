import io
import json
import os
import sys

import docx
import fitz
import pytest

BASE = os.path.dirname(os.path.dirname(__file__))
if BASE not in sys.path:
    sys.path.append(BASE)

from errors import PortfolioAIError  # noqa: E402


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None, headers=None):
        self.status_code = status_code
        self.headers = headers or {}
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def json(self):
        if self._payload is None:
            raise ValueError("not json")
        return self._payload


class FakeSession:
    """Stands in for requests.Session; plays back queued responses or exceptions."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class FakeCompletionClient:
    """Stands in for CompletionClient in flow and route tests."""

    model = "fake-model"

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def complete(self, system, messages, json_mode=False):
        self.calls.append({"system": system, "messages": messages, "json_mode": json_mode})
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, PortfolioAIError):
            raise outcome
        return outcome


def completion_payload(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


SERVICEBRIDGE = {
    "projectId": "servicebridge",
    "title": "ServiceBridge",
    "category": "Web Application",
    "reasoning": "WebSocket matching and Redis caching are core real-time techniques.",
    "matchScore": 92,
    "techOverlap": ["WebSockets", "Redis"],
}

ANALYSIS = {
    "matchScore": 78,
    "strengths": ["React", "PostgreSQL"],
    "gaps": ["Kotlin"],
    "collaborationOpportunities": ["Real-time dashboards"],
    "reasoning": "Strong overlap on the web stack.",
}


@pytest.fixture
def servicebridge_json():
    return json.dumps(SERVICEBRIDGE)


@pytest.fixture
def analysis_json():
    return json.dumps(ANALYSIS)


def make_pdf(text=None):
    doc = fitz.open()
    page = doc.new_page()
    if text:
        page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


def make_docx(text):
    document = docx.Document()
    document.add_paragraph(text)
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()
