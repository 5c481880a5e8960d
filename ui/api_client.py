import logging
from typing import List, Optional

import requests
from pydantic import ValidationError as PydanticValidationError

from errors import (
    AuthenticationError,
    ParseError,
    PortfolioAIError,
    SchemaError,
    TransportError,
    ValidationError,
    upstream_error_for,
)
from parsers.upload import StagedFile
from schemas import AnalysisResponse, ChatResponse, Message, RecommendationResponse

logger = logging.getLogger(__name__)


class PortfolioAPI:
    """HTTP client the widgets use to reach the portfolio API service."""

    def __init__(self, base_url: str, timeout: float = 60, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _post(self, path: str, **kwargs) -> dict:
        try:
            r = self.session.post(f"{self.base_url}{path}", timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Connection error: {e}") from e

        if not 200 <= r.status_code < 300:
            raise _error_from_response(r)
        try:
            return r.json()
        except ValueError as e:
            raise ParseError("API response was not JSON") from e

    def recommend_project(self, interest: str):
        data = self._post("/api/recommend-project", json={"interest": interest})
        return _shape(RecommendationResponse, data).recommendation

    def analyze_resume(self, staged: StagedFile):
        files = {"resume": (staged.name, staged.data, staged.media_type)}
        data = self._post("/api/analyze-resume", files=files)
        return _shape(AnalysisResponse, data).analysis

    def chat(self, messages: List[Message]) -> str:
        payload = {"messages": [m.model_dump() for m in messages]}
        data = self._post("/api/chat", json=payload)
        return _shape(ChatResponse, data).reply


def _shape(model, data):
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise SchemaError(f"Unexpected {model.__name__} shape") from e


def _error_from_response(r) -> PortfolioAIError:
    """Rebuild the server-side error kind from an error response."""
    try:
        body = r.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}
    kind = body.get("kind")
    detail = body.get("detail")
    if not isinstance(detail, str):
        # FastAPI request-validation errors put a list under "detail"
        detail = f"HTTP {r.status_code}"
    message = body.get("message") or detail

    if kind == "validation" or r.status_code in (400, 413, 415, 422):
        return ValidationError(detail, status_code=r.status_code)
    if kind == "transport":
        return TransportError(message)
    if kind == "auth":
        return AuthenticationError(message)
    if kind == "parse":
        return ParseError(message)
    if kind == "schema":
        return SchemaError(message)
    return upstream_error_for(r.status_code, message)
