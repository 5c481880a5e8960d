"""Validation of the JSON the completion service sends back for the structured flows."""
import json
import logging
import re
from typing import List

from pydantic import ValidationError as PydanticValidationError

from errors import ParseError, SchemaError
from schemas import AnalysisResult, Project, RecommendationResult

logger = logging.getLogger(__name__)

_FENCE = re.compile(r"^\s*```(?:json)?\s*(.*?)\s*```\s*$", re.DOTALL | re.IGNORECASE)


def load_json_object(raw: str) -> dict:
    """Decode generated text into a JSON object, tolerating a ```json fence."""
    if not isinstance(raw, str) or not raw.strip():
        raise ParseError("Empty response body")
    m = _FENCE.match(raw)
    text = m.group(1) if m else raw
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Response was not valid JSON: {e.msg}") from e
    if not isinstance(data, dict):
        raise ParseError("Response JSON was not an object")
    return data


def _validate(model, data: dict, what: str):
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        logger.warning("Malformed %s from completion service; bad fields: %s", what, fields)
        raise SchemaError(f"Malformed {what}: {', '.join(fields)}") from e


def parse_recommendation(data: dict, projects: List[Project]) -> RecommendationResult:
    result = _validate(RecommendationResult, data, "recommendation")

    project = next((p for p in projects if p.id == result.project_id), None)
    if project is None:
        logger.warning("Recommendation named unknown project %r", result.project_id)
        raise SchemaError(f"Unknown projectId: {result.project_id}")
    if result.live_url is None and project.live_url:
        result = result.model_copy(update={"live_url": project.live_url})
    return result


def parse_analysis(data: dict) -> AnalysisResult:
    return _validate(AnalysisResult, data, "analysis")
