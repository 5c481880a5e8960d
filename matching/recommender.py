import logging
from typing import List, Optional

from catalog.projects import PROJECTS
from errors import ValidationError
from matching.completion import CompletionClient
from matching.prompts import RECOMMENDER_USER_TEMPLATE, build_recommender_prompt
from matching.results import load_json_object, parse_recommendation
from schemas import Project, RecommendationResult

logger = logging.getLogger(__name__)

MAX_INTEREST_CHARS = 500


def recommend_project(
    client: CompletionClient,
    interest: str,
    projects: Optional[List[Project]] = None,
) -> RecommendationResult:
    """Pick the catalog project that best matches a visitor's free-text interest."""
    interest = (interest or "").strip()
    if not interest:
        raise ValidationError("Please describe what you're interested in")
    if len(interest) > MAX_INTEREST_CHARS:
        raise ValidationError(f"Interest must be at most {MAX_INTEREST_CHARS} characters")

    projects = PROJECTS if projects is None else projects
    raw = client.complete(
        build_recommender_prompt(projects),
        [{"role": "user", "content": RECOMMENDER_USER_TEMPLATE.format(interest=interest)}],
        json_mode=True,
    )
    result = parse_recommendation(load_json_object(raw), projects)
    logger.info("Recommended %s (%d%%)", result.project_id, result.match_score)
    return result
