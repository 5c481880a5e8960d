import logging

from matching.completion import CompletionClient
from matching.prompts import RESUME_ANALYZER_PROMPT, RESUME_USER_TEMPLATE
from matching.results import load_json_object, parse_analysis
from parsers.document import document_to_text
from parsers.upload import validate_upload
from schemas import AnalysisResult

logger = logging.getLogger(__name__)

# keeps the prompt well inside the model context for long CVs
MAX_RESUME_CHARS = 12000


def analyze_resume(
    client: CompletionClient,
    data: bytes,
    media_type: str,
    filename: str = "resume",
) -> AnalysisResult:
    """Score an uploaded resume against the portfolio owner's skill profile."""
    validate_upload(filename, media_type, len(data))
    text = document_to_text(data, media_type)
    if len(text) > MAX_RESUME_CHARS:
        logger.info("Truncating resume text from %d to %d chars", len(text), MAX_RESUME_CHARS)
        text = text[:MAX_RESUME_CHARS]

    raw = client.complete(
        RESUME_ANALYZER_PROMPT,
        [{"role": "user", "content": RESUME_USER_TEMPLATE.format(filename=filename, resume=text)}],
        json_mode=True,
    )
    result = parse_analysis(load_json_object(raw))
    logger.info("Resume analysis scored %d%%", result.match_score)
    return result

