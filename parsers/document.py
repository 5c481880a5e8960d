import io
import logging

import docx

from config import DOCX_MEDIA_TYPE, PDF_MEDIA_TYPE
from errors import ValidationError
from parsers.pdf import pdf_to_text

logger = logging.getLogger(__name__)


def docx_to_text(data: bytes) -> str:
    try:
        document = docx.Document(io.BytesIO(data))
    except Exception as e:
        logger.warning("DOCX extraction failed: %s", e)
        return ""
    paragraphs = [p.text for p in document.paragraphs if p.text.strip()]
    # tables carry skills grids in a lot of resume templates
    for table in document.tables:
        for row in table.rows:
            cells = [c.text.strip() for c in row.cells if c.text.strip()]
            if cells:
                paragraphs.append(" | ".join(cells))
    return "\n".join(paragraphs).strip()


def document_to_text(data: bytes, media_type: str) -> str:
    """Plain text of an admitted upload. Raises ValidationError when nothing is readable."""
    if media_type == PDF_MEDIA_TYPE:
        text = pdf_to_text(data)
    elif media_type == DOCX_MEDIA_TYPE:
        text = docx_to_text(data)
    else:
        raise ValidationError("Please upload a PDF or DOCX file", status_code=415)

    if not text:
        raise ValidationError("Could not read any text from the uploaded document")
    return text
