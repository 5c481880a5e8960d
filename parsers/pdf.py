import io
import logging

import fitz  # PyMuPDF
from PyPDF2 import PdfReader

logger = logging.getLogger(__name__)


def pdf_to_text(data: bytes) -> str:
    """
    Extract text from an in-memory PDF.
    Uses PyMuPDF first and falls back to PyPDF2 for files it cannot read.
    """
    text = ""

    # ---------- Attempt 1: PyMuPDF ----------
    try:
        doc = fitz.open(stream=data, filetype="pdf")
        text = "\n".join(page.get_text("text") for page in doc)
        doc.close()
        if text.strip():
            return text.strip()
    except Exception as e:
        logger.warning("PyMuPDF extraction failed: %s", e)

    # ---------- Attempt 2: PyPDF2 ----------
    try:
        reader = PdfReader(io.BytesIO(data))
        text = "\n".join((page.extract_text() or "") for page in reader.pages)
    except Exception as e:
        logger.warning("PyPDF2 extraction failed: %s", e)
        return ""
    return text.strip()
