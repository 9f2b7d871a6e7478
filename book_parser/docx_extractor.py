import io
import logging

from docx import Document

from .errors import ExtractionError

logger = logging.getLogger(__name__)


def extract_docx(data):
    """Extract text from Word (.docx) bytes.

    Every paragraph is kept, empty ones included, joined by blank lines: a run
    of empty paragraphs in the document is how authors mark section breaks.
    Raises ExtractionError for corrupt or empty documents.
    """
    try:
        doc = Document(io.BytesIO(data))
    except Exception as e:
        logger.error("DOCX parsing error: %s", e)
        raise ExtractionError("Failed to parse DOCX file. The file may be corrupted.") from e

    paragraphs = [para.text.strip() for para in doc.paragraphs]
    if not any(paragraphs):
        raise ExtractionError("Word document contains no extractable text.")

    return "\n\n".join(paragraphs)
