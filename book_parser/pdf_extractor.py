import logging

import fitz  # PyMuPDF

from .errors import ExtractionError

logger = logging.getLogger(__name__)


def extract_pdf(data):
    """Extract text from PDF bytes using PyMuPDF.

    Page texts are kept line-for-line (heading detection works on lines) and
    joined with a blank line between pages.
    Raises ExtractionError for corrupt, password-protected or empty PDFs.
    """
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except Exception as e:
        logger.error("PDF parsing error: %s", e)
        raise ExtractionError(
            "Failed to parse PDF file. The file may be corrupted or password-protected."
        ) from e

    with doc:
        if doc.is_encrypted:
            raise ExtractionError("PDF is password-protected and cannot be read.")

        if doc.page_count == 0:
            raise ExtractionError("PDF has no pages.")

        pages = []
        for page in doc:
            text = page.get_text("text").strip()
            if text:
                pages.append(text)

    if not pages:
        raise ExtractionError("PDF contains no extractable text (may be scanned/image-based).")

    logger.debug("Extracted text from %d PDF page(s)", len(pages))
    return "\n\n".join(pages)
