import logging

from .errors import ExtractionError

logger = logging.getLogger(__name__)


def extract_txt(data):
    """Decode a plain-text upload, falling back to Latin-1 when it isn't valid UTF-8."""
    if not data:
        raise ExtractionError("Text file is empty.")

    text = data.decode("utf-8-sig", errors="replace")
    if "\ufffd" in text:
        logger.debug("Text file is not valid UTF-8, decoding as Latin-1")
        text = data.decode("latin-1")
    return text
