import re

from .models import UNKNOWN_AUTHOR

MAX_SCAN_LINES = 20
TITLE_SCAN_LINES = 5
MIN_LINE_LENGTH = 3
MAX_LINE_LENGTH = 150

_HEADING_START = re.compile(r"^(chapter|part|section)", re.IGNORECASE)
_BY_PREFIX = re.compile(r"^by\s+", re.IGNORECASE)
_PERSON_NAME = re.compile(r"^[A-Z][a-z]+ [A-Z][a-z]+$")
_FILE_EXTENSION = re.compile(r"\.(pdf|docx|doc|txt)$", re.IGNORECASE)


def _is_candidate(line):
    return (
        MIN_LINE_LENGTH <= len(line) < MAX_LINE_LENGTH
        and not _HEADING_START.match(line)
    )


def title_from_filename(file_name):
    """Turn "my_great-novel.pdf" into "my great novel"."""
    name = _FILE_EXTENSION.sub("", file_name)
    name = re.sub(r"[-_]", " ", name)
    name = re.sub(r"\s+", " ", name).strip()
    return name or "Untitled"


def extract_metadata(text, file_name):
    """Guess (title, author) from the opening lines of a manuscript.

    The first plausible line within the first five becomes the title. Later
    lines are checked for an author: "by Someone" or a bare "First Last".
    """
    title = ""
    author = ""

    for index, raw in enumerate(text.split("\n")[:MAX_SCAN_LINES]):
        line = raw.strip()
        if not _is_candidate(line):
            continue

        if not title:
            if index >= TITLE_SCAN_LINES:
                break
            title = line
            continue

        if _BY_PREFIX.match(line):
            author = _BY_PREFIX.sub("", line).strip()
            break
        if _PERSON_NAME.match(line):
            author = line
            break

    if not title:
        title = title_from_filename(file_name)

    return title, author or UNKNOWN_AUTHOR
