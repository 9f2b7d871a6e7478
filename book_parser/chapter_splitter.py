"""
Chapter detection for plain extracted text.

Strategies, tried by the parser in this order:
  1. Heading patterns   - "Chapter 3: Title", "Part II", "4. Title", "IV. Title"
  2. Page breaks        - runs of blank lines, accreted up to a word threshold
  3. Word-count split   - fixed-size chunks cut at sentence ends where possible

Each detector takes normalized text and returns a DetectionResult, or None
when it found no usable structure.
"""

import logging
import re
from collections import namedtuple

from .models import (
    DEFAULT_MIN_CHAPTER_WORD_COUNT,
    DEFAULT_PREFERRED_CHAPTER_LENGTH,
    DetectionMethod,
    DetectionResult,
    ParsedChapter,
    renumber_chapters,
)
from .text_cleaner import count_words

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MAX_HEADING_LENGTH = 200
MIN_PREAMBLE_WORDS = 200
MIN_TRAILING_WORDS = 100
MAX_TITLE_LINE_LENGTH = 100
SENTENCE_BREAK_RATIO = 0.7

# Written-out numbers
WORD_TO_NUM = {
    "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10,
    "eleven": 11, "twelve": 12, "thirteen": 13, "fourteen": 14,
    "fifteen": 15, "sixteen": 16, "seventeen": 17, "eighteen": 18,
    "nineteen": 19, "twenty": 20,
}

ROMAN_TO_NUM = {
    "i": 1, "ii": 2, "iii": 3, "iv": 4, "v": 5,
    "vi": 6, "vii": 7, "viii": 8, "ix": 9, "x": 10,
    "xi": 11, "xii": 12, "xiii": 13, "xiv": 14, "xv": 15,
    "xvi": 16, "xvii": 17, "xviii": 18, "xix": 19, "xx": 20,
}

_SPELLED = "|".join(sorted(WORD_TO_NUM, key=len, reverse=True))
_TITLE_SEP = r"\s*(?:[:.\-–—]\s*)?(.*)$"

# (kind, regex) in priority order; the first match on a line wins.
HEADING_PATTERNS = (
    ("chapter", re.compile(
        r"^(?:chapter|ch\.?)(?![a-z])\s*"
        r"(\d+|\w+ty-\w+\b|(?:" + _SPELLED + r")\b|\w+teen\b|\w+ty\b|[ivxlcdm]+\b)"
        + _TITLE_SEP,
        re.IGNORECASE,
    )),
    ("part", re.compile(
        r"^part(?![a-z])\s*"
        r"(\d+|(?:one|two|three|four|five|six|seven|eight|nine|ten)\b|[ivxlcdm]+\b)"
        + _TITLE_SEP,
        re.IGNORECASE,
    )),
    ("numbered", re.compile(r"^(\d+)[.)]\s+(.+)$")),
    ("roman", re.compile(r"^([IVXLCDM]+)[.)]\s+(.+)$")),
    ("section", re.compile(r"^section\s*(\d+)" + _TITLE_SEP, re.IGNORECASE)),
)

# Headings of these kinds look like a numbered list rather than named chapters.
_NUMBERED_KINDS = frozenset({"numbered", "roman"})

_PAGE_BREAK = re.compile(r"\n{3,}")

HeadingMarker = namedtuple("HeadingMarker", "line_index number title kind")


# ---------------------------------------------------------------------------
# Number normalization
# ---------------------------------------------------------------------------

def parse_chapter_number(token):
    """Parse a heading numeral (digits, spelled-out word or roman) to an int.

    Falls back to 1 rather than raising: chapters are renumbered by position
    afterwards, so a heading we can't read must not abort detection.
    """
    token = token.strip().lower()
    if token.isdigit():
        return int(token)
    if token in WORD_TO_NUM:
        return WORD_TO_NUM[token]
    if token in ROMAN_TO_NUM:
        return ROMAN_TO_NUM[token]
    return 1


# ---------------------------------------------------------------------------
# Strategy 1: heading patterns
# ---------------------------------------------------------------------------

def match_heading(line):
    """Return (kind, number, title) if the line looks like a heading, else None."""
    line = line.strip()
    if not line or len(line) >= MAX_HEADING_LENGTH:
        return None
    for kind, pattern in HEADING_PATTERNS:
        m = pattern.match(line)
        if m:
            number = parse_chapter_number(m.group(1))
            title = (m.group(2) or "").strip() or f"Chapter {number}"
            return kind, number, title
    return None


def _has_following_content(lines, index):
    """A heading must be followed by text on one of the next two lines."""
    return any(line.strip() for line in lines[index + 1:index + 3])


def find_heading_markers(lines):
    markers = []
    for i, line in enumerate(lines):
        found = match_heading(line)
        if found and _has_following_content(lines, i):
            kind, number, title = found
            markers.append(HeadingMarker(i, number, title, kind))
    return markers


def detect_by_pattern(text):
    """Carve the text into chapters at validated heading lines."""
    lines = text.split("\n")
    markers = find_heading_markers(lines)

    if len(markers) < 2:
        logger.debug("Pattern detection: %d heading(s) found, need 2", len(markers))
        return None

    chapters = []
    for i, marker in enumerate(markers):
        end = markers[i + 1].line_index if i + 1 < len(markers) else len(lines)
        content = "\n".join(lines[marker.line_index + 1:end]).strip()
        if not content:
            # Two headings on adjacent lines
            continue
        chapters.append(ParsedChapter(
            number=len(chapters) + 1,
            title=marker.title,
            content=content,
            start_position=marker.line_index,
            end_position=end,
        ))

    first_line = markers[0].line_index
    if first_line > 0:
        preamble = "\n".join(lines[:first_line]).strip()
        if count_words(preamble) > MIN_PREAMBLE_WORDS:
            chapters.insert(0, ParsedChapter(
                number=0,
                title="Introduction",
                content=preamble,
                start_position=0,
                end_position=first_line,
            ))
        elif preamble:
            logger.debug("Discarding %d-word front matter", count_words(preamble))

    chapters = renumber_chapters(chapters)
    if len(chapters) < 2:
        return None

    if all(m.kind in _NUMBERED_KINDS for m in markers):
        method = DetectionMethod.NUMBERED_SECTIONS
    else:
        method = DetectionMethod.CHAPTER_HEADING
    return DetectionResult(chapters, method)


# ---------------------------------------------------------------------------
# Strategy 2: page breaks
# ---------------------------------------------------------------------------

def _split_title(buffer, number):
    """Use a short first line as the chapter title when there is body text after it."""
    lines = buffer.split("\n")
    first = lines[0].strip()
    if 0 < len(first) < MAX_TITLE_LINE_LENGTH and len(lines) > 1:
        rest = "\n".join(lines[1:]).strip()
        if rest:
            return first, rest
    return f"Chapter {number}", buffer


def detect_by_page_breaks(text, min_chapter_word_count=DEFAULT_MIN_CHAPTER_WORD_COUNT):
    """Split on runs of blank lines, accreting sections until each is long enough."""
    sections = [s.strip() for s in _PAGE_BREAK.split(text)]
    sections = [s for s in sections if s]
    if len(sections) < 2:
        return None

    chapters = []
    buffer = ""
    for section in sections:
        buffer = f"{buffer}\n\n{section}" if buffer else section
        if count_words(buffer) >= min_chapter_word_count:
            number = len(chapters) + 1
            title, content = _split_title(buffer, number)
            chapters.append(ParsedChapter(number=number, title=title, content=content))
            buffer = ""

    if buffer:
        if count_words(buffer) >= MIN_TRAILING_WORDS:
            number = len(chapters) + 1
            chapters.append(ParsedChapter(number=number, title=f"Chapter {number}", content=buffer))
        elif chapters:
            last = chapters[-1]
            chapters[-1] = ParsedChapter(
                number=last.number,
                title=last.title,
                content=f"{last.content}\n\n{buffer}",
            )

    if len(chapters) < 2:
        logger.debug("Page-break detection: only %d chapter(s) after accretion", len(chapters))
        return None
    return DetectionResult(chapters, DetectionMethod.PAGE_BREAKS)


# ---------------------------------------------------------------------------
# Strategy 3: fixed word count
# ---------------------------------------------------------------------------

def split_by_word_count(text, preferred_chapter_length=DEFAULT_PREFERRED_CHAPTER_LENGTH):
    """Cut text into chapters of roughly preferred_chapter_length words.

    Each cut moves back to the last sentence end when that keeps at least
    70% of the chunk; otherwise the chunk is cut mid-sentence. Never fails.
    """
    chapters = []

    def emit(content):
        number = len(chapters) + 1
        chapters.append(ParsedChapter(number=number, title=f"Chapter {number}", content=content))

    buffer = []
    for word in text.split():
        buffer.append(word)
        if len(buffer) < preferred_chapter_length:
            continue
        chunk = " ".join(buffer)
        cut = chunk.rfind(". ")
        if cut > len(chunk) * SENTENCE_BREAK_RATIO:
            emit(chunk[:cut + 1])
            buffer = chunk[cut + 2:].split()
        else:
            emit(chunk)
            buffer = []

    if buffer:
        emit(" ".join(buffer))

    return DetectionResult(chapters, DetectionMethod.WORD_COUNT_SPLIT)
