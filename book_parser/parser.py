"""
Turn an uploaded manuscript into a ParsedBook.

    bytes -> extract_text -> normalize -> metadata
          -> heading patterns -> page breaks -> single chapter -> word-count split
          -> cap chapter count
"""

import logging
from functools import partial

from .chapter_splitter import detect_by_page_breaks, detect_by_pattern, split_by_word_count
from .errors import InsufficientContentError, UnsupportedFileTypeError
from .extractors import extract_text
from .metadata import extract_metadata
from .models import (
    DetectionMethod,
    DetectionResult,
    FileType,
    ParsedBook,
    ParsedChapter,
    ParserOptions,
)
from .text_cleaner import count_words, normalize

logger = logging.getLogger(__name__)

MIN_TOTAL_WORDS = 100


def _read_bytes(file):
    if isinstance(file, (bytes, bytearray)):
        return bytes(file)
    return file.read()


def _coerce_file_type(file_type):
    try:
        return FileType(file_type)
    except ValueError:
        raise UnsupportedFileTypeError(f"Unsupported file type: {file_type}") from None


def detect_single_chapter(text, preferred_chapter_length):
    """Keep a short document whole instead of force-splitting it."""
    if count_words(text) >= preferred_chapter_length * 2:
        return None
    chapter = ParsedChapter(number=1, title="Full Content", content=text)
    return DetectionResult([chapter], DetectionMethod.SINGLE_CHAPTER)


def detection_strategies(options):
    """Detectors in fallback order; each returns None to pass to the next."""
    return (
        detect_by_pattern,
        partial(detect_by_page_breaks, min_chapter_word_count=options.min_chapter_word_count),
        partial(detect_single_chapter, preferred_chapter_length=options.preferred_chapter_length),
    )


def detect_chapters(text, options=None):
    """Run the detectors in order and return the first successful DetectionResult."""
    options = options or ParserOptions()
    for strategy in detection_strategies(options):
        result = strategy(text)
        if result is not None:
            return result
    return split_by_word_count(text, options.preferred_chapter_length)


def parse_book_file(file, file_name, file_type, options=None):
    """Parse an uploaded book into title, author and chapters.

    Args:
        file: Raw bytes or a readable binary file object
        file_name: Original upload name (used for the title fallback)
        file_type: "pdf", "docx" or "txt" (or a FileType)
        options: ParserOptions, defaults if omitted

    Returns:
        ParsedBook

    Raises:
        UnsupportedFileTypeError: Unknown file type
        ExtractionError: Corrupt, encrypted or empty binary
        InsufficientContentError: No text, or fewer than 100 words
    """
    options = options or ParserOptions()
    file_type = _coerce_file_type(file_type)
    data = _read_bytes(file)

    raw_content = normalize(extract_text(data, file_type))
    if not raw_content:
        raise InsufficientContentError("No text content could be extracted from the file.")

    total_word_count = count_words(raw_content)
    if total_word_count < MIN_TOTAL_WORDS:
        raise InsufficientContentError(
            f"The file contains too little text content (less than {MIN_TOTAL_WORDS} words)."
        )

    title, author = extract_metadata(raw_content, file_name)

    result = detect_chapters(raw_content, options)
    chapters = result.chapters
    logger.info(
        "Detected %d chapter(s) in %s using %s",
        len(chapters), file_name, result.method.value,
    )

    truncated = len(chapters) > options.max_chapters
    if truncated:
        logger.warning(
            "%s: keeping first %d of %d chapters",
            file_name, options.max_chapters, len(chapters),
        )
        chapters = chapters[:options.max_chapters]

    return ParsedBook(
        title=title,
        author=author,
        chapters=tuple(chapters),
        total_word_count=total_word_count,
        raw_content=raw_content,
        file_type=file_type,
        file_name=file_name,
        file_size=len(data),
        detection_method=result.method,
        truncated=truncated,
    )
