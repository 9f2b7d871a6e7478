from .chapter_editor import merge_chapters, split_chapter
from .errors import (
    BookParseError,
    ChapterEditError,
    ExtractionError,
    InsufficientContentError,
    UnsupportedFileTypeError,
)
from .extractors import extract_text
from .file_types import get_file_type, get_supported_file_types, get_supported_mime_types
from .models import (
    DetectionMethod,
    FileType,
    ParsedBook,
    ParsedChapter,
    ParserOptions,
)
from .parser import parse_book_file
from .text_cleaner import count_words, normalize

__all__ = [
    "BookParseError",
    "ChapterEditError",
    "DetectionMethod",
    "ExtractionError",
    "FileType",
    "InsufficientContentError",
    "ParsedBook",
    "ParsedChapter",
    "ParserOptions",
    "UnsupportedFileTypeError",
    "count_words",
    "extract_text",
    "get_file_type",
    "get_supported_file_types",
    "get_supported_mime_types",
    "merge_chapters",
    "normalize",
    "parse_book_file",
    "split_chapter",
]
