"""Shared data types for parsed books."""

from dataclasses import dataclass, field, replace
from enum import Enum

from .text_cleaner import count_words

UNKNOWN_AUTHOR = "Unknown Author"

DEFAULT_MIN_CHAPTER_WORD_COUNT = 500
DEFAULT_MAX_CHAPTERS = 100
DEFAULT_PREFERRED_CHAPTER_LENGTH = 3000


class FileType(str, Enum):
    PDF = "pdf"
    DOCX = "docx"
    TXT = "txt"


class DetectionMethod(str, Enum):
    CHAPTER_HEADING = "chapter_heading"
    NUMBERED_SECTIONS = "numbered_sections"
    PAGE_BREAKS = "page_breaks"
    WORD_COUNT_SPLIT = "word_count_split"
    SINGLE_CHAPTER = "single_chapter"


@dataclass(frozen=True)
class ParserOptions:
    min_chapter_word_count: int = DEFAULT_MIN_CHAPTER_WORD_COUNT
    max_chapters: int = DEFAULT_MAX_CHAPTERS
    preferred_chapter_length: int = DEFAULT_PREFERRED_CHAPTER_LENGTH


@dataclass(frozen=True)
class ParsedChapter:
    """One detected chapter.

    Content is trimmed on construction and must not be empty. The word count
    is always derived from the content, never passed in.
    """
    number: int
    title: str
    content: str
    start_position: int | None = None
    end_position: int | None = None
    word_count: int = field(init=False)

    def __post_init__(self):
        content = self.content.strip()
        if not content:
            raise ValueError(f"Chapter {self.number} has no content.")
        object.__setattr__(self, "content", content)
        object.__setattr__(self, "word_count", count_words(content))
        if not self.title.strip():
            object.__setattr__(self, "title", f"Chapter {self.number}")

    def to_dict(self):
        return {
            "number": self.number,
            "title": self.title,
            "content": self.content,
            "word_count": self.word_count,
            "start_position": self.start_position,
            "end_position": self.end_position,
        }

    @classmethod
    def from_dict(cls, data, number=None):
        """Build a chapter from a JSON payload; any supplied word count is ignored."""
        return cls(
            number=number if number is not None else int(data.get("number", 1)),
            title=str(data.get("title") or ""),
            content=str(data.get("content") or ""),
            start_position=data.get("start_position"),
            end_position=data.get("end_position"),
        )


@dataclass(frozen=True)
class DetectionResult:
    chapters: list
    method: DetectionMethod


@dataclass(frozen=True)
class ParsedBook:
    title: str
    author: str
    chapters: tuple
    total_word_count: int
    raw_content: str
    file_type: FileType
    file_name: str
    file_size: int
    detection_method: DetectionMethod
    truncated: bool = False

    def to_dict(self, include_raw_content=False):
        data = {
            "title": self.title,
            "author": self.author,
            "chapters": [ch.to_dict() for ch in self.chapters],
            "chapter_count": len(self.chapters),
            "total_word_count": self.total_word_count,
            "file_type": self.file_type.value,
            "file_name": self.file_name,
            "file_size": self.file_size,
            "detection_method": self.detection_method.value,
            "truncated": self.truncated,
        }
        if include_raw_content:
            data["raw_content"] = self.raw_content
        return data


def renumber_chapters(chapters):
    """Return a new list with chapter numbers reassigned 1..N in order."""
    return [
        ch if ch.number == i else replace(ch, number=i)
        for i, ch in enumerate(chapters, start=1)
    ]
