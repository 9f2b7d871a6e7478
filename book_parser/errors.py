"""
Exceptions raised while parsing and editing uploaded books.

Everything derives from ValueError so callers that already treat bad input
as a ValueError (the upload routes do) keep working unchanged.
"""


class BookParseError(ValueError):
    """Base class for failures while turning an upload into a ParsedBook."""


class UnsupportedFileTypeError(BookParseError):
    """The requested file type has no extractor."""


class ExtractionError(BookParseError):
    """Raw text could not be pulled out of the file (corrupt, encrypted, empty)."""


class InsufficientContentError(BookParseError):
    """The extracted text is empty or too short to segment."""


class ChapterEditError(ValueError):
    """A merge or split request that would break the chapter sequence."""
