"""
End-to-end tests for parse_book_file over plain-text uploads.
"""

import io

import pytest

from book_parser import (
    DetectionMethod,
    FileType,
    InsufficientContentError,
    ParserOptions,
    UnsupportedFileTypeError,
    parse_book_file,
)
from book_parser.parser import detect_chapters


def parse_text(text, file_name="book.txt", options=None):
    return parse_book_file(text.encode("utf-8"), file_name, "txt", options)


class TestParseBookFile:
    def test_chapter_headings(self, prose, check_chapters):
        text = f"Chapter 1\n{prose(60)}\n\nChapter 2\n{prose(60, offset=5)}"

        book = parse_text(text)

        assert book.detection_method == DetectionMethod.CHAPTER_HEADING
        assert [ch.number for ch in book.chapters] == [1, 2]
        assert book.file_type == FileType.TXT
        assert book.file_name == "book.txt"
        assert book.file_size == len(text.encode("utf-8"))
        assert book.total_word_count == 124
        assert book.raw_content == text
        assert book.truncated is False
        check_chapters(book.chapters)

    def test_metadata(self, chaptered_text):
        book = parse_text(f"The Great Journey\nby Jane Smith\n\n{chaptered_text}")

        assert book.title == "The Great Journey"
        assert book.author == "Jane Smith"
        assert len(book.chapters) == 3

    def test_title_from_filename(self, prose):
        book = parse_text(prose(300), file_name="the_silent-sea.txt")

        assert book.title == "the silent sea"
        assert book.author == "Unknown Author"

    def test_too_little_text(self, prose):
        with pytest.raises(InsufficientContentError, match="too little text content"):
            parse_text(prose(50))

    def test_blank_text(self):
        with pytest.raises(InsufficientContentError, match="No text content"):
            parse_book_file(b"  \r\n\t \n", "blank.txt", "txt")

    def test_unsupported_type(self):
        with pytest.raises(UnsupportedFileTypeError, match="Unsupported file type: epub"):
            parse_book_file(b"data", "book.epub", "epub")

    def test_page_breaks_before_word_count_split(self, prose, check_chapters):
        text = "\n\n\n\n\n".join(prose(2500, offset=i) for i in range(3))

        book = parse_text(text)

        assert book.detection_method == DetectionMethod.PAGE_BREAKS
        assert len(book.chapters) == 3
        check_chapters(book.chapters)

    def test_page_break_accretion(self, prose):
        text = "\n\n\n\n".join(prose(400, offset=i) for i in range(3))

        book = parse_text(text)

        assert book.detection_method == DetectionMethod.PAGE_BREAKS
        assert [ch.word_count for ch in book.chapters] == [800, 400]

    def test_short_document_is_single_chapter(self, prose):
        text = prose(1000)

        book = parse_text(text)

        assert book.detection_method == DetectionMethod.SINGLE_CHAPTER
        assert len(book.chapters) == 1
        assert book.chapters[0].title == "Full Content"
        assert book.chapters[0].content == text

    def test_long_unstructured_document_is_split(self, prose, check_chapters):
        book = parse_text(prose(10000))

        assert book.detection_method == DetectionMethod.WORD_COUNT_SPLIT
        assert len(book.chapters) == 4
        for ch in book.chapters[:-1]:
            assert 2100 <= ch.word_count <= 3000
            assert ch.content.endswith(".")
        check_chapters(book.chapters)

    def test_custom_preferred_length(self, prose):
        options = ParserOptions(preferred_chapter_length=500)

        book = parse_text(prose(2000), options=options)

        assert book.detection_method == DetectionMethod.WORD_COUNT_SPLIT
        assert len(book.chapters) == 5

    def test_chapter_cap_truncates(self, prose, check_chapters):
        text = "\n\n".join(f"Chapter {n}\n{prose(40)}" for n in range(1, 6))

        book = parse_text(text, options=ParserOptions(max_chapters=3))

        assert len(book.chapters) == 3
        assert book.truncated is True
        assert book.total_word_count == 5 * 42
        check_chapters(book.chapters)

    def test_file_object_input(self, chaptered_text):
        book = parse_book_file(io.BytesIO(chaptered_text.encode("utf-8")), "b.txt", FileType.TXT)

        assert len(book.chapters) == 3

    def test_windows_line_endings(self, chaptered_text):
        book = parse_text(chaptered_text.replace("\n", "\r\n"))

        assert book.detection_method == DetectionMethod.CHAPTER_HEADING
        assert len(book.chapters) == 3

    def test_latin1_text(self, prose):
        text = f"Café Stories\nby René Duval\n\n{prose(150)}"

        book = parse_book_file(text.encode("latin-1"), "cafe.txt", "txt")

        assert book.title == "Café Stories"
        assert book.author == "René Duval"

    def test_parse_is_deterministic(self, prose, chaptered_text):
        for text in (chaptered_text, prose(10000)):
            first = parse_text(text)
            second = parse_text(text)
            assert first.chapters == second.chapters
            assert first.detection_method == second.detection_method


class TestDetectChapters:
    def test_falls_through_in_order(self, prose):
        assert detect_chapters(prose(100)).method == DetectionMethod.SINGLE_CHAPTER
        assert detect_chapters(prose(7000)).method == DetectionMethod.WORD_COUNT_SPLIT

    def test_single_chapter_threshold_uses_preferred_length(self, prose):
        options = ParserOptions(preferred_chapter_length=100)

        result = detect_chapters(prose(200), options)

        assert result.method == DetectionMethod.WORD_COUNT_SPLIT
        assert [ch.word_count for ch in result.chapters] == [90, 90, 20]
