"""
Pytest configuration and shared fixtures for all tests
"""

import os
import sys

import pytest

# Make the project root importable (app.py, config.py, book_parser/)
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from book_parser import count_words  # noqa: E402

VOCABULARY = [
    "the", "river", "moved", "slowly", "past", "old", "stone", "houses",
    "while", "lanterns", "glowed", "along", "narrow", "quiet", "streets",
    "and", "evening", "settled", "over", "town",
]


def make_prose(word_count, sentence_length=10, offset=0):
    """Deterministic single-line prose with a full stop every sentence_length words."""
    words = []
    for i in range(word_count):
        word = VOCABULARY[(i + offset) % len(VOCABULARY)]
        if i % sentence_length == 0:
            word = word.capitalize()
        if i % sentence_length == sentence_length - 1 or i == word_count - 1:
            word += "."
        words.append(word)
    return " ".join(words)


def assert_valid_chapters(chapters):
    """Numbering is 1..N, no chapter is empty, word counts match content."""
    assert [ch.number for ch in chapters] == list(range(1, len(chapters) + 1))
    for ch in chapters:
        assert ch.content.strip()
        assert ch.title
        assert ch.word_count == count_words(ch.content)


@pytest.fixture
def prose():
    return make_prose


@pytest.fixture
def check_chapters():
    return assert_valid_chapters


@pytest.fixture
def chaptered_text(prose):
    """Three "Chapter N" headings, each followed by 60 words of body text."""
    return "\n\n".join(
        f"Chapter {n}: Day {n}\n{prose(60, offset=n)}" for n in (1, 2, 3)
    )
