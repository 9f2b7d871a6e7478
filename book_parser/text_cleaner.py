import re

_HORIZONTAL_WS = re.compile(r"[ \t]+")
_EXCESS_NEWLINES = re.compile(r"\n{4,}")


def count_words(text):
    """Return the number of whitespace-separated words in text."""
    return len(text.split())


def normalize(text):
    """Clean raw extracted text before any structural analysis.

    Line endings become "\\n", runs of spaces/tabs collapse to one space and
    every line is trimmed. Runs of four or more newlines are capped at three
    so a section break still reads as one, but extreme padding does not.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _HORIZONTAL_WS.sub(" ", text)
    text = "\n".join(line.strip() for line in text.split("\n"))
    text = _EXCESS_NEWLINES.sub("\n\n\n", text)
    return text.strip()
