"""
Manual corrections to a detected chapter list.

Both operations return a new, renumbered list and leave the input untouched,
so a rejected edit never costs the caller their current chapters.
"""

import logging

from .errors import ChapterEditError
from .models import ParsedChapter, renumber_chapters

logger = logging.getLogger(__name__)


def merge_chapters(chapters, index1, index2):
    """Merge two adjacent chapters (0-based indices) into one.

    The merged chapter keeps the lower chapter's title; contents are joined
    with a blank line.
    """
    count = len(chapters)
    if not (0 <= index1 < count and 0 <= index2 < count) or abs(index1 - index2) != 1:
        raise ChapterEditError("Invalid chapter indices for merge")

    low = min(index1, index2)
    first, second = chapters[low], chapters[low + 1]
    merged = ParsedChapter(
        number=first.number,
        title=first.title,
        content=f"{first.content}\n\n{second.content}",
    )
    logger.debug("Merged chapters %d and %d", low + 1, low + 2)

    return renumber_chapters([*chapters[:low], merged, *chapters[low + 2:]])


def split_chapter(chapters, chapter_index, split_position, new_title=None):
    """Split one chapter in two at a character offset into its content.

    Args:
        chapters: Current chapter list
        chapter_index: 0-based index of the chapter to split
        split_position: Character offset into that chapter's content
        new_title: Title for the second half (defaults to "Chapter N")

    Returns:
        list: New renumbered chapter list

    Raises:
        ChapterEditError: If the index is out of range or either half would be empty
    """
    if not 0 <= chapter_index < len(chapters):
        raise ChapterEditError("Invalid chapter index for split")

    chapter = chapters[chapter_index]
    if not 0 < split_position < len(chapter.content):
        raise ChapterEditError("Split position would result in an empty chapter")

    head = chapter.content[:split_position].strip()
    tail = chapter.content[split_position:].strip()
    if not head or not tail:
        raise ChapterEditError("Split position would result in an empty chapter")

    first = ParsedChapter(number=chapter.number, title=chapter.title, content=head)
    second = ParsedChapter(
        number=chapter.number + 1,
        title=new_title or f"Chapter {chapter.number + 1}",
        content=tail,
    )
    logger.debug("Split chapter %d at offset %d", chapter.number, split_position)

    return renumber_chapters([
        *chapters[:chapter_index], first, second, *chapters[chapter_index + 1:],
    ])
