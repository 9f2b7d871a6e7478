import os

from book_parser import ParserOptions

ALLOWED_EXTENSIONS = {"pdf", "docx", "doc", "txt"}
MAX_FILE_SIZE = int(os.environ.get("MAX_FILE_SIZE", 50 * 1024 * 1024))  # 50 MB

# Chapter detection tuning
MIN_CHAPTER_WORD_COUNT = int(os.environ.get("MIN_CHAPTER_WORD_COUNT", 500))
MAX_CHAPTERS = int(os.environ.get("MAX_CHAPTERS", 100))
PREFERRED_CHAPTER_LENGTH = int(os.environ.get("PREFERRED_CHAPTER_LENGTH", 3000))

PARSER_OPTIONS = ParserOptions(
    min_chapter_word_count=MIN_CHAPTER_WORD_COUNT,
    max_chapters=MAX_CHAPTERS,
    preferred_chapter_length=PREFERRED_CHAPTER_LENGTH,
)

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
