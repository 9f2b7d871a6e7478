import logging
import os

from flask import Flask, request, jsonify

from config import ALLOWED_EXTENSIONS, MAX_FILE_SIZE, PARSER_OPTIONS, LOG_LEVEL
from book_parser import (
    ChapterEditError,
    ParsedChapter,
    get_file_type,
    get_supported_file_types,
    get_supported_mime_types,
    merge_chapters,
    parse_book_file,
    split_chapter,
)

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config["MAX_CONTENT_LENGTH"] = MAX_FILE_SIZE

MB = 1024 * 1024


def allowed_file(filename):
    return "." in filename and filename.rsplit(".", 1)[1].lower() in ALLOWED_EXTENSIONS


def _file_too_large(size=None):
    details = f"Maximum file size is {MAX_FILE_SIZE // MB}MB."
    if size is not None:
        details += f" Your file is {size / MB:.2f}MB."
    return jsonify({"error": "File too large", "details": details}), 400


def _load_chapters(payload):
    """Rebuild chapters from a JSON body, numbered by position."""
    raw = payload.get("chapters") if isinstance(payload, dict) else None
    if not isinstance(raw, list) or not raw:
        raise ValueError("At least one chapter is required.")
    if not all(isinstance(ch, dict) for ch in raw):
        raise ValueError("Each chapter must be an object.")
    return [ParsedChapter.from_dict(ch, number=i) for i, ch in enumerate(raw, start=1)]


def _index_arg(payload, name):
    try:
        return int(payload[name])
    except (KeyError, TypeError, ValueError):
        raise ValueError(f"'{name}' must be an integer.") from None


@app.errorhandler(413)
def request_too_large(e):
    return _file_too_large()


@app.route("/api/books/supported-types")
def api_supported_types():
    return jsonify({
        "file_types": get_supported_file_types(),
        "mime_types": get_supported_mime_types(),
        "max_file_size": MAX_FILE_SIZE,
    })


@app.route("/api/books/upload", methods=["POST"])
def api_upload():
    """Upload a PDF, DOCX or TXT book and return its detected chapters for review."""
    if "file" not in request.files:
        return jsonify({"error": "No file uploaded."}), 400

    file = request.files["file"]
    if file.filename == "":
        return jsonify({"error": "No file selected."}), 400

    if not allowed_file(file.filename):
        return jsonify({
            "error": "Unsupported file type",
            "details": "Please upload a PDF, DOCX, or TXT file.",
            "supported_types": get_supported_file_types(),
        }), 400

    file_type = get_file_type(file.filename)

    # Extension wins over the browser-reported MIME type
    if file.mimetype not in get_supported_mime_types() and file.mimetype != "application/octet-stream":
        logger.warning("Unexpected MIME type %s for %s, but extension is valid", file.mimetype, file.filename)

    data = file.read()
    if len(data) > MAX_FILE_SIZE:
        return _file_too_large(len(data))

    if not data:
        return jsonify({"error": "File is empty"}), 400

    logger.info("Parsing %s file %s (%d bytes)", file_type.value.upper(), file.filename, len(data))

    try:
        book = parse_book_file(data, file.filename, file_type, PARSER_OPTIONS)
    except ValueError as e:
        logger.warning("Parse error for %s: %s", file.filename, e)
        return jsonify({"error": "Failed to parse file", "details": str(e)}), 422
    except Exception as e:
        logger.exception("Error processing upload %s", file.filename)
        return jsonify({"error": "Failed to process upload", "details": str(e)}), 500

    logger.info(
        "Parsed %s: %d chapters, %d words",
        file.filename, len(book.chapters), book.total_word_count,
    )
    return jsonify({"success": True, "data": book.to_dict()})


@app.route("/api/books/chapters/merge", methods=["POST"])
def api_merge_chapters():
    """Merge two adjacent chapters of a reviewed book."""
    payload = request.get_json(silent=True)
    try:
        chapters = _load_chapters(payload)
        merged = merge_chapters(chapters, _index_arg(payload, "index1"), _index_arg(payload, "index2"))
    except ChapterEditError as e:
        return jsonify({"error": str(e)}), 400
    except ValueError as e:
        return jsonify({"error": f"Invalid request: {e}"}), 400

    return jsonify({"chapters": [ch.to_dict() for ch in merged]})


@app.route("/api/books/chapters/split", methods=["POST"])
def api_split_chapter():
    """Split one chapter of a reviewed book at a character offset."""
    payload = request.get_json(silent=True)
    try:
        chapters = _load_chapters(payload)
        new_title = str(payload.get("new_title") or "").strip() or None
        result = split_chapter(
            chapters,
            _index_arg(payload, "chapter_index"),
            _index_arg(payload, "split_position"),
            new_title,
        )
    except ChapterEditError as e:
        return jsonify({"error": str(e)}), 400
    except ValueError as e:
        return jsonify({"error": f"Invalid request: {e}"}), 400

    return jsonify({"chapters": [ch.to_dict() for ch in result]})


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5000))
    app.run(debug=False, host="0.0.0.0", port=port)
