from .docx_extractor import extract_docx
from .errors import UnsupportedFileTypeError
from .models import FileType
from .pdf_extractor import extract_pdf
from .txt_extractor import extract_txt

_EXTRACTORS = {
    FileType.PDF: extract_pdf,
    FileType.DOCX: extract_docx,
    FileType.TXT: extract_txt,
}


def extract_text(data, file_type):
    """Dispatch to the correct extractor for the file type; returns raw text."""
    try:
        extractor = _EXTRACTORS[FileType(file_type)]
    except ValueError:
        raise UnsupportedFileTypeError(f"Unsupported file type: {file_type}") from None
    return extractor(data)
