from .models import FileType

# Extension -> extractor. Legacy .doc goes through the DOCX reader, which
# rejects it as corrupt if it isn't really OOXML.
_EXTENSION_TYPES = {
    "pdf": FileType.PDF,
    "docx": FileType.DOCX,
    "doc": FileType.DOCX,
    "txt": FileType.TXT,
}

SUPPORTED_MIME_TYPES = (
    "application/pdf",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/msword",
    "text/plain",
)


def file_extension(file_name):
    return file_name.rsplit(".", 1)[1].lower() if "." in file_name else ""


def get_file_type(file_name):
    """Return the FileType for a file name, or None if it isn't supported."""
    return _EXTENSION_TYPES.get(file_extension(file_name))


def get_supported_file_types():
    return list(_EXTENSION_TYPES)


def get_supported_mime_types():
    return list(SUPPORTED_MIME_TYPES)
