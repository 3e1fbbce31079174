from pathlib import PurePath

from config import ALLOWED_EXTENSIONS


def file_extension(filename: str) -> str:
    return PurePath(filename or "").suffix.lower()


def is_allowed_file(filename: str) -> bool:
    return file_extension(filename) in ALLOWED_EXTENSIONS


def placeholder_resume_text(filename: str) -> str:
    """
    Stand-in resume text for an uploaded file.
    Document content is not extracted, only the file name is used.
    """
    name = PurePath(filename or "").name
    return (
        f"Uploaded resume: {name}. Please use text input for detailed analysis, "
        "or we'll use a sample resume for demonstration."
    )
