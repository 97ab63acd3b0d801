from pathlib import PurePath

from app.services.uploads.types import RejectionReason, UploadRejected

ALLOWED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp"}
MAX_IMAGE_BYTES = 5 * 1024 * 1024


def image_extension(filename: str) -> str:
    return PurePath(filename or "").suffix.lower()


def validate_image(filename: str, byte_length: int) -> UploadRejected | None:
    """Check an image against the upload policy. Returns None when it is accepted."""
    if image_extension(filename) not in ALLOWED_EXTENSIONS:
        allowed = ", ".join(sorted(ext.lstrip(".") for ext in ALLOWED_EXTENSIONS))
        return UploadRejected(RejectionReason.UNSUPPORTED_TYPE, f"File type not allowed. Only images ({allowed}) are accepted.")
    if byte_length == 0:
        return UploadRejected(RejectionReason.EMPTY, "No file was uploaded.")
    if byte_length > MAX_IMAGE_BYTES:
        return UploadRejected(RejectionReason.TOO_LARGE, "File is too large. Maximum size is 5MB.")
    return None
