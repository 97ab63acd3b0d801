import pytest

from app.services.uploads import RejectionReason, validate_image
from app.services.uploads.validator import MAX_IMAGE_BYTES


@pytest.mark.parametrize("filename", ["cat.jpg", "cat.jpeg", "cat.png", "cat.gif", "cat.webp", "CAT.PNG", "holiday.Photo.JpEg"])
def test_accepts_image_extensions(filename):
    assert validate_image(filename, 1024) is None


@pytest.mark.parametrize("filename", ["notes.txt", "image.bmp", "archive.png.zip", "noextension", ""])
def test_rejects_other_extensions(filename):
    rejected = validate_image(filename, 1024)
    assert rejected is not None
    assert rejected.reason is RejectionReason.UNSUPPORTED_TYPE


def test_rejects_empty_file():
    rejected = validate_image("cat.png", 0)
    assert rejected.reason is RejectionReason.EMPTY


def test_size_limit_is_inclusive():
    assert MAX_IMAGE_BYTES == 5_242_880
    assert validate_image("cat.png", MAX_IMAGE_BYTES) is None
    assert validate_image("cat.png", MAX_IMAGE_BYTES + 1).reason is RejectionReason.TOO_LARGE


def test_extension_is_checked_before_size():
    assert validate_image("notes.txt", 0).reason is RejectionReason.UNSUPPORTED_TYPE
