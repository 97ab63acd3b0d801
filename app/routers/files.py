from fastapi import APIRouter, Depends, File, UploadFile

from app.core.errors import ValidationError
from app.routers.deps import get_uploader
from app.schemas.upload import FileUploadResponse
from app.services.uploads import ImageUploader, require_success

router = APIRouter(prefix="/files", tags=["files"])


@router.post("/upload", response_model=FileUploadResponse)
async def upload_file(
    file: UploadFile | None = File(default=None),
    uploader: ImageUploader = Depends(get_uploader),
) -> FileUploadResponse:
    if file is None:
        raise ValidationError("No file was uploaded.")
    uploaded = require_success(await uploader.upload_file(file))
    return FileUploadResponse(
        file_name=uploaded.file_name,
        file_url=uploaded.public_url,
        file_size=uploaded.byte_size,
        message="File uploaded successfully to FTP server",
    )
