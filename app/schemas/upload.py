from app.schemas.common import CamelModel


class FileUploadResponse(CamelModel):
    file_name: str
    file_url: str
    file_size: int
    message: str
