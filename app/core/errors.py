"""Error taxonomy shared by repositories, the upload workflow and the routers.

Each error carries the HTTP status it maps to. Client mistakes are 4xx,
remote store and storage problems are 5xx, and a remote store timeout is 504.
"""

from fastapi import status


class CatalogError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "internal_error"

    def __init__(self, message: str, detail: str | None = None) -> None:
        self.message = message
        self.detail = detail
        super().__init__(message)


class ValidationError(CatalogError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "validation_error"


class NotFoundError(CatalogError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"

    def __init__(self, resource: str, identifier: int) -> None:
        super().__init__(f"{resource} not found", detail=f"No {resource.lower()} with id {identifier}")
        self.resource = resource
        self.identifier = identifier


class InvalidReferenceError(CatalogError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "invalid_reference"


class RemoteStoreError(CatalogError):
    code = "remote_store_error"


class RemoteStoreTimeoutError(RemoteStoreError):
    status_code = status.HTTP_504_GATEWAY_TIMEOUT
    code = "remote_store_timeout"


class StorageError(CatalogError):
    code = "storage_error"
