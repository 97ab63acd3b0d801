import logging

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status
from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from app.core.errors import ValidationError
from app.models.user import User
from app.repositories import UserRepository
from app.routers.deps import get_uploader, get_user_repository
from app.schemas.user import UserCreate, UserRead, UserUpdate
from app.services.uploads import ImageUploader, UploadSuccess

router = APIRouter(prefix="/users", tags=["users"])
logger = logging.getLogger(__name__)


def _validated(schema: type[BaseModel], **values) -> BaseModel:
    try:
        return schema(**values)
    except SchemaValidationError as exc:
        raise ValidationError("Invalid user fields", detail=str(exc)) from exc


async def _upload_profile_image(uploader: ImageUploader, file: UploadFile) -> str:
    outcome = await uploader.upload_file(file)
    if not isinstance(outcome, UploadSuccess):
        logger.warning("profile_image_upload_failed", extra={"outcome": type(outcome).__name__, "error": outcome.message})
        raise ValidationError(f"Profile image upload failed: {outcome.message}")
    return outcome.public_url


def _has_file(file: UploadFile | None) -> bool:
    return file is not None and bool(file.filename)


@router.get("", response_model=list[UserRead])
def list_users(users: UserRepository = Depends(get_user_repository)) -> list[User]:
    return users.list()


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: int, users: UserRepository = Depends(get_user_repository)) -> User:
    return users.require(user_id)


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(
    response: Response,
    first_name: str = Form(..., alias="firstName"),
    last_name: str = Form(..., alias="lastName"),
    email: str = Form(..., max_length=256),
    password: str = Form(...),
    profile_image: str | None = Form(default=None, alias="profileImage"),
    profile_image_file: UploadFile | None = File(default=None, alias="profileImageFile"),
    users: UserRepository = Depends(get_user_repository),
    uploader: ImageUploader = Depends(get_uploader),
) -> User:
    payload = _validated(
        UserCreate,
        first_name=first_name,
        last_name=last_name,
        email=email,
        password=password,
        profile_image=profile_image or None,
    )
    if _has_file(profile_image_file):
        payload.profile_image = await _upload_profile_image(uploader, profile_image_file)

    user = users.create(**payload.model_dump())
    response.headers["Location"] = f"/users/{user.id}"
    return user


@router.put("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_user(
    user_id: int,
    first_name: str | None = Form(default=None, alias="firstName"),
    last_name: str | None = Form(default=None, alias="lastName"),
    email: str | None = Form(default=None, max_length=256),
    password: str | None = Form(default=None),
    profile_image: str | None = Form(default=None, alias="profileImage"),
    profile_image_file: UploadFile | None = File(default=None, alias="profileImageFile"),
    users: UserRepository = Depends(get_user_repository),
    uploader: ImageUploader = Depends(get_uploader),
) -> None:
    users.require(user_id)
    changes = _validated(
        UserUpdate,
        first_name=first_name,
        last_name=last_name,
        email=email,
        password=password or None,
        profile_image=profile_image or None,
    )
    if _has_file(profile_image_file):
        changes.profile_image = await _upload_profile_image(uploader, profile_image_file)

    users.update(user_id, changes.model_dump())
    return None


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, users: UserRepository = Depends(get_user_repository)) -> None:
    users.delete(user_id)
    return None
