from fastapi import Depends, File, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.user import UserModel
from app.utility.exception import ValidationError
from app.utility.response import api_response
from app.utility.serializer import serialize_user
from app.utility.storage import get_media_storage
from app.utility.upload import upload_form_file, delete_media, has_file
from app.api.router_base import router_users as router


@router.patch("/avatar")
async def update_avatar(
        avatar: UploadFile | None = File(default=None),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
        storage=Depends(get_media_storage)
):
    if not has_file(avatar):
        raise ValidationError("Avatar file is missing")

    uploaded = await upload_form_file(storage, avatar, "avatar")
    old_avatar = user.avatar

    user.avatar = uploaded.url
    await db.commit()
    await delete_media(storage, old_avatar)

    return api_response(serialize_user(user), "Avatar updated successfully")


@router.patch("/cover-image")
async def update_cover_image(
        cover_image: UploadFile | None = File(default=None, alias="coverImage"),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
        storage=Depends(get_media_storage)
):
    if not has_file(cover_image):
        raise ValidationError("Cover image file is missing")

    uploaded = await upload_form_file(storage, cover_image, "cover image")
    old_cover_image = user.cover_image

    user.cover_image = uploaded.url
    await db.commit()
    await delete_media(storage, old_cover_image)

    return api_response(serialize_user(user), "Cover image updated successfully")
