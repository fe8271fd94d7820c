import logging
from fastapi import Depends, Form, File, UploadFile, status
from sqlalchemy import select, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.model.user import UserModel
from app.utility.exception import ValidationError, ConflictError
from app.utility.response import api_response
from app.utility.security import hash_password
from app.utility.serializer import serialize_user
from app.utility.storage import get_media_storage
from app.utility.upload import upload_form_file, delete_media, has_file
from app.api.router_base import router_users as router

logger = logging.getLogger(__name__)


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
        full_name: str = Form(default="", alias="fullName"),
        username: str = Form(default=""),
        email: str = Form(default=""),
        password: str = Form(default=""),
        avatar: UploadFile | None = File(default=None),
        cover_image: UploadFile | None = File(default=None, alias="coverImage"),
        db: AsyncSession = Depends(get_db),
        storage=Depends(get_media_storage)
):
    if any(not field.strip() for field in (full_name, username, email, password)):
        raise ValidationError("All fields are required")

    username = username.strip().lower()
    email = email.strip().lower()

    result = await db.execute(
        select(UserModel).where(or_(UserModel.username == username, UserModel.email == email))
    )
    if result.scalars().first():
        raise ConflictError("User with email or username already exists")

    if not has_file(avatar):
        raise ValidationError("Avatar file is required")

    uploaded_avatar = await upload_form_file(storage, avatar, "avatar")
    uploaded_cover = await upload_form_file(storage, cover_image, "cover image") if has_file(cover_image) else None

    user = UserModel(
        full_name=full_name.strip(),
        username=username,
        email=email,
        password=hash_password(password),
        avatar=uploaded_avatar.url,
        cover_image=uploaded_cover.url if uploaded_cover else "",
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        # Lost the race to a concurrent registration; the uploads are orphans
        await delete_media(storage, uploaded_avatar.url)
        await delete_media(storage, uploaded_cover.url if uploaded_cover else None)
        raise ConflictError("User with email or username already exists")

    logger.info(f"Registered user {user.id} ({user.username})")
    return api_response(serialize_user(user), "User registered successfully", status.HTTP_201_CREATED)
