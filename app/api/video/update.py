from fastapi import Depends, Form, File, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.user import UserModel
from app.model.video import VideoModel
from app.service.lookup import get_owned_or_403
from app.utility.exception import ValidationError
from app.utility.response import api_response
from app.utility.serializer import serialize_video
from app.utility.storage import get_media_storage
from app.utility.upload import upload_form_file, delete_media, has_file
from app.api.router_base import router_video as router


@router.patch("/{video_id}")
async def update_video(
        video_id: str,
        title: str | None = Form(default=None),
        description: str | None = Form(default=None),
        video_file: UploadFile | None = File(default=None, alias="videoFile"),
        thumbnail: UploadFile | None = File(default=None),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
        storage=Depends(get_media_storage)
):
    video = await get_owned_or_403(db, VideoModel, video_id, user, "update", "Video")

    title = (title or "").strip()
    description = (description or "").strip()
    if not (title or description or has_file(thumbnail) or has_file(video_file)):
        raise ValidationError("No fields to update")

    replaced_media = []

    if has_file(thumbnail):
        uploaded = await upload_form_file(storage, thumbnail, "thumbnail")
        replaced_media.append(video.thumbnail)
        video.thumbnail = uploaded.url

    if has_file(video_file):
        uploaded = await upload_form_file(storage, video_file, "video")
        replaced_media.append(video.video_file)
        video.video_file = uploaded.url
        video.duration = uploaded.duration or 0

    if title:
        video.title = title
    if description:
        video.description = description

    await db.commit()

    for url in replaced_media:
        await delete_media(storage, url)

    return api_response(serialize_video(video), "Video updated successfully")
