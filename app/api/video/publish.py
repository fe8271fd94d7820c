import logging
from fastapi import Depends, Form, File, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.user import UserModel
from app.model.video import VideoModel
from app.utility.exception import ValidationError
from app.utility.response import api_response
from app.utility.serializer import serialize_video
from app.utility.storage import get_media_storage
from app.utility.upload import upload_form_file, has_file
from app.api.router_base import router_video as router

logger = logging.getLogger(__name__)


@router.post("", status_code=status.HTTP_201_CREATED)
async def publish_video(
        title: str = Form(default=""),
        description: str = Form(default=""),
        video_file: UploadFile | None = File(default=None, alias="videoFile"),
        thumbnail: UploadFile | None = File(default=None),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
        storage=Depends(get_media_storage)
):
    if not title.strip() or not description.strip():
        raise ValidationError("Title and description are required")

    if not has_file(video_file):
        raise ValidationError("Video file is required")

    if not has_file(thumbnail):
        raise ValidationError("Thumbnail is required")

    uploaded_video = await upload_form_file(storage, video_file, "video")
    uploaded_thumbnail = await upload_form_file(storage, thumbnail, "thumbnail")

    video = VideoModel(
        owner_id=user.id,
        video_file=uploaded_video.url,
        thumbnail=uploaded_thumbnail.url,
        title=title.strip(),
        description=description.strip(),
        duration=uploaded_video.duration or 0,
        views=0,
        is_published=True,
    )
    video.owner = user
    db.add(video)
    await db.commit()

    logger.info(f"User {user.id} published video {video.id}")
    return api_response(serialize_video(video), "Video published successfully", status.HTTP_201_CREATED)
