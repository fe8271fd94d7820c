from fastapi import Depends
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.user import UserModel
from app.model.video import VideoModel
from app.service.lookup import get_owned_or_403
from app.utility.response import api_response
from app.utility.serializer import serialize_video
from app.utility.time import utc_now
from app.api.router_base import router_video as router


@router.patch("/toggle/publish/{video_id}")
async def toggle_publish_status(
        video_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    video = await get_owned_or_403(db, VideoModel, video_id, user, "publish", "Video")

    await db.execute(
        update(VideoModel)
        .where(VideoModel.id == video.id)
        .values(is_published=~VideoModel.is_published, updated_at=utc_now())
        .execution_options(synchronize_session=False)
    )
    await db.commit()
    await db.refresh(video, attribute_names=["is_published", "updated_at"])

    message = "Video published" if video.is_published else "Video unpublished"
    return api_response(serialize_video(video), message)
