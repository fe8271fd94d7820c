import logging
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.user import UserModel
from app.model.video import VideoModel
from app.service import cascade
from app.service.lookup import get_owned_or_403
from app.utility.response import api_response
from app.utility.storage import get_media_storage
from app.utility.upload import delete_media
from app.api.router_base import router_video as router

logger = logging.getLogger(__name__)


@router.delete("/{video_id}")
async def delete_video(
        video_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
        storage=Depends(get_media_storage)
):
    video = await get_owned_or_403(db, VideoModel, video_id, user, "delete", "Video")
    media_urls = [video.video_file, video.thumbnail]

    await cascade.delete_video(db, video)

    for url in media_urls:
        await delete_media(storage, url)

    logger.info(f"User {user.id} deleted video {video_id}")
    return api_response({}, "Video deleted successfully")
