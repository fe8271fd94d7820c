from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.playlist import PlaylistModel, PlaylistVideoModel
from app.model.user import UserModel
from app.model.video import VideoModel
from app.service.lookup import get_or_404
from app.utility.response import api_response
from app.api.router_base import router_playlist as router


@router.get("/video/{video_id}")
async def get_video_saved_status(
        video_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    video = await get_or_404(db, VideoModel, video_id, "Video")

    result = await db.execute(
        select(PlaylistVideoModel.playlist_id)
        .join(PlaylistModel, PlaylistModel.id == PlaylistVideoModel.playlist_id)
        .where(PlaylistVideoModel.video_id == video.id, PlaylistModel.owner_id == user.id)
        .limit(1)
    )
    is_saved = result.scalar_one_or_none() is not None

    return api_response({"isSaved": is_saved}, "Video saved status fetched successfully")
