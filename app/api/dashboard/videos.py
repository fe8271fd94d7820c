from fastapi import Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.user import UserModel
from app.model.video import VideoModel
from app.utility.pagination import PageParams, paginate
from app.utility.response import api_response
from app.utility.serializer import serialize_video
from app.api.dashboard.channel import resolve_channel
from app.api.video.list import VIDEO_SORTABLE
from app.api.router_base import router_dashboard as router


@router.get("/videos")
async def get_channel_videos(
        channel_id: str | None = Query(default=None, alias="channelId"),
        params: PageParams = Depends(),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    channel = await resolve_channel(db, user, channel_id)

    stmt = select(VideoModel).where(VideoModel.owner_id == channel.id)
    if channel.id != user.id:
        stmt = stmt.where(VideoModel.is_published.is_(True))

    page = await paginate(
        db,
        stmt,
        params,
        serialize_video,
        sortable=VIDEO_SORTABLE,
        searchable=[VideoModel.title, VideoModel.description],
        tiebreaker=VideoModel.id
    )
    return api_response(page, "Channel videos fetched successfully")
