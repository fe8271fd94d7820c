from fastapi import Depends, Query
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.like import LikeModel
from app.model.subscription import SubscriptionModel
from app.model.user import UserModel
from app.model.video import VideoModel
from app.utility.response import api_response
from app.api.dashboard.channel import resolve_channel
from app.api.router_base import router_dashboard as router


@router.get("/stats")
async def get_channel_stats(
        channel_id: str | None = Query(default=None, alias="channelId"),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    channel = await resolve_channel(db, user, channel_id)

    total_subscribers = (await db.execute(
        select(func.count(SubscriptionModel.id)).where(SubscriptionModel.channel_id == channel.id)
    )).scalar_one()

    total_videos, total_views = (await db.execute(
        select(func.count(VideoModel.id), func.coalesce(func.sum(VideoModel.views), 0))
        .where(VideoModel.owner_id == channel.id)
    )).one()

    total_likes = (await db.execute(
        select(func.count(LikeModel.id))
        .join(VideoModel, VideoModel.id == LikeModel.video_id)
        .where(VideoModel.owner_id == channel.id)
    )).scalar_one()

    return api_response(
        {
            "totalSubscribers": total_subscribers,
            "totalVideos": total_videos,
            "totalViews": int(total_views),
            "totalLikes": total_likes,
        },
        "Channel stats fetched successfully"
    )
