from fastapi import Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.like import LikeModel
from app.model.user import UserModel
from app.model.video import VideoModel
from app.service.lookup import visible_videos
from app.utility.identifier import parse_id
from app.utility.pagination import PageParams, paginate
from app.utility.response import api_response
from app.utility.serializer import serialize_video
from app.api.router_base import router_likes as router

LIKED_VIDEO_SORTABLE = {
    "createdAt": LikeModel.created_at,
    "title": VideoModel.title,
    "views": VideoModel.views,
}


@router.get("/videos")
async def get_liked_videos(
        params: PageParams = Depends(),
        user_id: str | None = Query(default=None, alias="userId"),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    liked_by = parse_id(user_id, "User") if user_id else user.id

    stmt = (
        select(VideoModel)
        .join(LikeModel, LikeModel.video_id == VideoModel.id)
        .where(LikeModel.liked_by == liked_by, visible_videos(user))
    )

    page = await paginate(
        db,
        stmt,
        params,
        serialize_video,
        sortable=LIKED_VIDEO_SORTABLE,
        searchable=[VideoModel.title, VideoModel.description],
        tiebreaker=LikeModel.id
    )
    return api_response(page, "Liked videos fetched successfully")
