from fastapi import Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.user import UserModel
from app.model.video import VideoModel
from app.utility.identifier import parse_id
from app.utility.pagination import PageParams, paginate
from app.utility.response import api_response
from app.utility.serializer import serialize_video
from app.api.router_base import router_video as router

VIDEO_SORTABLE = {
    "createdAt": VideoModel.created_at,
    "updatedAt": VideoModel.updated_at,
    "title": VideoModel.title,
    "duration": VideoModel.duration,
    "views": VideoModel.views,
}


@router.get("")
async def get_all_videos(
        params: PageParams = Depends(),
        user_id: str | None = Query(default=None, alias="userId"),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    stmt = select(VideoModel).where(VideoModel.is_published.is_(True))
    if user_id:
        stmt = stmt.where(VideoModel.owner_id == parse_id(user_id, "User"))

    page = await paginate(
        db,
        stmt,
        params,
        serialize_video,
        sortable=VIDEO_SORTABLE,
        searchable=[VideoModel.title, VideoModel.description],
        tiebreaker=VideoModel.id
    )
    return api_response(page, "Videos fetched successfully")
