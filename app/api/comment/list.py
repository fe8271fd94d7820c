from fastapi import Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.comment import CommentModel
from app.model.user import UserModel
from app.utility.identifier import parse_id
from app.utility.pagination import PageParams, paginate
from app.utility.response import api_response
from app.utility.serializer import serialize_comment
from app.api.router_base import router_comments as router

COMMENT_SORTABLE = {
    "createdAt": CommentModel.created_at,
    "updatedAt": CommentModel.updated_at,
}


@router.get("")
async def get_all_comments(
        params: PageParams = Depends(),
        video_id: str | None = Query(default=None, alias="videoId"),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    stmt = select(CommentModel)
    if video_id:
        stmt = stmt.where(CommentModel.video_id == parse_id(video_id, "Video"))

    page = await paginate(
        db,
        stmt,
        params,
        serialize_comment,
        sortable=COMMENT_SORTABLE,
        searchable=[CommentModel.content],
        tiebreaker=CommentModel.id
    )
    return api_response(page, "Comments fetched successfully")
