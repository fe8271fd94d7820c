from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.comment import CommentModel
from app.model.user import UserModel
from app.service import cascade
from app.service.lookup import get_owned_or_403
from app.utility.response import api_response
from app.api.router_base import router_comments as router


@router.delete("/c/{comment_id}")
async def delete_comment(
        comment_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    comment = await get_owned_or_403(db, CommentModel, comment_id, user, "delete", "Comment")
    await cascade.delete_comment(db, comment)

    return api_response({}, "Comment deleted successfully")
