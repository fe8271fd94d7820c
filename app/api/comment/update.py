from typing import Any
from fastapi import Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.comment import CommentModel
from app.model.user import UserModel
from app.service.lookup import get_owned_or_403
from app.utility.response import api_response
from app.utility.schema import parse_body, require_text
from app.utility.serializer import serialize_comment
from app.api.comment.add import CommentRequest
from app.api.router_base import router_comments as router


@router.patch("/c/{comment_id}")
async def update_comment(
        comment_id: str,
        data: Any = Body(default=None),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    comment = await get_owned_or_403(db, CommentModel, comment_id, user, "update", "Comment")
    request = parse_body(CommentRequest, data)

    comment.content = require_text(request.content, "Content is required")
    await db.commit()

    return api_response(serialize_comment(comment), "Comment updated successfully")
