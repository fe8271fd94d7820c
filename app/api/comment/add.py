from fastapi import Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.comment import CommentModel
from app.model.user import UserModel
from app.service.lookup import get_visible_video_or_404
from app.utility.response import api_response
from app.utility.schema import CamelModel, require_text
from app.utility.serializer import serialize_comment
from app.api.router_base import router_comments as router


class CommentRequest(CamelModel):
    content: str | None = None


@router.post("/{video_id}", status_code=status.HTTP_201_CREATED)
async def add_comment(
        video_id: str,
        data: CommentRequest,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    content = require_text(data.content, "Content is required")
    video = await get_visible_video_or_404(db, video_id, user)

    comment = CommentModel(content=content, video_id=video.id, owner_id=user.id)
    comment.owner = user
    db.add(comment)
    await db.commit()

    return api_response(serialize_comment(comment), "Comment added successfully", status.HTTP_201_CREATED)
