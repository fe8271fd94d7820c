from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.user import UserModel
from app.service.history import record_view
from app.service.lookup import get_visible_video_or_404
from app.utility.response import api_response
from app.utility.serializer import serialize_video
from app.api.router_base import router_video as router


@router.get("/{video_id}")
async def get_video_by_id(
        video_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    video = await get_visible_video_or_404(db, video_id, user)

    await record_view(db, user, video)

    return api_response(serialize_video(video), "Video fetched successfully")
