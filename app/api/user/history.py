from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.user import UserModel
from app.service.history import watch_history
from app.utility.response import api_response
from app.utility.serializer import serialize_video
from app.api.router_base import router_users as router


@router.get("/history")
async def get_watch_history(user: UserModel = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    videos = await watch_history(db, user)
    return api_response([serialize_video(video) for video in videos], "Watch history fetched successfully")
