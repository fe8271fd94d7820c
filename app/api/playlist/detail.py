from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.playlist import PlaylistModel
from app.model.user import UserModel
from app.service.lookup import get_or_404
from app.service.playlist import playlist_detail
from app.utility.response import api_response
from app.api.router_base import router_playlist as router


@router.get("/{playlist_id}")
async def get_playlist_by_id(
        playlist_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    playlist = await get_or_404(db, PlaylistModel, playlist_id, "Playlist")
    return api_response(await playlist_detail(db, playlist, user), "Playlist fetched successfully")
