from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.playlist import PlaylistModel
from app.model.user import UserModel
from app.service import cascade
from app.service.lookup import get_owned_or_403
from app.utility.response import api_response
from app.api.router_base import router_playlist as router


@router.delete("/{playlist_id}")
async def delete_playlist(
        playlist_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    playlist = await get_owned_or_403(db, PlaylistModel, playlist_id, user, "delete", "Playlist")
    await cascade.delete_playlist(db, playlist)

    return api_response({}, "Playlist deleted successfully")
