from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.playlist import PlaylistModel
from app.model.user import UserModel
from app.service.lookup import get_or_404
from app.utility.pagination import PageParams, paginate
from app.utility.response import api_response
from app.utility.serializer import serialize_playlist
from app.api.router_base import router_playlist as router

PLAYLIST_SORTABLE = {
    "createdAt": PlaylistModel.created_at,
    "updatedAt": PlaylistModel.updated_at,
    "name": PlaylistModel.name,
}


@router.get("/user/{user_id}")
async def get_user_playlists(
        user_id: str,
        params: PageParams = Depends(),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    owner = await get_or_404(db, UserModel, user_id, "User")

    page = await paginate(
        db,
        select(PlaylistModel).where(PlaylistModel.owner_id == owner.id),
        params,
        serialize_playlist,
        sortable=PLAYLIST_SORTABLE,
        searchable=[PlaylistModel.name, PlaylistModel.description],
        tiebreaker=PlaylistModel.id
    )
    return api_response(page, "Playlists fetched successfully")
