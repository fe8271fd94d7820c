from typing import Any
from fastapi import Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.playlist import PlaylistModel
from app.model.user import UserModel
from app.service.lookup import get_owned_or_403
from app.service.playlist import playlist_detail
from app.utility.exception import ValidationError
from app.utility.response import api_response
from app.utility.schema import parse_body
from app.api.playlist.create import PlaylistRequest
from app.api.router_base import router_playlist as router


@router.patch("/{playlist_id}")
async def update_playlist(
        playlist_id: str,
        data: Any = Body(default=None),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    playlist = await get_owned_or_403(db, PlaylistModel, playlist_id, user, "update", "Playlist")
    request = parse_body(PlaylistRequest, data)

    name = (request.name or "").strip()
    description = (request.description or "").strip()
    if not name and not description:
        raise ValidationError("At least one field (name or description) is required")

    if name:
        playlist.name = name
    if description:
        playlist.description = description
    await db.commit()

    return api_response(await playlist_detail(db, playlist, user), "Playlist updated successfully")
