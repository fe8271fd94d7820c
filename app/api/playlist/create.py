from fastapi import Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.playlist import PlaylistModel
from app.model.user import UserModel
from app.utility.exception import ValidationError
from app.utility.response import api_response
from app.utility.schema import CamelModel
from app.utility.serializer import serialize_playlist
from app.api.router_base import router_playlist as router


class PlaylistRequest(CamelModel):
    name: str | None = None
    description: str | None = None


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_playlist(
        data: PlaylistRequest,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    name = (data.name or "").strip()
    description = (data.description or "").strip()
    if not name or not description:
        raise ValidationError("Name and description are required")

    playlist = PlaylistModel(name=name, description=description, owner_id=user.id)
    playlist.owner = user
    db.add(playlist)
    await db.commit()

    return api_response(serialize_playlist(playlist, []), "Playlist created successfully", status.HTTP_201_CREATED)
