from fastapi import Depends
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.playlist import PlaylistModel, PlaylistVideoModel
from app.model.user import UserModel
from app.model.video import VideoModel
from app.service.lookup import get_owned_or_403, get_or_404, get_visible_video_or_404
from app.service.playlist import playlist_detail, next_position, contains_video
from app.utility.exception import ValidationError
from app.utility.response import api_response
from app.api.router_base import router_playlist as router


@router.patch("/add/{video_id}/{playlist_id}")
async def add_video_to_playlist(
        video_id: str,
        playlist_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    playlist = await get_owned_or_403(db, PlaylistModel, playlist_id, user, "modify", "Playlist")
    video = await get_visible_video_or_404(db, video_id, user)

    if await contains_video(db, playlist.id, video.id):
        raise ValidationError("Video already exists in playlist")

    db.add(PlaylistVideoModel(
        playlist_id=playlist.id,
        video_id=video.id,
        position=await next_position(db, playlist.id)
    ))
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ValidationError("Video already exists in playlist")

    return api_response(await playlist_detail(db, playlist, user), "Video added to playlist successfully")


@router.patch("/remove/{video_id}/{playlist_id}")
async def remove_video_from_playlist(
        video_id: str,
        playlist_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    playlist = await get_owned_or_403(db, PlaylistModel, playlist_id, user, "modify", "Playlist")
    video = await get_or_404(db, VideoModel, video_id, "Video")

    result = await db.execute(
        delete(PlaylistVideoModel)
        .where(PlaylistVideoModel.playlist_id == playlist.id, PlaylistVideoModel.video_id == video.id)
        .execution_options(synchronize_session=False)
    )
    if not result.rowcount:
        await db.rollback()
        raise ValidationError("Video not found in playlist")
    await db.commit()

    return api_response(await playlist_detail(db, playlist, user), "Video removed from playlist successfully")
