from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from app.model.playlist import PlaylistVideoModel
from app.model.video import VideoModel
from app.service.lookup import visible_videos
from app.utility.serializer import serialize_playlist


async def load_playlist_videos(db: AsyncSession, playlist_id: str, viewer) -> list:
    """Videos of the playlist in insertion order, as far as ``viewer`` may see them."""
    result = await db.execute(
        select(VideoModel)
        .join(PlaylistVideoModel, PlaylistVideoModel.video_id == VideoModel.id)
        .where(PlaylistVideoModel.playlist_id == playlist_id, visible_videos(viewer))
        .order_by(PlaylistVideoModel.position.asc())
    )
    return list(result.scalars().all())


async def playlist_detail(db: AsyncSession, playlist, viewer) -> dict:
    return serialize_playlist(playlist, await load_playlist_videos(db, playlist.id, viewer))


async def next_position(db: AsyncSession, playlist_id: str) -> int:
    result = await db.execute(
        select(func.max(PlaylistVideoModel.position)).where(PlaylistVideoModel.playlist_id == playlist_id)
    )
    current = result.scalar_one_or_none()
    return 0 if current is None else current + 1


async def contains_video(db: AsyncSession, playlist_id: str, video_id: str) -> bool:
    entry = await db.get(PlaylistVideoModel, (playlist_id, video_id))
    return entry is not None
