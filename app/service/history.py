from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession
from app.model.video import VideoModel
from app.model.watch_history import WatchHistoryModel
from app.service.lookup import visible_videos


async def record_view(db: AsyncSession, user, video):
    """Count a view and move the video to the front of the user's watch history."""
    await db.execute(
        update(VideoModel)
        .where(VideoModel.id == video.id)
        .values(views=VideoModel.views + 1)
        .execution_options(synchronize_session=False)
    )
    await db.execute(
        delete(WatchHistoryModel)
        .where(WatchHistoryModel.user_id == user.id, WatchHistoryModel.video_id == video.id)
        .execution_options(synchronize_session=False)
    )
    db.add(WatchHistoryModel(user_id=user.id, video_id=video.id))
    await db.commit()
    await db.refresh(video, attribute_names=["views"])


async def watch_history(db: AsyncSession, user) -> list:
    result = await db.execute(
        select(VideoModel)
        .join(WatchHistoryModel, WatchHistoryModel.video_id == VideoModel.id)
        .where(WatchHistoryModel.user_id == user.id, visible_videos(user))
        .order_by(WatchHistoryModel.watched_at.desc())
    )
    return list(result.scalars().all())
