"""
Removal of entities together with the rows that reference them
"""
from sqlalchemy import delete, select, or_
from sqlalchemy.ext.asyncio import AsyncSession
from app.model.comment import CommentModel
from app.model.like import LikeModel
from app.model.playlist import PlaylistVideoModel
from app.model.watch_history import WatchHistoryModel


async def _delete_where(db: AsyncSession, model, *criteria):
    await db.execute(
        delete(model).where(*criteria).execution_options(synchronize_session=False)
    )


async def delete_video(db: AsyncSession, video):
    comment_ids = select(CommentModel.id).where(CommentModel.video_id == video.id)

    await _delete_where(db, LikeModel, or_(LikeModel.video_id == video.id, LikeModel.comment_id.in_(comment_ids)))
    await _delete_where(db, CommentModel, CommentModel.video_id == video.id)
    await _delete_where(db, PlaylistVideoModel, PlaylistVideoModel.video_id == video.id)
    await _delete_where(db, WatchHistoryModel, WatchHistoryModel.video_id == video.id)
    await db.delete(video)
    await db.commit()


async def delete_comment(db: AsyncSession, comment):
    await _delete_where(db, LikeModel, LikeModel.comment_id == comment.id)
    await db.delete(comment)
    await db.commit()


async def delete_tweet(db: AsyncSession, tweet):
    await _delete_where(db, LikeModel, LikeModel.tweet_id == tweet.id)
    await db.delete(tweet)
    await db.commit()


async def delete_playlist(db: AsyncSession, playlist):
    await _delete_where(db, PlaylistVideoModel, PlaylistVideoModel.playlist_id == playlist.id)
    await db.delete(playlist)
    await db.commit()
