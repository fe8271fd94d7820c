from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.comment import CommentModel
from app.model.like import LikeModel
from app.model.tweet import TweetModel
from app.model.user import UserModel
from app.service.lookup import get_or_404, get_visible_video_or_404
from app.service.toggle import toggle_relation
from app.utility.response import api_response
from app.utility.serializer import serialize_like
from app.api.router_base import router_likes as router


async def toggle_like(db: AsyncSession, user, label: str, **target) -> dict:
    liked, like = await toggle_relation(db, LikeModel, liked_by=user.id, **target)
    if liked:
        data = serialize_like(like) if like else {}
        return api_response({"isLiked": True, **data}, f"{label} liked successfully")
    return api_response({"isLiked": False}, f"{label} unliked successfully")


@router.post("/toggle/v/{video_id}")
async def toggle_video_like(
        video_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    video = await get_visible_video_or_404(db, video_id, user)
    return await toggle_like(db, user, "Video", video_id=video.id)


@router.post("/toggle/c/{comment_id}")
async def toggle_comment_like(
        comment_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    comment = await get_or_404(db, CommentModel, comment_id, "Comment")
    return await toggle_like(db, user, "Comment", comment_id=comment.id)


@router.post("/toggle/t/{tweet_id}")
async def toggle_tweet_like(
        tweet_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    tweet = await get_or_404(db, TweetModel, tweet_id, "Tweet")
    return await toggle_like(db, user, "Tweet", tweet_id=tweet.id)
