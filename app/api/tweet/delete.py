from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.tweet import TweetModel
from app.model.user import UserModel
from app.service import cascade
from app.service.lookup import get_owned_or_403
from app.utility.response import api_response
from app.api.router_base import router_tweets as router


@router.delete("/{tweet_id}")
async def delete_tweet(
        tweet_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    tweet = await get_owned_or_403(db, TweetModel, tweet_id, user, "delete", "Tweet")
    await cascade.delete_tweet(db, tweet)

    return api_response({}, "Tweet deleted successfully")
