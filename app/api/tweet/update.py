from typing import Any
from fastapi import Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.tweet import TweetModel
from app.model.user import UserModel
from app.service.lookup import get_owned_or_403
from app.utility.response import api_response
from app.utility.schema import parse_body
from app.utility.serializer import serialize_tweet
from app.api.tweet.create import TweetRequest
from app.api.tweet.validation import validate_tweet_content
from app.api.router_base import router_tweets as router


@router.patch("/{tweet_id}")
async def update_tweet(
        tweet_id: str,
        data: Any = Body(default=None),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    tweet = await get_owned_or_403(db, TweetModel, tweet_id, user, "update", "Tweet")
    request = parse_body(TweetRequest, data)

    tweet.content = validate_tweet_content(request.content)
    await db.commit()

    return api_response(serialize_tweet(tweet), "Tweet updated successfully")
