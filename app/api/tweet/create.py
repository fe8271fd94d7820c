from fastapi import Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.tweet import TweetModel
from app.model.user import UserModel
from app.utility.response import api_response
from app.utility.schema import CamelModel
from app.utility.serializer import serialize_tweet
from app.api.tweet.validation import validate_tweet_content
from app.api.router_base import router_tweets as router


class TweetRequest(CamelModel):
    content: str | None = None


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_tweet(
        data: TweetRequest,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    content = validate_tweet_content(data.content)

    tweet = TweetModel(content=content, owner_id=user.id)
    tweet.owner = user
    db.add(tweet)
    await db.commit()

    return api_response(serialize_tweet(tweet), "Tweet created successfully", status.HTTP_201_CREATED)
