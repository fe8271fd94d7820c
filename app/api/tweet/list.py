from fastapi import Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.tweet import TweetModel
from app.model.user import UserModel
from app.utility.identifier import parse_id
from app.utility.pagination import PageParams, paginate
from app.utility.response import api_response
from app.utility.serializer import serialize_tweet
from app.api.router_base import router_tweets as router

TWEET_SORTABLE = {
    "createdAt": TweetModel.created_at,
    "updatedAt": TweetModel.updated_at,
}


@router.get("")
async def get_all_tweets(
        params: PageParams = Depends(),
        user_id: str | None = Query(default=None, alias="userId"),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    stmt = select(TweetModel)
    if user_id:
        stmt = stmt.where(TweetModel.owner_id == parse_id(user_id, "User"))

    page = await paginate(
        db,
        stmt,
        params,
        serialize_tweet,
        sortable=TWEET_SORTABLE,
        searchable=[TweetModel.content],
        tiebreaker=TweetModel.id
    )
    return api_response(page, "Tweets fetched successfully")
