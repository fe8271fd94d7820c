from fastapi import Depends
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.subscription import SubscriptionModel
from app.model.user import UserModel
from app.utility.exception import ValidationError, NotFoundError
from app.utility.response import api_response
from app.utility.serializer import serialize_user
from app.api.router_base import router_users as router


async def count_subscriptions(db: AsyncSession, *criteria) -> int:
    result = await db.execute(select(func.count(SubscriptionModel.id)).where(*criteria))
    return result.scalar_one()


@router.get("/c/{username}")
async def get_channel_profile(
        username: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    username = username.strip().lower()
    if not username:
        raise ValidationError("Username is missing")

    result = await db.execute(select(UserModel).where(UserModel.username == username))
    channel = result.scalar_one_or_none()
    if not channel:
        raise NotFoundError("Channel does not exist")

    subscribers_count = await count_subscriptions(db, SubscriptionModel.channel_id == channel.id)
    subscribed_to_count = await count_subscriptions(db, SubscriptionModel.subscriber_id == channel.id)
    is_subscribed = await count_subscriptions(
        db,
        SubscriptionModel.channel_id == channel.id,
        SubscriptionModel.subscriber_id == user.id
    ) > 0

    profile = serialize_user(channel)
    profile.pop("email")
    profile.update({
        "subscribersCount": subscribers_count,
        "channelsSubscribedToCount": subscribed_to_count,
        "isSubscribed": is_subscribed,
    })

    return api_response(profile, "User channel fetched successfully")
