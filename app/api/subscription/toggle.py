from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.subscription import SubscriptionModel
from app.model.user import UserModel
from app.service.lookup import get_or_404
from app.service.toggle import toggle_relation
from app.utility.exception import ValidationError
from app.utility.identifier import parse_id
from app.utility.response import api_response
from app.utility.serializer import serialize_subscription
from app.api.router_base import router_subscriptions as router


@router.post("/c/{channel_id}")
async def toggle_subscription(
        channel_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    if parse_id(channel_id, "Channel") == user.id:
        raise ValidationError("You cannot subscribe to your own channel")

    channel = await get_or_404(db, UserModel, channel_id, "Channel")

    subscribed, subscription = await toggle_relation(
        db,
        SubscriptionModel,
        subscriber_id=user.id,
        channel_id=channel.id
    )
    if subscribed:
        data = serialize_subscription(subscription) if subscription else {}
        return api_response({"isSubscribed": True, **data}, "Channel subscribed")
    return api_response({"isSubscribed": False}, "Channel unsubscribed")
