from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.subscription import SubscriptionModel
from app.model.user import UserModel
from app.service.lookup import get_or_404
from app.utility.pagination import PageParams, paginate
from app.utility.response import api_response
from app.utility.serializer import serialize_owner
from app.api.router_base import router_subscriptions as router

SUBSCRIPTION_SORTABLE = {
    "createdAt": SubscriptionModel.created_at,
    "username": UserModel.username,
}


@router.get("/c/{channel_id}")
async def get_channel_subscribers(
        channel_id: str,
        params: PageParams = Depends(),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    channel = await get_or_404(db, UserModel, channel_id, "Channel")

    stmt = (
        select(UserModel)
        .join(SubscriptionModel, SubscriptionModel.subscriber_id == UserModel.id)
        .where(SubscriptionModel.channel_id == channel.id)
    )

    page = await paginate(
        db,
        stmt,
        params,
        serialize_owner,
        sortable=SUBSCRIPTION_SORTABLE,
        searchable=[UserModel.username, UserModel.full_name],
        tiebreaker=SubscriptionModel.id
    )
    return api_response(page, "Subscribers fetched successfully")
