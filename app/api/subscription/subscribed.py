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
from app.api.subscription.subscribers import SUBSCRIPTION_SORTABLE
from app.api.router_base import router_subscriptions as router


@router.get("/u/{subscriber_id}")
async def get_subscribed_channels(
        subscriber_id: str,
        params: PageParams = Depends(),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    subscriber = await get_or_404(db, UserModel, subscriber_id, "Subscriber")

    stmt = (
        select(UserModel)
        .join(SubscriptionModel, SubscriptionModel.channel_id == UserModel.id)
        .where(SubscriptionModel.subscriber_id == subscriber.id)
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
    return api_response(page, "Subscribed channels fetched successfully")
