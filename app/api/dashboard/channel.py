from sqlalchemy.ext.asyncio import AsyncSession
from app.model.user import UserModel
from app.service.lookup import get_or_404


async def resolve_channel(db: AsyncSession, user: UserModel, channel_id: str | None) -> UserModel:
    """The channel named by ``channelId``, defaulting to the current user's own channel"""
    if not channel_id:
        return user
    return await get_or_404(db, UserModel, channel_id, "Channel")
