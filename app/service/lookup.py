from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession
from app.model.video import VideoModel
from app.utility.exception import NotFoundError, ForbiddenError
from app.utility.identifier import parse_id


async def get_or_404(db: AsyncSession, model, raw_id: str, label: str):
    """Validate ``raw_id`` and load the entity, or raise InvalidId / NotFound."""
    entity_id = parse_id(raw_id, label)
    entity = await db.get(model, entity_id)
    if not entity:
        raise NotFoundError(f"{label} not found")
    return entity


def ensure_owner(entity, user, action: str, label: str):
    if entity.owner_id != user.id:
        raise ForbiddenError(f"You are not allowed to {action} this {label.lower()}")


async def get_owned_or_403(db: AsyncSession, model, raw_id: str, user, action: str, label: str):
    """
    Load an owned entity for mutation

    Raises, in order: ValidationError (InvalidId), NotFoundError,
    ForbiddenError when ``user`` does not own the entity.
    """
    entity = await get_or_404(db, model, raw_id, label)
    ensure_owner(entity, user, action, label)
    return entity


def visible_videos(user):
    """Published videos, plus the unpublished ones owned by ``user``."""
    return or_(VideoModel.is_published.is_(True), VideoModel.owner_id == user.id)


async def get_visible_video_or_404(db: AsyncSession, raw_id: str, user):
    video = await get_or_404(db, VideoModel, raw_id, "Video")
    # Unpublished videos are only visible to their owner
    if not video.is_published and video.owner_id != user.id:
        raise NotFoundError("Video not found")
    return video
