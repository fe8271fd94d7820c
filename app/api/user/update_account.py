from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.user import UserModel
from app.utility.exception import ValidationError, ConflictError
from app.utility.response import api_response
from app.utility.schema import CamelModel
from app.utility.serializer import serialize_user
from app.api.router_base import router_users as router


class UpdateAccountRequest(CamelModel):
    full_name: str | None = None
    email: str | None = None


@router.patch("/update-account")
async def update_account(
        data: UpdateAccountRequest,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    full_name = (data.full_name or "").strip()
    email = (data.email or "").strip().lower()
    if not full_name and not email:
        raise ValidationError("At least one field (fullName or email) is required")

    if email and email != user.email:
        result = await db.execute(select(UserModel.id).where(UserModel.email == email))
        if result.scalar_one_or_none():
            raise ConflictError("Email is already in use")
        user.email = email

    if full_name:
        user.full_name = full_name

    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ConflictError("Email is already in use")

    return api_response(serialize_user(user), "Account details updated successfully")
