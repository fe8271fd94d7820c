from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.user import UserModel
from app.utility.exception import ValidationError
from app.utility.response import api_response
from app.utility.schema import CamelModel, require_text
from app.utility.security import verify_password, hash_password
from app.api.router_base import router_users as router


class ChangePasswordRequest(CamelModel):
    old_password: str
    new_password: str


@router.post("/change-password")
async def change_password(
        data: ChangePasswordRequest,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    new_password = require_text(data.new_password, "New password is required")

    if not verify_password(data.old_password, user.password):
        raise ValidationError("Invalid old password")

    user.password = hash_password(new_password)
    await db.commit()

    return api_response({}, "Password changed successfully")
