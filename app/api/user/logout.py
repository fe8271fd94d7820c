from fastapi import Response, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import get_current_user
from app.model.user import UserModel
from app.service.session import end_session, clear_auth_cookies
from app.utility.response import api_response
from app.api.router_base import router_users as router


@router.post("/logout")
async def logout(
        response: Response,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    await end_session(db, user)
    clear_auth_cookies(response)

    return api_response({}, "User logged out successfully")
