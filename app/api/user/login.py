import logging
from fastapi import Response, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.session import start_session, set_auth_cookies
from app.utility.exception import ValidationError, NotFoundError, UnauthorizedError
from app.utility.response import api_response
from app.utility.schema import CamelModel
from app.utility.security import verify_password
from app.utility.serializer import serialize_user
from app.api.router_base import router_users as router

logger = logging.getLogger(__name__)


class LoginRequest(CamelModel):
    email: str | None = None
    username: str | None = None
    password: str


@router.post("/login")
async def login(response: Response, data: LoginRequest, db: AsyncSession = Depends(get_db)):
    if not (data.email or data.username):
        raise ValidationError("Username or email is required")

    if data.email:
        stmt = select(UserModel).where(UserModel.email == data.email.strip().lower())
    else:
        stmt = select(UserModel).where(UserModel.username == data.username.strip().lower())

    result = await db.execute(stmt)
    user = result.scalar_one_or_none()

    if not user:
        raise NotFoundError("User does not exist", code="UserNotFound")

    if not verify_password(data.password, user.password):
        logger.info(f"Wrong password for user {user.id}")
        raise UnauthorizedError("Invalid user credentials")

    access_token, refresh_token = await start_session(db, user)
    set_auth_cookies(response, access_token, refresh_token)

    return api_response(
        {
            "user": serialize_user(user),
            "accessToken": access_token,
            "refreshToken": refresh_token,
        },
        "User logged in successfully"
    )
