import logging
from fastapi import Request, Response, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.middleware.auth import REFRESH_TOKEN_COOKIE
from app.model.user import UserModel
from app.service.session import start_session, set_auth_cookies
from app.utility.exception import UnauthorizedError
from app.utility.response import api_response
from app.utility.schema import CamelModel
from app.utility.security import verify_refresh_token
from app.api.router_base import router_users as router

logger = logging.getLogger(__name__)


class RefreshTokenRequest(CamelModel):
    refresh_token: str | None = None


@router.post("/refresh-token")
async def refresh_access_token(
        request: Request,
        response: Response,
        data: RefreshTokenRequest | None = None,
        db: AsyncSession = Depends(get_db)
):
    incoming_token = request.cookies.get(REFRESH_TOKEN_COOKIE) or (data.refresh_token if data else None)
    if not incoming_token:
        raise UnauthorizedError("Unauthorized request")

    claims = verify_refresh_token(incoming_token)

    user = await db.get(UserModel, claims["sub"])
    if not user:
        raise UnauthorizedError("Invalid refresh token", code="UserNotFound")

    if incoming_token != user.refresh_token:
        logger.warning(f"Reuse of a rotated refresh token for user {user.id}")
        raise UnauthorizedError("Refresh token is expired or used", code="TokenExpiredOrReused")

    access_token, refresh_token = await start_session(db, user)
    set_auth_cookies(response, access_token, refresh_token)

    return api_response(
        {"accessToken": access_token, "refreshToken": refresh_token},
        "Access token refreshed"
    )
