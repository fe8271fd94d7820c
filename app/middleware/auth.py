import logging
from fastapi import Request, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.model.user import UserModel
from app.utility.exception import UnauthorizedError
from app.utility.security import verify_access_token, read_session_id

logger = logging.getLogger(__name__)

ACCESS_TOKEN_COOKIE = "accessToken"
REFRESH_TOKEN_COOKIE = "refreshToken"


def extract_access_token(request: Request) -> str | None:
    token = request.cookies.get(ACCESS_TOKEN_COOKIE)
    if token:
        return token

    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return None


async def get_current_user(request: Request, db: AsyncSession = Depends(get_db)) -> UserModel:
    """
    Resolve the access token of the request to a user

    The token must still belong to the user's active session: logging out or
    rotating the refresh token invalidates every access token issued with it.
    """
    token = extract_access_token(request)
    if not token:
        raise UnauthorizedError("Unauthorized request")

    claims = verify_access_token(token)

    user = await db.get(UserModel, claims["sub"])
    if not user:
        logger.info(f"Access token for unknown user {claims['sub']}")
        raise UnauthorizedError("Invalid access token", code="TokenInvalid")

    if read_session_id(user.refresh_token) != claims["sid"]:
        raise UnauthorizedError("Session has been logged out or rotated", code="TokenInvalid")

    request.state.user = user
    return user
