from fastapi import Response
from sqlalchemy.ext.asyncio import AsyncSession
from app.config.environments import ENVIRONMENT, ACCESS_TOKEN_EXPIRY, REFRESH_TOKEN_EXPIRY
from app.middleware.auth import ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE
from app.utility.security import issue_access_token, issue_refresh_token, new_session_id

COOKIE_SECURE = False
COOKIE_SAMESITE = "lax"
if ENVIRONMENT == "production":
    COOKIE_SECURE = True
    COOKIE_SAMESITE = "none"


async def start_session(db: AsyncSession, user) -> tuple[str, str]:
    """
    Issue a fresh access/refresh pair and make it the user's only session

    Storing the new refresh token overwrites the previous one, which
    invalidates the old refresh token and every access token issued with it.
    """
    session_id = new_session_id()
    access_token = issue_access_token(user, session_id)
    refresh_token = issue_refresh_token(user, session_id)

    user.refresh_token = refresh_token
    await db.commit()

    return access_token, refresh_token


async def end_session(db: AsyncSession, user):
    user.refresh_token = None
    await db.commit()


def set_auth_cookies(response: Response, access_token: str, refresh_token: str):
    response.set_cookie(
        key=ACCESS_TOKEN_COOKIE,
        value=access_token,
        httponly=True,
        max_age=ACCESS_TOKEN_EXPIRY,
        secure=COOKIE_SECURE,
        samesite=COOKIE_SAMESITE
    )
    response.set_cookie(
        key=REFRESH_TOKEN_COOKIE,
        value=refresh_token,
        httponly=True,
        max_age=REFRESH_TOKEN_EXPIRY,
        secure=COOKIE_SECURE,
        samesite=COOKIE_SAMESITE
    )


def clear_auth_cookies(response: Response):
    for key in (ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE):
        response.delete_cookie(
            key,
            httponly=True,
            secure=COOKIE_SECURE,
            samesite=COOKIE_SAMESITE
        )
