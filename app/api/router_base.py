from fastapi import APIRouter

API_PREFIX = "/api/v1"

router_health = APIRouter(prefix=f"{API_PREFIX}/healthcheck", tags=["Health"])
router_users = APIRouter(prefix=f"{API_PREFIX}/users", tags=["Users"])
router_video = APIRouter(prefix=f"{API_PREFIX}/video", tags=["Video"])
router_tweets = APIRouter(prefix=f"{API_PREFIX}/tweets", tags=["Tweets"])
router_comments = APIRouter(prefix=f"{API_PREFIX}/comments", tags=["Comments"])
router_likes = APIRouter(prefix=f"{API_PREFIX}/likes", tags=["Likes"])
router_subscriptions = APIRouter(prefix=f"{API_PREFIX}/subscriptions", tags=["Subscriptions"])
router_playlist = APIRouter(prefix=f"{API_PREFIX}/playlist", tags=["Playlist"])
router_dashboard = APIRouter(prefix=f"{API_PREFIX}/dashboard", tags=["Dashboard"])
