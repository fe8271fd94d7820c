from app.api.health import healthcheck
from app.api.user import (register, login, logout, refresh_token, change_password, current_user,
                          update_account, images, channel_profile, history)
from app.api.video import list as video_list, publish, detail, update, delete, toggle_publish
from app.api.tweet import list as tweet_list, create as tweet_create, update as tweet_update, delete as tweet_delete
from app.api.comment import list as comment_list, add as comment_add, update as comment_update, delete as comment_delete
from app.api.like import toggle as like_toggle, liked_videos
from app.api.subscription import toggle as subscription_toggle, subscribers, subscribed
from app.api.playlist import (create as playlist_create, detail as playlist_detail, update as playlist_update,
                              delete as playlist_delete, videos as playlist_videos, user_playlists, saved_status)
from app.api.dashboard import stats, videos as dashboard_videos
from app.api.router_base import (
    router_health,
    router_users,
    router_video,
    router_tweets,
    router_comments,
    router_likes,
    router_subscriptions,
    router_playlist,
    router_dashboard,
)


def add_router(application):
    # Endpoint modules above register themselves on the shared routers
    application.include_router(router_health)
    application.include_router(router_users)
    application.include_router(router_video)
    application.include_router(router_tweets)
    application.include_router(router_comments)
    application.include_router(router_likes)
    application.include_router(router_subscriptions)
    application.include_router(router_playlist)
    application.include_router(router_dashboard)
