"""
JSON shapes of the entities. Field names are camelCase; password and
refresh token never leave the server.
"""


def serialize_owner(user) -> dict | None:
    if user is None:
        return None
    return {
        "id": user.id,
        "username": user.username,
        "fullName": user.full_name,
        "avatar": user.avatar,
    }


def serialize_user(user) -> dict:
    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "fullName": user.full_name,
        "avatar": user.avatar,
        "coverImage": user.cover_image,
        "createdAt": user.created_at,
        "updatedAt": user.updated_at,
    }


def serialize_video(video) -> dict:
    return {
        "id": video.id,
        "videoFile": video.video_file,
        "thumbnail": video.thumbnail,
        "title": video.title,
        "description": video.description,
        "duration": video.duration,
        "views": video.views,
        "isPublished": video.is_published,
        "owner": serialize_owner(video.owner),
        "createdAt": video.created_at,
        "updatedAt": video.updated_at,
    }


def serialize_comment(comment) -> dict:
    return {
        "id": comment.id,
        "content": comment.content,
        "video": comment.video_id,
        "owner": serialize_owner(comment.owner),
        "createdAt": comment.created_at,
        "updatedAt": comment.updated_at,
    }


def serialize_tweet(tweet) -> dict:
    return {
        "id": tweet.id,
        "content": tweet.content,
        "owner": serialize_owner(tweet.owner),
        "createdAt": tweet.created_at,
        "updatedAt": tweet.updated_at,
    }


def serialize_like(like) -> dict:
    return {
        "id": like.id,
        "likedBy": like.liked_by,
        "video": like.video_id,
        "comment": like.comment_id,
        "tweet": like.tweet_id,
        "createdAt": like.created_at,
    }


def serialize_subscription(subscription) -> dict:
    return {
        "id": subscription.id,
        "subscriber": subscription.subscriber_id,
        "channel": subscription.channel_id,
        "createdAt": subscription.created_at,
    }


def serialize_playlist(playlist, videos: list | None = None) -> dict:
    data = {
        "id": playlist.id,
        "name": playlist.name,
        "description": playlist.description,
        "owner": serialize_owner(playlist.owner),
        "createdAt": playlist.created_at,
        "updatedAt": playlist.updated_at,
    }
    if videos is not None:
        data["videos"] = [serialize_video(video) for video in videos]
        data["totalVideos"] = len(videos)
    return data
