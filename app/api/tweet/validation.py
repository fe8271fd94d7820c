from app.model.tweet import TWEET_MAX_LENGTH
from app.utility.exception import ValidationError
from app.utility.schema import require_text


def validate_tweet_content(content: str | None) -> str:
    content = require_text(content, "Content is required")
    if len(content) > TWEET_MAX_LENGTH:
        raise ValidationError(
            f"Content cannot exceed {TWEET_MAX_LENGTH} characters",
            code="ContentTooLong"
        )
    return content
