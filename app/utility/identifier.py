import re
import uuid
from app.utility.exception import ValidationError

ID_PATTERN = re.compile(r"^[0-9a-f]{32}$")


def new_id() -> str:
    return uuid.uuid4().hex


def is_valid_id(value: str | None) -> bool:
    return bool(value) and ID_PATTERN.match(value) is not None


def parse_id(value: str | None, label: str) -> str:
    """
    Validate a path/query identifier

    Args:
        value: Raw identifier from the request
        label: Entity name used in the error message (e.g. "Video")

    Returns:
        str: The normalized identifier

    Raises:
        ValidationError: If the identifier is malformed
    """
    normalized = (value or "").strip().lower()
    if not is_valid_id(normalized):
        raise ValidationError(f"Invalid {label} Id", code="InvalidId")
    return normalized
