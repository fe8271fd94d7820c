from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from app.utility.exception import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class CamelModel(BaseModel):
    """Request body accepting camelCase keys (``fullName``) for snake_case fields"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def require_text(value: str | None, message: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(message)
    return value.strip()


def parse_body(model: type[ModelT], data: Any) -> ModelT:
    """
    Validate a raw JSON body inside the handler

    Owner-only updates take the body untyped so the ownership check runs
    before the payload is looked at. A missing body counts as ``{}``.

    Raises:
        ValidationError: If the body does not match ``model``
    """
    try:
        return model.model_validate({} if data is None else data)
    except PydanticValidationError as e:
        errors = [
            {"field": ".".join(str(part) for part in error["loc"]), "message": error["msg"]}
            for error in e.errors()
        ]
        message = "; ".join(f"{error['field']}: {error['message']}" if error["field"] else error["message"]
                            for error in errors)
        raise ValidationError(message or "Invalid request body", errors=errors)
