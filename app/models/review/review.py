from typing import Any, Mapping
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator

from app.utilities.errors import ValidationError

MIN_RATING = 3
MAX_RATING = 5

REQUIRED_FIELDS_MESSAGE = "Name, rating, and review are required."
RATING_MESSAGE = f"Rating must be a whole number between {MIN_RATING} and {MAX_RATING}."
TEXT_MESSAGE = "Name, review, and imageUrl must be text."

TEXT_FIELDS = ("name", "review", "imageUrl")


class Review(BaseModel):
    name: str = Field(..., min_length=1)
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING)
    review: str = Field(..., min_length=1)
    imageUrl: str = ""

    @field_validator("rating", mode="before")
    @classmethod
    def reject_bool_rating(cls, value):
        if isinstance(value, bool):
            raise ValueError("rating must be a number")
        return value

    @field_validator("name", "review", "imageUrl", mode="before")
    @classmethod
    def cast_scalar_to_str(cls, value, info):
        if value is None and info.field_name == "imageUrl":
            return ""
        # Numbers and booleans are stored as their text; lists and objects are not
        if isinstance(value, (bool, int, float)):
            return str(value).lower() if isinstance(value, bool) else str(value)
        return value


def has_required_fields(candidate: Mapping[str, Any]) -> bool:
    return all(candidate.get(field) for field in ("name", "rating", "review"))


def validate_review(candidate: Mapping[str, Any]) -> Review:
    """Turn an incoming mapping into a Review or raise ValidationError.

    Falsy name/rating/review get the required-fields message. Once they are
    present, a bad rating and non-text name/review/imageUrl each get their
    own message.
    """
    if not isinstance(candidate, Mapping) or not has_required_fields(candidate):
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)

    try:
        return Review(
            name=candidate.get("name"),
            rating=candidate.get("rating"),
            review=candidate.get("review"),
            imageUrl=candidate.get("imageUrl"),
        )
    except PydanticValidationError as exc:
        fields = {str(error["loc"][0]) for error in exc.errors() if error["loc"]}
        messages = []
        if "rating" in fields:
            messages.append(RATING_MESSAGE)
        if fields & set(TEXT_FIELDS):
            messages.append(TEXT_MESSAGE)
        raise ValidationError(" ".join(messages) or TEXT_MESSAGE) from exc
