from bson import ObjectId

from app.core.errors import InvalidIdentifier


def validate_id(value: str) -> str:
    if not ObjectId.is_valid(value):
        raise InvalidIdentifier(f"'{value}' is not a valid identifier")
    return value
