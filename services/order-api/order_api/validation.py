from typing import Any, List, Mapping

from .schemas import FieldError

REQUIRED_FIELDS = ("full_name", "address", "status", "item_name", "total")

def humanize(field: str) -> str:
    """`item_name` -> `Item name`."""
    words = field.replace("_", " ").strip().lower()
    return words[:1].upper() + words[1:]

def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False

def validate_presence(data: Mapping[str, Any], fields=REQUIRED_FIELDS) -> List[FieldError]:
    """Check every field independently; one FieldError per blank field, in `fields` order."""
    return [
        FieldError(field=field, message=f"{humanize(field)} can't be blank")
        for field in fields
        if is_blank(data.get(field))
    ]

class OrderValidationError(ValueError):
    """Raised by a store when an order can't be persisted."""

    def __init__(self, errors: List[FieldError]):
        self.errors = list(errors)
        super().__init__(", ".join(self.messages))

    @property
    def messages(self) -> List[str]:
        return [e.message for e in self.errors]
