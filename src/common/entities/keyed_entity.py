"""Base entity for records kept in keyed stores."""

from dataclasses import MISSING, dataclass, fields
from datetime import date, datetime
from typing import Any, TypeVar, get_type_hints

from src.common.exceptions.custom_exceptions import InvalidValueError
from src.common.utils.date_utils import parse_iso_date, parse_iso_datetime, to_iso

E = TypeVar("E", bound="KeyedEntity")


def require_positive_int(field_name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidValueError(field_name, value, f"{field_name} must be a positive integer. Provided value: {value!r}")


def require_non_negative_int(field_name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidValueError(field_name, value, f"{field_name} cannot be negative. Provided value: {value!r}")


def require_non_empty_str(field_name: str, value: Any) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidValueError(field_name, value, f"{field_name} cannot be null or empty.")


def _normalize_key(key: str) -> str:
    """Folds case and underscores so dateAdded, DATE_ADDED and date_added all match."""
    return key.replace("_", "").lower()


@dataclass
class KeyedEntity:
    """
    An entity identified by a strictly positive integer id.

    Subclasses validate their own fields in __post_init__ and must call super().
    Construction either yields a fully valid entity or raises InvalidValueError.
    """

    id: int

    def __post_init__(self) -> None:
        require_positive_int("id", self.id)

    def to_dict(self) -> dict[str, Any]:
        """Returns a JSON-safe dict keyed by attribute name."""
        data: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, (date, datetime)):
                value = to_iso(value)
            data[f.name] = value
        return data

    @classmethod
    def from_dict(cls: type[E], data: dict[str, Any]) -> E:
        """Builds an entity from a dict, matching keys case-insensitively."""
        normalized = {_normalize_key(str(key)): value for key, value in data.items()}
        hints = get_type_hints(cls)
        kwargs: dict[str, Any] = {}

        for f in fields(cls):
            if not f.init:
                continue
            key = _normalize_key(f.name)
            if key not in normalized:
                if f.default is MISSING and f.default_factory is MISSING:
                    raise InvalidValueError(f.name, None, f"Missing required field '{f.name}' for {cls.__name__}.")
                continue

            value = normalized[key]
            hint = hints.get(f.name)
            if isinstance(value, str) and hint in (datetime, date):
                try:
                    value = parse_iso_datetime(value) if hint is datetime else parse_iso_date(value)
                except ValueError as e:
                    raise InvalidValueError(f.name, value, f"{f.name} is not a valid ISO date: {value!r}") from e
            kwargs[f.name] = value

        return cls(**kwargs)


@dataclass
class StockItem(KeyedEntity):
    """A named entity with a non-negative quantity."""

    name: str
    quantity: int

    def __post_init__(self) -> None:
        super().__post_init__()
        require_non_empty_str("name", self.name)
        require_non_negative_int("quantity", self.quantity)
