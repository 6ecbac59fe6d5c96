from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from numbers import Number
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, List, Optional, Type, TypeVar

from ..exceptions import ResultAccessError, ResultTypeError

__all__ = (
    "NotFound",
    "NotFoundType",
    "ValueKind",
    "ExtractionResult",
)

T = TypeVar("T")


class NotFoundType:
    """Sentinel for selectors which matched nothing. Distinct from None."""

    _instance: Optional["NotFoundType"] = None

    def __new__(cls) -> "NotFoundType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NotFound"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (NotFoundType, ())


NotFound = NotFoundType()


class ValueKind(str, Enum):
    """Tag of an extracted value. Accessors match on the tag instead of inspecting classes."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    LIST = "list"
    MAPPING = "mapping"
    NOT_FOUND = "not_found"
    OTHER = "other"

    @classmethod
    def of(cls, value: Any) -> "ValueKind":
        if value is NotFound:
            return cls.NOT_FOUND
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, Number):
            return cls.NUMBER
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, (list, tuple, set, frozenset)):
            return cls.LIST
        if isinstance(value, Mapping):
            return cls.MAPPING
        return cls.OTHER


class ExtractionResult(Mapping):
    """
    Read-only mapping of output keys to extracted values with typed accessors.

    Every accessor raises ResultAccessError if the key is not part of the result
    and ResultTypeError if the value cannot be returned as the requested type.

    Example:
        >>> result = ExtractionResult({"episodes": "37", "tags": ["a", "b"], "score": NotFound})
        >>> result.get_int("episodes")
        37
        >>> result.get_list("tags", str)
        ['a', 'b']
        >>> result.not_found("score")
        True
    """

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        self._data: Mapping[str, Any] = MappingProxyType(dict(data or {}))
        self._kinds: Dict[str, ValueKind] = {key: ValueKind.of(value) for key, value in self._data.items()}

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ExtractionResult):
            return dict(self._data) == dict(other._data)
        if isinstance(other, Mapping):
            return dict(self._data) == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ExtractionResult({dict(self._data)!r})"

    def __str__(self) -> str:
        return "\n".join(f"{key} => {value}" for key, value in self._data.items())

    def _require(self, identifier: str) -> Any:
        if identifier not in self._data:
            raise ResultAccessError(f"Result doesn't contain entry [{identifier}]")
        return self._data[identifier]

    def not_found(self, identifier: str) -> bool:
        """True if the key doesn't exist or its value is NotFound."""
        return self._kinds.get(identifier, ValueKind.NOT_FOUND) is ValueKind.NOT_FOUND

    def kind(self, identifier: str) -> ValueKind:
        self._require(identifier)
        return self._kinds[identifier]

    def is_of_type(self, identifier: str, cl: type) -> bool:
        """True if the value is exactly of type `cl`. Subclasses don't count."""
        return type(self._require(identifier)) is cl

    def get_str(self, identifier: str) -> str:
        value = self._require(identifier)
        if self._kinds[identifier] is ValueKind.STRING:
            return value
        return str(value)

    def get_str_or_default(self, identifier: str, default: str = "") -> str:
        self._require(identifier)
        if self.not_found(identifier):
            return default
        return self.get_str(identifier)

    def get_int(self, identifier: str) -> int:
        """
        Numbers are truncated, numeric strings are parsed.
        Parsing can alter values: "054" becomes 54.
        """
        value = self._require(identifier)
        kind = self._kinds[identifier]

        try:
            if kind is ValueKind.NUMBER:
                return int(value)
            if kind is ValueKind.STRING:
                return int(value.strip())
        except (ValueError, TypeError, OverflowError):
            pass

        raise ResultTypeError(f"Unable to return value [{value}] as int.")

    def get_int_or_default(self, identifier: str, default: int = 0) -> int:
        self._require(identifier)
        if self.not_found(identifier):
            return default
        return self.get_int(identifier)

    def get_float(self, identifier: str) -> float:
        value = self._require(identifier)
        kind = self._kinds[identifier]

        try:
            if kind is ValueKind.NUMBER:
                return float(value)
            if kind is ValueKind.STRING:
                return float(value.strip())
        except (ValueError, TypeError, OverflowError):
            pass

        raise ResultTypeError(f"Unable to return value [{value}] as float.")

    def get_float_or_default(self, identifier: str, default: float = 0.0) -> float:
        self._require(identifier)
        if self.not_found(identifier):
            return default
        return self.get_float(identifier)

    def _as_list(self, identifier: str) -> List[Any]:
        value = self._require(identifier)
        if self._kinds[identifier] is ValueKind.LIST:
            return [item for item in value if item is not None]
        return [value]

    def get_list(self, identifier: str, element_type: Optional[Type[T]] = None) -> List[T]:
        """
        Returns the value as list. A single value is wrapped in a list, None elements are dropped.

        Raises:
            ResultTypeError: If `element_type` is given and not all elements are of that type.
        """
        items = self._as_list(identifier)
        if element_type is not None and not all(isinstance(item, element_type) for item in items):
            raise ResultTypeError(f"Not all elements of [{identifier}] are of type [{element_type.__name__}].")
        return items

    def map_list(self, identifier: str, transform: Callable[[str], T]) -> List[T]:
        """Same as get_list, but every element is passed as string through `transform`."""
        return [transform(str(item)) for item in self._as_list(identifier)]
