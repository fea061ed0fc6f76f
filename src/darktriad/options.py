"""Validated per-call analysis options."""

import math
from collections.abc import Mapping
from enum import Enum
from typing import Any, Callable, Dict, FrozenSet, Tuple

from pydantic import BaseModel, ConfigDict, model_validator

from darktriad.utils.logging import get_logger

logger = get_logger(__name__)


class Encoding(str, Enum):
    """How match counts and weights combine into a lexical value."""

    BINARY = "binary"
    FREQ = "freq"
    PERCENT = "percent"


class Locale(str, Enum):
    """Spelling variant of the input text."""

    US = "US"
    GB = "GB"


class Output(str, Enum):
    """Shape of the analysis result."""

    LEX = "lex"
    MATCHES = "matches"
    FULL = "full"


class SortBy(str, Enum):
    """Ordering of match lists."""

    FREQ = "freq"
    LEX = "lex"
    WEIGHT = "weight"


DEFAULT_N_GRAMS: Tuple[int, ...] = (2, 3)

_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0"}

_ENUM_ALIASES = {
    Encoding: {"frequency": "freq"},
    Locale: {"EN-US": "US", "EN_US": "US", "EN-GB": "GB", "EN_GB": "GB", "UK": "GB"},
}


def _parse_enum(enum_cls) -> Callable[[Any], Enum]:
    def parse(value: Any) -> Enum:
        if isinstance(value, enum_cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"expected a string, got {type(value).__name__}")
        key = value.strip()
        key = key.upper() if enum_cls is Locale else key.lower()
        key = _ENUM_ALIASES.get(enum_cls, {}).get(key, key)
        return enum_cls(key)

    return parse


def _parse_float(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError("booleans are not numbers")
    number = float(value)
    if math.isnan(number):
        raise ValueError("NaN is not a valid bound")
    return number


def _parse_places(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("booleans are not numbers")
    number = float(value)
    if not number.is_integer() or number < 0:
        raise ValueError("places must be a whole number >= 0")
    return int(number)


def _parse_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def _parse_n_grams(value: Any) -> Tuple[int, ...]:
    if isinstance(value, bool):
        return DEFAULT_N_GRAMS if value else ()
    if isinstance(value, str):
        text = value.strip().lower()
        # Only the words are legacy switches; "1" and "0" are sizes
        if text == "true":
            return DEFAULT_N_GRAMS
        if text == "false":
            return ()
        value = [part for part in text.split(",") if part.strip()]
    elif isinstance(value, (int, float)):
        value = [value]

    if not isinstance(value, (list, tuple, set, frozenset)):
        raise ValueError(f"unrecognised n-gram type: {type(value).__name__}")

    sizes = []
    for item in value:
        if isinstance(item, bool):
            raise ValueError("booleans are not n-gram sizes")
        size = float(item)
        if not size.is_integer():
            raise ValueError(f"n-gram size must be a whole number: {item!r}")
        sizes.append(int(size))

    # Sizes below 2 add nothing beyond the base tokens; [0] disables n-grams
    return tuple(dict.fromkeys(n for n in sizes if n >= 2))


# option key -> (field name, parser)
_FIELDS: Dict[str, Tuple[str, Callable[[Any], Any]]] = {
    "encoding": ("encoding", _parse_enum(Encoding)),
    "locale": ("locale", _parse_enum(Locale)),
    "max": ("max_weight", _parse_float),
    "min": ("min_weight", _parse_float),
    "nGrams": ("n_grams", _parse_n_grams),
    "noInt": ("no_int", _parse_flag),
    "output": ("output", _parse_enum(Output)),
    "places": ("places", _parse_places),
    "sortBy": ("sort_by", _parse_enum(SortBy)),
    "wcGrams": ("wc_grams", _parse_flag),
}
_ALIASES = {field: key for key, (field, _) in _FIELDS.items()}


class AnalysisOptions(BaseModel):
    """
    Immutable options for one analysis call.

    Build with ``AnalysisOptions.parse(raw)``. Every field has a default and
    an invalid value never raises: it is replaced by the field's default, a
    warning is logged, and the option key is recorded in ``defaulted``.
    Keys are accepted in camelCase (``nGrams``) or snake_case (``n_grams``);
    ``min`` and ``max`` may also be given as ``min_weight``/``max_weight``.
    """

    model_config = ConfigDict(frozen=True)

    encoding: Encoding = Encoding.FREQ
    locale: Locale = Locale.US
    max_weight: float = math.inf
    min_weight: float = -math.inf
    n_grams: Tuple[int, ...] = DEFAULT_N_GRAMS
    no_int: bool = False
    output: Output = Output.LEX
    places: int = 9
    sort_by: SortBy = SortBy.FREQ
    wc_grams: bool = False
    defaulted: FrozenSet[str] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def _parse_raw(cls, data: Any) -> Any:
        if isinstance(data, AnalysisOptions):
            return data.model_dump()
        if data is None:
            return {}
        if not isinstance(data, Mapping):
            logger.warning(
                f"Options must be a mapping, got {type(data).__name__}; using defaults"
            )
            return {}

        parsed: Dict[str, Any] = {}
        defaulted = set()
        for raw_key, value in data.items():
            key = _ALIASES.get(raw_key, raw_key)
            if key not in _FIELDS:
                logger.warning(f"Ignoring unknown option: {raw_key!r}")
                continue
            field, parser = _FIELDS[key]
            if value is None:
                continue
            try:
                parsed[field] = parser(value)
            except (TypeError, ValueError):
                default = cls.model_fields[field].default
                shown = default.value if isinstance(default, Enum) else default
                logger.warning(
                    f"{key} option ({value!r}) is invalid, defaulting to {shown!r}"
                )
                defaulted.add(key)

        parsed["defaulted"] = frozenset(defaulted)
        return parsed

    @classmethod
    def parse(cls, raw: Any = None) -> "AnalysisOptions":
        """Parse a raw options mapping, defaulting anything invalid."""
        return cls.model_validate(raw)
