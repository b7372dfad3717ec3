"""Typed option registry.

An :class:`Option` names one persisted setting and the attribute it is stored
in. An :class:`OptionRegistry` binds an ordered, fixed set of options to a
values object and converts between the attribute values and their text form.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from .errors import DuplicateOptionError, OptionDecodeError, OptionEncodeError

logger = logging.getLogger(__name__)

UINT_MAX = 0xFFFFFFFF
FLOAT_DIGITS = 6

_UINT_RE = re.compile(r"[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class OptionKind(Enum):
    BOOL = "bool"
    UINT = "uint"
    FLOAT = "float"


@dataclass(frozen=True)
class Option:
    name: str
    kind: OptionKind
    field: str


# --------------------------------------------------------------------------
# Value codecs. Decoders receive the current value and return the new one.


def _decode_bool(name: str, text: str, current: Any) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    logger.debug("Ignoring non-boolean value '%s' for option '%s'", text, name)
    return bool(current)


def _decode_uint(name: str, text: str, current: Any) -> int:
    if not _UINT_RE.fullmatch(text):
        raise OptionDecodeError(name, text, "expected an unsigned decimal integer")
    value = int(text)
    if value > UINT_MAX:
        raise OptionDecodeError(name, text, f"larger than {UINT_MAX}")
    return value


def _decode_float(name: str, text: str, current: Any) -> float:
    if not _FLOAT_RE.fullmatch(text):
        raise OptionDecodeError(name, text, "expected a decimal number")
    return float(text)


def _encode_bool(name: str, value: Any) -> str:
    return "true" if value else "false"


def _encode_uint(name: str, value: Any) -> str:
    value = int(value)
    if not 0 <= value <= UINT_MAX:
        raise OptionEncodeError(name, value, f"outside 0..{UINT_MAX}")
    return str(value)


def _encode_float(name: str, value: Any) -> str:
    return f"{float(value):.{FLOAT_DIGITS}f}"


_DECODERS: Dict[OptionKind, Callable[[str, str, Any], Any]] = {
    OptionKind.BOOL: _decode_bool,
    OptionKind.UINT: _decode_uint,
    OptionKind.FLOAT: _decode_float,
}

_ENCODERS: Dict[OptionKind, Callable[[str, Any], str]] = {
    OptionKind.BOOL: _encode_bool,
    OptionKind.UINT: _encode_uint,
    OptionKind.FLOAT: _encode_float,
}


def decode_value(option: Option, text: str, current: Any) -> Any:
    """Decode ``text`` for ``option``.

    Raises OptionDecodeError for unparsable numbers; the caller keeps ``current``.
    """
    return _DECODERS[option.kind](option.name, text, current)


def encode_value(option: Option, value: Any) -> str:
    """Render ``value`` for ``option``; raises OptionEncodeError when out of range."""
    return _ENCODERS[option.kind](option.name, value)


class OptionRegistry:
    """Ordered set of options bound to the object that stores their values."""

    def __init__(self, options: Iterable[Option], values: Any) -> None:
        self._options: Tuple[Option, ...] = tuple(options)
        self._values = values
        seen: set[str] = set()
        for option in self._options:
            if option.name in seen:
                raise DuplicateOptionError(f"Option '{option.name}' registered twice")
            if not hasattr(values, option.field):
                raise AttributeError(
                    f"{type(values).__name__} has no field '{option.field}' for option '{option.name}'"
                )
            seen.add(option.name)

    @property
    def values(self) -> Any:
        return self._values

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def names(self) -> List[str]:
        return [o.name for o in self._options]

    def find(self, name: str) -> Optional[Option]:
        for option in self._options:
            if option.name == name:
                return option
        return None

    def get(self, option: Option) -> Any:
        return getattr(self._values, option.field)

    def set(self, option: Option, value: Any) -> None:
        setattr(self._values, option.field, value)

    def apply_text(self, option: Option, text: str) -> Any:
        """Decode ``text`` into the option's slot and return the stored value.

        On OptionDecodeError the slot keeps its prior value.
        """
        value = decode_value(option, text, self.get(option))
        self.set(option, value)
        return value

    def render(self, option: Option) -> str:
        return encode_value(option, self.get(option))

    def as_dict(self) -> Dict[str, Any]:
        return {o.name: self.get(o) for o in self._options}


__all__ = [
    "FLOAT_DIGITS",
    "UINT_MAX",
    "Option",
    "OptionKind",
    "OptionRegistry",
    "decode_value",
    "encode_value",
]
