from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .options import Option, OptionKind, OptionRegistry

CONFIG_FILENAME = "sm64config.txt"


@dataclass
class ConfigValues:
    fullscreen: bool = False
    # Keyboard mappings (scancode values)
    key_a: int = 0x26
    key_b: int = 0x33
    key_start: int = 0x39
    key_r: int = 0x36
    key_z: int = 0x25
    key_cup: int = 0x148
    key_cdown: int = 0x150
    key_cleft: int = 0x14B
    key_cright: int = 0x14D
    key_stickup: int = 0x11
    key_stickdown: int = 0x1F
    key_stickleft: int = 0x1E
    key_stickright: int = 0x20

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# Save-file line order follows this tuple.
OPTIONS = (
    Option("fullscreen", OptionKind.BOOL, "fullscreen"),
    Option("key_a", OptionKind.UINT, "key_a"),
    Option("key_b", OptionKind.UINT, "key_b"),
    Option("key_start", OptionKind.UINT, "key_start"),
    Option("key_r", OptionKind.UINT, "key_r"),
    Option("key_z", OptionKind.UINT, "key_z"),
    Option("key_cup", OptionKind.UINT, "key_cup"),
    Option("key_cdown", OptionKind.UINT, "key_cdown"),
    Option("key_cleft", OptionKind.UINT, "key_cleft"),
    Option("key_cright", OptionKind.UINT, "key_cright"),
    Option("key_stickup", OptionKind.UINT, "key_stickup"),
    Option("key_stickdown", OptionKind.UINT, "key_stickdown"),
    Option("key_stickleft", OptionKind.UINT, "key_stickleft"),
    Option("key_stickright", OptionKind.UINT, "key_stickright"),
)


def build_registry(values: Optional[ConfigValues] = None) -> OptionRegistry:
    """Bind the standard option set to ``values`` (fresh defaults if omitted)."""
    return OptionRegistry(OPTIONS, values if values is not None else ConfigValues())


__all__ = ["CONFIG_FILENAME", "ConfigValues", "OPTIONS", "build_registry"]
