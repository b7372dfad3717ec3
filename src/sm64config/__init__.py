"""
sm64config: persist named runtime options to a ``name value`` text file.

The file lives in the per-user data directory, with the working directory as
a read-only fallback for installs that ship a config next to the executable.
"""

from .configfile import ConfigFile, LoadOutcome, LoadResult, load_config, save_config
from .errors import (
    ConfigDirectoryUnavailable,
    ConfigFileError,
    ConfigWriteError,
    DuplicateOptionError,
    OptionDecodeError,
    OptionEncodeError,
)
from .options import Option, OptionKind, OptionRegistry
from .paths import PathResolver, ResolvedPaths
from .settings import CONFIG_FILENAME, ConfigValues, build_registry
from .tokenizer import tokenize

__version__ = "0.1.0"

__all__ = [
    "CONFIG_FILENAME",
    "ConfigDirectoryUnavailable",
    "ConfigFile",
    "ConfigFileError",
    "ConfigValues",
    "ConfigWriteError",
    "DuplicateOptionError",
    "LoadOutcome",
    "LoadResult",
    "Option",
    "OptionDecodeError",
    "OptionEncodeError",
    "OptionKind",
    "OptionRegistry",
    "PathResolver",
    "ResolvedPaths",
    "build_registry",
    "load_config",
    "save_config",
    "tokenize",
]
