from __future__ import annotations

import argparse
import errno
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

import yaml

from . import __version__
from .configfile import ConfigFile, LoadOutcome
from .errors import ConfigDirectoryUnavailable, ConfigWriteError, OptionDecodeError
from .logging_config import configure_logging
from .options import OptionKind
from .paths import PathResolver, default_base_dir, default_preferred_dir
from .settings import CONFIG_FILENAME, build_registry

log = logging.getLogger("sm64config")

BANNER = "sm64config %s - report bugs with the contents of your config file attached."


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="sm64config",
        description="Load, inspect and save the sm64pc option file",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--file",
        dest="filename",
        default=CONFIG_FILENAME,
        help="Config file name inside the config directory (default: %(default)s)",
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=None,
        help="Preferred per-user directory (default: platform data dir)",
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=None,
        help="Fallback directory used when the config directory is missing",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("load", help="Load the config file, creating it with defaults if missing")
    sub.add_parser("save", help="Write default values to the config directory")
    show = sub.add_parser("show", help="Load and print the effective values")
    show.add_argument("--yaml", action="store_true", help="Print values as YAML")
    set_ = sub.add_parser("set", help="Change one option and save")
    set_.add_argument("name")
    set_.add_argument("value")
    sub.add_parser("paths", help="Print the directories used for reading and writing")
    return parser.parse_args(argv)


def _log_level(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def _build_config(args) -> ConfigFile:
    preferred = args.config_dir
    fallback = args.base_dir
    resolver = PathResolver(
        preferred_dir=(lambda: preferred) if preferred else default_preferred_dir,
        fallback_dir=(lambda: fallback) if fallback else default_base_dir,
    )
    return ConfigFile(build_registry(), resolver, args.filename)


def _print_values(config: ConfigFile, as_yaml: bool, out: TextIO) -> None:
    if as_yaml:
        yaml.safe_dump(config.registry.as_dict(), out, sort_keys=False)
    else:
        out.write(config.dumps())


def _set_option(config: ConfigFile, name: str, value: str) -> int:
    option = config.registry.find(name)
    if option is None:
        log.error("unknown option '%s'", name)
        return 1
    if option.kind is OptionKind.BOOL and value not in ("true", "false"):
        log.error("invalid value '%s' for option '%s': expected true or false", value, name)
        return 1
    try:
        config.registry.apply_text(option, value)
    except OptionDecodeError as exc:
        log.error("%s", exc)
        return 1
    config.save()
    return 0


def main(argv=None, out: Optional[TextIO] = None) -> int:
    args = parse_args(argv)
    configure_logging(_log_level(args.verbose))
    if out is None:
        out = sys.stdout
    log.info(BANNER, __version__)

    config = _build_config(args)
    try:
        if args.command == "paths":
            paths = config.resolver.resolve()
            out.write(f"preferred: {paths.preferred_dir}\n")
            out.write(f"fallback: {paths.fallback_dir}\n")
            out.write(f"active: {paths.active_dir}\n")
            return 0

        if args.command == "save":
            out.write(f"{config.save()}\n")
            return 0

        result = config.load()
        if result.save_error is not None or result.outcome is LoadOutcome.UNREADABLE:
            return 1

        if args.command == "set":
            return _set_option(config, args.name, args.value)
        if args.command == "show":
            _print_values(config, args.yaml, out)
            return 0

        action = "created" if result.created else "loaded"
        out.write(f"{action} {result.path}\n")
        if not result.clean:
            out.write(
                f"unknown: {len(result.unknown)}, missing value: {len(result.missing_value)}, "
                f"invalid: {len(result.invalid)}\n"
            )
        return 0
    except ConfigDirectoryUnavailable as exc:
        log.error("Error: %s", exc)
        return errno.ENOENT
    except ConfigWriteError as exc:
        log.error("%s", exc)
        return 1
