"""Load and save the option registry as a ``name value`` text file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple

from .errors import ConfigWriteError, OptionDecodeError, OptionEncodeError
from .line_reader import iter_lines
from .options import OptionRegistry
from .paths import PathResolver
from .settings import CONFIG_FILENAME, build_registry
from .tokenizer import tokenize

log = logging.getLogger(__name__)


class LoadOutcome(Enum):
    LOADED = "loaded"
    CREATED = "created"
    UNREADABLE = "unreadable"


@dataclass
class LoadResult:
    outcome: LoadOutcome
    path: Optional[Path] = None
    applied: List[str] = field(default_factory=list)
    unknown: List[str] = field(default_factory=list)
    missing_value: List[str] = field(default_factory=list)
    invalid: List[Tuple[str, str]] = field(default_factory=list)
    save_error: Optional[ConfigWriteError] = None

    @property
    def created(self) -> bool:
        return self.outcome is LoadOutcome.CREATED

    @property
    def clean(self) -> bool:
        """True when every line was understood and nothing failed."""
        if self.outcome is LoadOutcome.UNREADABLE:
            return False
        return not (self.unknown or self.missing_value or self.invalid or self.save_error)


class ConfigFile:
    """Persist an :class:`OptionRegistry` to a plain text file.

    Each line holds one ``name value`` pair. Loading tolerates blank lines,
    unknown names, missing values and bad numbers; each is logged and the
    affected option keeps its current value. When no file is found the current
    values are written out as the new file.
    """

    def __init__(
        self,
        registry: Optional[OptionRegistry] = None,
        resolver: Optional[PathResolver] = None,
        filename: str = CONFIG_FILENAME,
    ) -> None:
        self.registry = registry if registry is not None else build_registry()
        self.resolver = resolver or PathResolver()
        self.filename = filename

    def load(self) -> LoadResult:
        path = self.resolver.resolve_for_read(self.filename)
        if path is None:
            return self._create_default()
        try:
            handle = path.open("rb")
        except FileNotFoundError:
            return self._create_default()
        except OSError as exc:
            # The file exists; leave it untouched rather than replace it with defaults
            log.error("Couldn't open '%s': %s; keeping current values", path, exc)
            return LoadResult(outcome=LoadOutcome.UNREADABLE, path=path)

        log.info("Loading configuration from '%s'", path)
        result = LoadResult(outcome=LoadOutcome.LOADED, path=path)
        with handle:
            for line in iter_lines(handle):
                self._apply_line(line, result)
        return result

    def _create_default(self) -> LoadResult:
        log.info("Config file '%s' not found. Creating it.", self.filename)
        result = LoadResult(outcome=LoadOutcome.CREATED)
        try:
            result.path = self.save()
        except ConfigWriteError as exc:
            log.error("Failed to write default configuration: %s", exc)
            result.save_error = exc
        return result

    def _apply_line(self, line: str, result: LoadResult) -> None:
        tokens = tokenize(line, 2)
        if not tokens:
            return
        if len(tokens) == 1:
            log.warning("error: expected value for '%s'", tokens[0])
            result.missing_value.append(tokens[0])
            return

        name, text = tokens
        option = self.registry.find(name)
        if option is None:
            log.warning("unknown option '%s'", name)
            result.unknown.append(name)
            return
        try:
            self.registry.apply_text(option, text)
        except OptionDecodeError as exc:
            log.warning("%s; keeping %s", exc, self.registry.render(option))
            result.invalid.append((name, text))
            return
        log.debug("option: '%s', value: '%s'", name, text)
        result.applied.append(name)

    def dumps(self) -> str:
        """Render every option, one ``name value`` line each, in registry order."""
        return "".join(f"{o.name} {self.registry.render(o)}\n" for o in self.registry)

    def save(self) -> Path:
        """Write all current values to the preferred directory.

        Raises ConfigDirectoryUnavailable if the directory cannot be created and
        ConfigWriteError if a value cannot be rendered or the file cannot be
        written. Nothing is written in the first case.
        """
        path = self.resolver.resolve_for_write(self.filename)
        log.info("Saving configuration to '%s'", path)
        try:
            payload = self.dumps()
        except OptionEncodeError as exc:
            raise ConfigWriteError(f"Not writing '{path}': {exc}") from exc
        try:
            with path.open("w", encoding="utf-8", newline="\n") as f:
                f.write(payload)
        except OSError as exc:
            raise ConfigWriteError(f"Failed to write '{path}': {exc}") from exc
        return path


def load_config(
    filename: str = CONFIG_FILENAME,
    registry: Optional[OptionRegistry] = None,
    resolver: Optional[PathResolver] = None,
) -> LoadResult:
    return ConfigFile(registry, resolver, filename).load()


def save_config(
    filename: str = CONFIG_FILENAME,
    registry: Optional[OptionRegistry] = None,
    resolver: Optional[PathResolver] = None,
) -> Path:
    return ConfigFile(registry, resolver, filename).save()


__all__ = ["ConfigFile", "LoadOutcome", "LoadResult", "load_config", "save_config"]
