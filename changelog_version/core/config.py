"""Project config loading and option merging.

The config source is optional. A ``.py`` module (default
``.changelog.py``) may export option names as literals or producer
functions; a ``.toml`` file may declare literals only. Values are resolved
through ``resolve_value`` and merged with the options given explicitly on
the command line.
"""

from __future__ import annotations

import importlib.util
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from changelog_version.output.console import ConsoleProtocol, Style

from .options import DEFAULT_CONFIG_FILE, ResolvedOptions, canonical_name, normalize_options
from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_table
from .values import UNRESOLVED, resolve_value

__all__ = [
    "CONFIG_OPTIONS_TO_SKIP",
    "ConfigParseFailed",
    "ConfigProvider",
    "MappingConfigProvider",
    "PythonConfigProvider",
    "TomlConfigProvider",
    "merge_config",
    "parse_config",
    "provider_for",
]

# Passed through as-is: hooks are called later, paths anchor the lookup.
CONFIG_OPTIONS_TO_SKIP = frozenset(
    {"onBeforeRelease", "onAfterRelease", "projectRoot", "configFile"}
)


@dataclass(frozen=True, slots=True)
class ConfigParseFailed:
    """A config source was found but resolving its values raised."""

    path: Path
    reason: str = ""

    @property
    def message(self) -> str:
        return f"Problem parsing config file: {self.path}"


class ConfigProvider(Protocol):
    """Source of raw option values.

    ``load`` returns None when there is nothing to load; that is a normal
    state, not an error.
    """

    @property
    def path(self) -> Path: ...

    def load(self) -> StrDict | None: ...


def _note(console: ConsoleProtocol | None, message: str) -> None:
    if console is not None:
        console.print(message, Style.DIM)


@dataclass(frozen=True, slots=True)
class MappingConfigProvider:
    """Provider over an in-memory mapping (embedding and tests)."""

    data: Mapping[str, object]
    path: Path = Path(DEFAULT_CONFIG_FILE)

    def load(self) -> StrDict | None:
        return dict(self.data)


@dataclass(frozen=True, slots=True)
class PythonConfigProvider:
    """Executes a Python config module and collects its option names.

    A module-level ``CONFIG`` mapping takes precedence; otherwise every
    module attribute named like an option is used.
    """

    path: Path
    console: ConsoleProtocol | None = None

    def load(self) -> StrDict | None:
        if not self.path.is_file():
            return None

        spec = importlib.util.spec_from_file_location("changelog_version_config", self.path)
        if spec is None or spec.loader is None:
            _note(self.console, f"Config file could not be loaded: {self.path}")
            return None

        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            # The config file is optional; a broken one is treated as absent.
            _note(self.console, f"Config file could not be loaded: {self.path} ({e})")
            return None

        explicit = as_str_dict(getattr(module, "CONFIG", None))
        if explicit is not None:
            return dict(explicit)

        return {
            name: value
            for name, value in vars(module).items()
            if not name.startswith("_") and canonical_name(name) is not None
        }


@dataclass(frozen=True, slots=True)
class TomlConfigProvider:
    """Reads literal options from a TOML file, optionally under ``[changelog]``."""

    path: Path
    console: ConsoleProtocol | None = None

    def load(self) -> StrDict | None:
        if not self.path.is_file():
            return None

        try:
            data_obj: object = tomllib.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
            _note(self.console, f"Config file could not be loaded: {self.path} ({e})")
            return None

        data = as_str_dict(data_obj) or {}
        return get_table(data, "changelog") or data


def provider_for(path: Path, console: ConsoleProtocol | None = None) -> ConfigProvider:
    """Pick a provider from the config file suffix."""
    if path.suffix == ".toml":
        return TomlConfigProvider(path=path, console=console)
    return PythonConfigProvider(path=path, console=console)


def _resolve_options(config: StrDict, context: StrDict) -> tuple[StrDict, list[str]]:
    resolved: StrDict = {}
    dropped: list[str] = []
    for name, value in config.items():
        if name in CONFIG_OPTIONS_TO_SKIP:
            resolved[name] = value
            continue

        result = resolve_value(value, context)
        if result is UNRESOLVED:
            dropped.append(name)
            continue
        resolved[name] = result
    return resolved, dropped


def merge_config(
    explicit: Mapping[str, object],
    config: Mapping[str, object],
    *,
    config_path: Path,
    console: ConsoleProtocol | None = None,
) -> Result[StrDict, ConfigParseFailed]:
    """Merge resolved config values with explicit options.

    Explicit options win, except ``projectRoot``: when the config declares
    one it replaces the explicit value.
    """
    explicit_opts = normalize_options(explicit)
    config_opts = normalize_options(config)

    try:
        resolved, dropped = _resolve_options(config_opts, dict(explicit_opts))
        project_root = (
            resolve_value(config_opts["projectRoot"], dict(explicit_opts))
            if "projectRoot" in config_opts
            else UNRESOLVED
        )
    except Exception as e:
        return Err(ConfigParseFailed(path=config_path, reason=str(e)))

    for name in dropped:
        _note(console, f"Ignoring {name}: value is not a string, boolean or function")

    resolved.pop("projectRoot", None)
    merged: StrDict = {**resolved, **explicit_opts}
    if project_root:
        merged["projectRoot"] = project_root

    return Ok(merged)


def parse_config(
    explicit: Mapping[str, object],
    *,
    console: ConsoleProtocol | None = None,
    provider: ConfigProvider | None = None,
) -> Result[ResolvedOptions, ConfigParseFailed]:
    """Resolve the options for one invocation.

    Args:
        explicit: Options given by the caller (CLI flags), camelCase or
            snake_case names.
        console: Receives dim notes about skipped config sources and values.
        provider: Overrides the file-based config source.

    Returns:
        Ok(ResolvedOptions), or Err(ConfigParseFailed) when a present config
        source raised while its values were resolved.
    """
    explicit_opts = normalize_options(explicit)
    root = explicit_opts.get("projectRoot")
    project_root = Path(str(root)).expanduser().resolve() if root else Path.cwd()
    config_file = explicit_opts.get("configFile") or DEFAULT_CONFIG_FILE
    config_path = project_root / str(config_file)

    if provider is None:
        provider = provider_for(config_path, console)

    loaded = provider.load()
    if loaded is None:
        _note(console, f"No config file found at {provider.path}")
        return Ok(ResolvedOptions.from_mapping(explicit_opts))

    merged = merge_config(explicit_opts, loaded, config_path=provider.path, console=console)
    if isinstance(merged, Err):
        return merged

    return Ok(ResolvedOptions.from_mapping(merged.value))
