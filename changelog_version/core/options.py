"""Typed option set shared by every stamper.

Options arrive as loose mappings (CLI flags, config modules, TOML tables)
using either the camelCase names of the JavaScript changelog tooling or
their snake_case spelling. ``ResolvedOptions.from_mapping`` is the single
place where those mappings become a typed, read-only value.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .structured import StrDict

__all__ = [
    "DEFAULT_CHANGELOG_FILE",
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_DATE_FORMAT",
    "DEFAULT_NEW_UNRELEASED_TEXT",
    "DEFAULT_PACKAGE_FILE",
    "DEFAULT_UNRELEASED_TAG",
    "DEFAULT_UNRELEASED_TAG_FORMAT",
    "OPTION_NAMES",
    "AfterReleaseHook",
    "BeforeReleaseHook",
    "ReleaseInfo",
    "ResolvedOptions",
    "canonical_name",
    "normalize_options",
]

DEFAULT_CONFIG_FILE = ".changelog.py"
DEFAULT_CHANGELOG_FILE = "CHANGELOG.md"
DEFAULT_PACKAGE_FILE = "package.json"
DEFAULT_UNRELEASED_TAG = "[UNRELEASED]"
DEFAULT_UNRELEASED_TAG_FORMAT = "{version} - {date}"
DEFAULT_DATE_FORMAT = "default"
DEFAULT_NEW_UNRELEASED_TEXT = "# [UNRELEASED]\n\n"

# camelCase option name -> ResolvedOptions field
OPTION_NAMES: dict[str, str] = {
    "projectRoot": "project_root",
    "configFile": "config_file",
    "changelogFile": "changelog_file",
    "packageFile": "package_file",
    "unreleasedTag": "unreleased_tag",
    "unreleasedTagFormat": "unreleased_tag_format",
    "dateFormat": "date_format",
    "newUnreleasedText": "new_unreleased_text",
    "requireUnreleasedEntry": "require_unreleased_entry",
    "requireUnreleasedEntryFailMsg": "require_unreleased_entry_fail_msg",
    "onBeforeRelease": "on_before_release",
    "onAfterRelease": "on_after_release",
}

_ALIASES: dict[str, str] = {
    "tagFormat": "unreleasedTagFormat",
    "tag_format": "unreleasedTagFormat",
}

_BY_FIELD: dict[str, str] = {snake: camel for camel, snake in OPTION_NAMES.items()}


@dataclass(frozen=True, slots=True)
class ReleaseInfo:
    """What a release stamped into the changelog."""

    version: str
    date: str
    release_stamp: str


type BeforeReleaseHook = Callable[[], object | Awaitable[object]]
type AfterReleaseHook = Callable[[ReleaseInfo], object | Awaitable[object]]


def _noop(*_args: object) -> None:
    return None


def canonical_name(name: str) -> str | None:
    """Return the camelCase option name for ``name``, or None if unknown."""
    if name in OPTION_NAMES:
        return name
    if name in _ALIASES:
        return _ALIASES[name]
    return _BY_FIELD.get(name)


def normalize_options(options: Mapping[str, object]) -> StrDict:
    """Rekey a mapping by canonical option name.

    Unknown names and None values are dropped. When an option is given under
    both a canonical name and an alias, the canonical spelling wins.
    """
    out: StrDict = {}
    for name, value in options.items():
        canonical = canonical_name(name)
        if canonical is None or value is None:
            continue
        if canonical in out and name not in OPTION_NAMES:
            continue
        out[canonical] = value
    return out


def _text(options: Mapping[str, object], name: str, default: str) -> str:
    value = options.get(name)
    if isinstance(value, str) and value:
        return value
    return default


@dataclass(frozen=True, slots=True)
class ResolvedOptions:
    """Concrete options for a single prepare / release / verify invocation."""

    project_root: Path = field(default_factory=Path.cwd)
    config_file: str = DEFAULT_CONFIG_FILE
    changelog_file: str = DEFAULT_CHANGELOG_FILE
    package_file: str = DEFAULT_PACKAGE_FILE
    unreleased_tag: str = DEFAULT_UNRELEASED_TAG
    unreleased_tag_format: str = DEFAULT_UNRELEASED_TAG_FORMAT
    date_format: str = DEFAULT_DATE_FORMAT
    new_unreleased_text: str = DEFAULT_NEW_UNRELEASED_TEXT
    require_unreleased_entry: bool = False
    require_unreleased_entry_fail_msg: str | None = None
    on_before_release: BeforeReleaseHook = _noop
    on_after_release: AfterReleaseHook = _noop

    @property
    def changelog_path(self) -> Path:
        return self.project_root / self.changelog_file

    @property
    def package_path(self) -> Path:
        return self.project_root / self.package_file

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> ResolvedOptions:
        """Build options from a mapping keyed by camelCase or snake_case names.

        Empty strings fall back to defaults, the same as an unset option.
        """
        options = normalize_options(data)

        root = options.get("projectRoot")
        project_root = Path(str(root)).expanduser().resolve() if root else Path.cwd()

        fail_msg = options.get("requireUnreleasedEntryFailMsg")
        before = options.get("onBeforeRelease")
        after = options.get("onAfterRelease")

        return cls(
            project_root=project_root,
            config_file=_text(options, "configFile", DEFAULT_CONFIG_FILE),
            changelog_file=_text(options, "changelogFile", DEFAULT_CHANGELOG_FILE),
            package_file=_text(options, "packageFile", DEFAULT_PACKAGE_FILE),
            unreleased_tag=_text(options, "unreleasedTag", DEFAULT_UNRELEASED_TAG),
            unreleased_tag_format=_text(
                options, "unreleasedTagFormat", DEFAULT_UNRELEASED_TAG_FORMAT
            ),
            date_format=_text(options, "dateFormat", DEFAULT_DATE_FORMAT),
            new_unreleased_text=_text(
                options, "newUnreleasedText", DEFAULT_NEW_UNRELEASED_TEXT
            ),
            require_unreleased_entry=bool(options.get("requireUnreleasedEntry")),
            require_unreleased_entry_fail_msg=fail_msg
            if isinstance(fail_msg, str) and fail_msg
            else None,
            on_before_release=before if callable(before) else _noop,
            on_after_release=after if callable(after) else _noop,
        )
