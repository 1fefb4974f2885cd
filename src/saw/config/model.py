# topmark:header:start
#
#   project      : Saw
#   file         : model.py
#   file_relpath : src/saw/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Saw configuration model: immutable `Config` and its `MutableConfig` builder.

Configuration is layered, lowest to highest precedence:

1. Built-in defaults (`saw.config.io.load_defaults_dict`)
2. ``pyproject.toml`` (``[tool.saw]``) in the current directory
3. ``saw.toml`` in the current directory
4. Files passed with ``--config``, in the order given
5. CLI options (`MutableConfig.apply_cli_args`)

Each layer is parsed into a `MutableConfig` whose unset values are ``None``;
`MutableConfig.merge_with` keeps the later value when it is set. The merged
draft is validated and turned into an immutable `Config` by
`MutableConfig.freeze`.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from saw.config.io import (
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from saw.config.keys import ArgKey, Toml
from saw.config.logging import get_logger
from saw.constants import (
    DEFAULT_ENCODING,
    DEFAULT_ENCODING_ERRORS,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
    SAW_TOML_NAME,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from saw.config.io import TomlTable
    from saw.config.logging import SawLogger

logger: SawLogger = get_logger(__name__)

ENCODING_ERROR_POLICIES: Final[frozenset[str]] = frozenset(
    {"strict", "replace", "ignore", "surrogateescape", "backslashreplace"}
)

CLI_OVERRIDE_STR: Final[str] = "<CLI overrides>"


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for Saw.

    Attributes:
        encoding (str): Text encoding used to decode the input.
        encoding_errors (str): Codec error policy used while decoding.
        input_file (Path | None): File to read instead of standard input.
        config_files (tuple[Path | str, ...]): Config sources that were merged,
            in merge order.
    """

    encoding: str = DEFAULT_ENCODING
    encoding_errors: str = DEFAULT_ENCODING_ERRORS
    input_file: Path | None = None
    config_files: tuple[Path | str, ...] = ()


@dataclass
class MutableConfig:
    """Mutable configuration draft used while merging layers.

    Unset values are ``None`` so that a layer only overrides what it defines.
    """

    encoding: str | None = None
    encoding_errors: str | None = None
    input_file: Path | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Validate this draft and freeze it into an immutable `Config`.

        Raises:
            ValueError: If the encoding is unknown or the error policy is not
                supported.
        """
        encoding: str = self.encoding or DEFAULT_ENCODING
        errors: str = self.encoding_errors or DEFAULT_ENCODING_ERRORS

        try:
            codecs.lookup(encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown input encoding: {encoding!r}") from exc

        if errors not in ENCODING_ERROR_POLICIES:
            allowed: str = ", ".join(sorted(ENCODING_ERROR_POLICIES))
            raise ValueError(
                f"Unsupported encoding error policy: {errors!r} (expected one of: {allowed})"
            )

        return Config(
            encoding=encoding,
            encoding_errors=errors,
            input_file=self.input_file,
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft populated with the built-in defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> MutableConfig:
        """Build a draft from a parsed Saw TOML table.

        Unknown sections and keys are ignored with a warning.

        Args:
            data (TomlTable): The Saw table (``saw.toml`` root or ``[tool.saw]``).

        Returns:
            MutableConfig: The parsed draft; missing keys stay unset.
        """
        for key in data:
            if key != Toml.SECTION_INPUT:
                logger.warning("Ignoring unknown config section: [%s]", key)

        input_tbl: TomlTable = get_table_value(data, Toml.SECTION_INPUT)
        for key in input_tbl:
            if key not in (Toml.KEY_ENCODING, Toml.KEY_ENCODING_ERRORS):
                logger.warning("Ignoring unknown key in [%s]: %s", Toml.SECTION_INPUT, key)

        return cls(
            encoding=get_string_value_or_none(input_tbl, Toml.KEY_ENCODING),
            encoding_errors=get_string_value_or_none(input_tbl, Toml.KEY_ENCODING_ERRORS),
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        For ``pyproject.toml`` only the ``[tool.saw]`` table is used.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The parsed draft, or ``None`` when a
                ``pyproject.toml`` has no ``[tool.saw]`` table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)

        toml_data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_TOML_NAME:
            tool_section: TomlTable = get_table_value(
                get_table_value(toml_data, "tool"), PYPROJECT_TOOL_SECTION
            )
            if not tool_section:
                logger.debug("No [tool.%s] section in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            toml_data = tool_section

        draft: MutableConfig = cls.from_toml_dict(toml_data)
        draft.config_files = [path]
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return the config files present in ``start``.

        When both exist, ``pyproject.toml`` comes first so that ``saw.toml``
        wins the later merge.
        """
        found: list[Path] = []
        for name in (PYPROJECT_TOML_NAME, SAW_TOML_NAME):
            candidate: Path = start / name
            if candidate.is_file():
                found.append(candidate)
        logger.debug("Discovered config files in %s: %s", start, found)
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
        anchor: Path | None = None,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft.

        Args:
            extra_config_files (Iterable[Path] | None): Files merged after
                discovery, in the given order.
            no_config (bool): If True, skip discovery in ``anchor``.
            anchor (Path | None): Directory to discover config files in;
                defaults to the current working directory.

        Returns:
            MutableConfig: The merged draft, ready for CLI overrides and `freeze`.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(anchor or Path.cwd()):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where the set values of ``other`` win.

        Args:
            other (MutableConfig): The higher-precedence layer.

        Returns:
            MutableConfig: The merged draft.
        """
        return MutableConfig(
            encoding=other.encoding if other.encoding is not None else self.encoding,
            encoding_errors=(
                other.encoding_errors
                if other.encoding_errors is not None
                else self.encoding_errors
            ),
            input_file=other.input_file if other.input_file is not None else self.input_file,
            config_files=[*self.config_files, *other.config_files],
        )

    def apply_cli_args(self, args: Mapping[str, Any]) -> MutableConfig:
        """Apply overrides from a parsed arguments mapping (CLI or API).

        Keys are listed in `saw.config.keys.ArgKey`; ``None`` values leave the
        draft untouched. Config discovery flags are handled by `load_merged`.

        Args:
            args (Mapping[str, Any]): The arguments mapping.

        Returns:
            MutableConfig: This draft, updated in place.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)
        self.config_files.append(CLI_OVERRIDE_STR)

        if args.get(ArgKey.ENCODING) is not None:
            self.encoding = args[ArgKey.ENCODING]
        if args.get(ArgKey.ENCODING_ERRORS) is not None:
            self.encoding_errors = args[ArgKey.ENCODING_ERRORS]
        if args.get(ArgKey.INPUT_FILE) is not None:
            self.input_file = Path(args[ArgKey.INPUT_FILE])

        return self
