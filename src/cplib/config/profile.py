# Copyright 2026 cplib Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reader options and validator profiles loaded from YAML."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############

PROFILE_NAME = ".cplib.yaml"


class ConfigError(Exception):
    """Raised when a profile cannot be read, written, or is invalid."""


class ReaderOptions(BaseModel):
    """Lexical policy applied by a :class:`~cplib.io.reader.Reader`."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    strict: bool = False
    leading_zeros: bool = Field(alias="leading-zeros", default=False)
    decimal_separator: Literal[".", ","] = Field(alias="decimal-separator", default=".")


class ValidatorProfile(BaseModel):
    """Settings used by ``cplib validate`` when running a validator over input files."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    reader: ReaderOptions = Field(default_factory=ReaderOptions)
    require_eof: bool = Field(alias="require-eof", default=True)


def load_profile(path: Path) -> ValidatorProfile:
    """Load and validate a validator profile.

    An empty file yields the default profile.

    Args:
        path: Path to the YAML profile.

    Returns:
        A validated ValidatorProfile instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Profile not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read profile '{path}': {exc}") from exc

    return parse_profile(raw, source_label=str(path))


def parse_profile(text: str, source_label: str = "<string>") -> ValidatorProfile:
    """Parse profile YAML text.

    Raises:
        ConfigError: If the YAML is invalid or does not match the schema.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: profile must be a YAML mapping")

    try:
        return ValidatorProfile.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid profile '{source_label}': {exc}") from exc


def save_profile(profile: ValidatorProfile, path: Path) -> None:
    """Write *profile* to *path* using the hyphenated YAML keys.

    Raises:
        ConfigError: If the file cannot be written.
    """
    data = profile.model_dump(by_alias=True)
    try:
        path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=True), encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot write profile '{path}': {exc}") from exc
