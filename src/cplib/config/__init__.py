# Copyright 2026 cplib Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reader options and validator profiles."""

from cplib.config.profile import (
    PROFILE_NAME,
    ConfigError,
    ReaderOptions,
    ValidatorProfile,
    load_profile,
    parse_profile,
    save_profile,
)

__all__ = [
    "ConfigError",
    "PROFILE_NAME",
    "ReaderOptions",
    "ValidatorProfile",
    "load_profile",
    "parse_profile",
    "save_profile",
]
