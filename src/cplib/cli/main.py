# Copyright 2026 cplib Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the cplib command-line interface."""

import argparse
import importlib
import importlib.util
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from yachalk import chalk

from cplib.config.profile import PROFILE_NAME, ConfigError, ValidatorProfile, load_profile, save_profile
from cplib.diagnostics import CplibError, FailedValidationError
from cplib.io.reader import Reader

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the cplib CLI."""
    parser = argparse.ArgumentParser(
        prog="cplib",
        description="cplib - input file validation for competitive programming",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print debug logging to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Create a default validator profile",
        description=f"Write a default {PROFILE_NAME} profile into a directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to create the profile in (default: current directory)",
    )

    # validate subcommand
    validate_parser = subparsers.add_parser(
        "validate",
        help="Run a validator over input files",
        description=(
            "Call a validator function with a configured Reader for every input file. "
            "The validator is given as 'module:function' or 'path/to/file.py:function'."
        ),
    )
    validate_parser.add_argument("target", help="Validator function, e.g. 'validators.bus:validate'")
    validate_parser.add_argument("inputs", nargs="+", help="Input files to validate")
    validate_parser.add_argument(
        "--config",
        default=None,
        help=f"Validator profile (default: {PROFILE_NAME} in the current directory, if present)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


class _TargetError(Exception):
    """Raised when the validator target cannot be resolved."""


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "validate":
        return _cmd_validate(args)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    profile_file = directory / PROFILE_NAME
    if profile_file.exists():
        print(f"Error: profile already exists at '{profile_file}'.", file=sys.stderr)
        return 1

    try:
        save_profile(ValidatorProfile(), profile_file)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Created validator profile at '{profile_file}'.")
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    """Handle the validate subcommand."""
    try:
        validator = _load_target(args.target)
    except _TargetError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.config is not None:
        profile_path: Path | None = Path(args.config)
    else:
        default_path = Path.cwd() / PROFILE_NAME
        profile_path = default_path if default_path.exists() else None

    profile = ValidatorProfile()
    if profile_path is not None:
        try:
            profile = load_profile(profile_path)
        except ConfigError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    print(f"Validating {len(args.inputs)} input file(s) with '{args.target}'...")
    failed = 0
    for input_file in args.inputs:
        report = _validate_file(validator, Path(input_file), profile)
        if report is None:
            print(chalk.green(f"  PASS  {input_file}"))
            continue
        failed += 1
        print(chalk.red(f"  FAIL  {input_file}"))
        if report:
            print(report, file=sys.stderr)

    if failed:
        print(chalk.red(f"{failed} of {len(args.inputs)} input file(s) rejected."))
        return 1

    print(chalk.green("All input files are valid."))
    return 0


def _validate_file(validator: Callable[[Reader], object], path: Path, profile: ValidatorProfile) -> str | None:
    """Run *validator* over *path*.

    Returns:
        None if the file is valid, otherwise the report to print (empty when
        the failure was already reported by ``assert_valid``).
    """
    try:
        with Reader(path, options=profile.reader) as reader:
            validator(reader)
            if profile.require_eof:
                reader.must_be_eof()
    except FailedValidationError as exc:
        return "" if exc.reported else exc.diagnostic.render()
    except CplibError as exc:
        return exc.diagnostic.render()
    return None


def _load_target(target: str) -> Callable[[Reader], object]:
    """Resolve ``module:function`` or ``file.py:function`` to a callable."""
    module_name, sep, attr = target.rpartition(":")
    if not sep or not module_name or not attr:
        raise _TargetError(f"invalid validator '{target}', expected 'module:function'.")

    if module_name.endswith(".py"):
        path = Path(module_name)
        spec = importlib.util.spec_from_file_location(path.stem, path)
        if spec is None or spec.loader is None or not path.exists():
            raise _TargetError(f"cannot load validator file '{module_name}'.")
        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            raise _TargetError(f"cannot load validator file '{module_name}': {exc}") from exc
    else:
        try:
            module = importlib.import_module(module_name)
        except Exception as exc:
            raise _TargetError(f"cannot import '{module_name}': {exc}") from exc

    func = getattr(module, attr, None)
    if not callable(func):
        raise _TargetError(f"'{module_name}' has no callable '{attr}'.")
    return func
