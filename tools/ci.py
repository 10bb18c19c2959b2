#!/usr/bin/env python3
# Copyright 2026 cplib Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, type check, tests, example validators, and build."""

import argparse
import subprocess
import sys
import time
from collections.abc import Callable
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

REPO_ROOT = Path(__file__).resolve().parent.parent


def main() -> int:
    """Run the selected CI steps and report results."""
    parser = argparse.ArgumentParser(description="Run the cplib CI steps locally.")
    parser.add_argument(
        "--skip",
        action="append",
        default=[],
        choices=sorted(_STEPS),
        help="Skip a step (may be repeated)",
    )
    args = parser.parse_args()

    results: list[tuple[str, bool, float]] = []
    for name, step in _STEPS.items():
        if name in args.skip:
            continue
        _print_header(name)
        start = time.monotonic()
        passed = step()
        results.append((name, passed, time.monotonic() - start))

    _print_header("Summary")
    for name, passed, elapsed in results:
        status = "PASS" if passed else "FAIL"
        color = chalk.green if passed else chalk.red
        print(color(f"  {status}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _run(*cmd: str) -> bool:
    return subprocess.run(cmd, cwd=REPO_ROOT).returncode == 0


def _check_examples() -> bool:
    """Run every example validator on its samples; ``*.bad.in`` samples must be rejected."""
    ok = True
    for validator in sorted(REPO_ROOT.glob("examples/*/validator.py")):
        for sample in sorted(validator.parent.glob("*.in")):
            expected = 1 if sample.name.endswith(".bad.in") else 0
            proc = subprocess.run(
                ["uv", "run", "python", str(validator), str(sample)],
                cwd=REPO_ROOT,
                capture_output=True,
                text=True,
            )
            label = sample.relative_to(REPO_ROOT)
            if proc.returncode == expected:
                print(chalk.green(f"  ok    {label}"))
            else:
                ok = False
                print(chalk.red(f"  FAIL  {label} (exit {proc.returncode}, expected {expected})"))
                print(proc.stderr, end="")
    return ok


def _print_header(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(title))
    print(sep)


_STEPS: dict[str, Callable[[], bool]] = {
    "format": lambda: _run("uv", "run", "ruff", "format", "--check", "src/", "tests/", "examples/"),
    "lint": lambda: _run("uv", "run", "ruff", "check", "src/", "tests/", "examples/"),
    "types": lambda: _run("uv", "run", "ty", "check", "src/"),
    "tests": lambda: _run("uv", "run", "pytest", "--cov=cplib", "--cov-report=term-missing"),
    "examples": _check_examples,
    "build": lambda: _run("uv", "build"),
}


if __name__ == "__main__":
    sys.exit(main())
