# Copyright 2026 cplib Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for cplib."""
