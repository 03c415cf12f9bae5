# cli.py
# Invariants:
# - All WP-CLI access goes through these wrappers; callers never build the
#   docker-compose prefix.
# - Commands run in a throwaway wpcli container: `run --rm wpcli wp ...`.
# - Accept commands with or without a leading "wp"; duplicates are dropped.
# - Logs: one PASS/FAIL per call; console stays minimal; file logs keep details.

from __future__ import annotations

import os
from typing import Sequence

from config import WPCLI_SERVICE
from wpdev.compose import compose_argv
from wpdev.errors import CommandError
from wpdev.steps import Context
from wpdev.utils import CommandResult, normalize_parts


def _sanitize_parts(parts: list[str]) -> list[str]:
    # drop any leading 'wp' or explicit binary tokens
    while parts and (parts[0] == "wp" or os.path.basename(parts[0]) == "wp"):
        parts = parts[1:]
    return parts


def wp_argv(command: str | Sequence[str]) -> list[str]:
    parts = _sanitize_parts(normalize_parts(command))
    return compose_argv("run", "--rm", WPCLI_SERVICE, "wp", *parts)


def wp_run(ctx: Context, command: str | Sequence[str]) -> CommandResult:
    return ctx.run(wp_argv(command), ctx.root)


def wp_ok(ctx: Context, command: str | Sequence[str]) -> bool:
    return wp_run(ctx, command).ok


def wp_check(ctx: Context, command: str | Sequence[str], action: str) -> CommandResult:
    argv = wp_argv(command)
    result = ctx.run(argv, ctx.root)
    if not result.ok:
        raise CommandError(action, argv, result)
    return result
