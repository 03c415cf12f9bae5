#!/usr/bin/env python3
"""CLI to provision a local WordPress + Vite theme development environment.

Inputs: project root and .env (database, site, admin and theme settings).
Side effects: writes package.json, docker-compose.yml and theme files, starts
containers, installs WordPress and scaffolds a theme via wp-cli. Every step
skips work that is already done, so re-running is safe.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from config import LOG_DIR
from wpdev.provisioner import make_context, preflight, provision
from wpdev.theme_command import run_theme_command
from wpdev.utils import init_logging, status_fail, status_pass

# ─── CONFIG ──────────────────────────────────────────────────────────────
CMD_SETUP = "setup"
CMD_PREFLIGHT = "preflight"
CMD_THEME = "theme"


# ─── CLI ──────────────────────────────────────────────────────────────
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="provision",
        description="Provision a local WordPress environment with a Vite-built theme.",
    )
    parser.add_argument("--root", type=Path, default=Path.cwd(), help="project root (default: cwd)")
    parser.add_argument("--env-file", type=Path, default=None, help="env file (default: ROOT/.env)")
    parser.add_argument("--rid", default=None, help="run-id used in logs and status lines")
    parser.add_argument(
        "command",
        nargs="?",
        default=CMD_SETUP,
        choices=[CMD_SETUP, CMD_PREFLIGHT, CMD_THEME],
    )
    parser.add_argument("args", nargs=argparse.REMAINDER, help="npm arguments for 'theme'")
    return parser


def main(argv: list[str] | None = None) -> int:
    opts = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    ctx = make_context(opts.root, opts.env_file)
    init_logging(opts.rid, ctx.root / LOG_DIR)

    if opts.command == CMD_THEME:
        return run_theme_command(ctx, opts.args)
    if opts.args:
        status_fail(f"unexpected arguments: {' '.join(opts.args)}")
        return 1
    if opts.command == CMD_PREFLIGHT:
        return 0 if preflight(ctx) else 1
    if not provision(ctx):
        return 1
    status_pass(f"environment ready in {ctx.root}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
