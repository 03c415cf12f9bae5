"""Forward npm subcommands into the theme directory.

Python counterpart of the generated theme_command.js: reads the same .env
and always invokes npm.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Sequence

from config import NPM_CMD
from .env import load_env, missing_keys
from .steps import Context
from .utils import status_fail, status_pass


def run_theme_command(ctx: Context, args: Sequence[str]) -> int:
    ctx.env = load_env(ctx.env_file)
    if missing_keys(ctx.env, ["WP_THEME_DIR_NAME"]):
        status_fail(f"WP_THEME_DIR_NAME is not defined in {ctx.env_file.name}")
        return 1
    if not args:
        status_fail("pass the npm command to run")
        return 1
    if not ctx.theme_dir.is_dir():
        status_fail(f"theme directory {ctx.theme_dir} does not exist; run setup first")
        return 1
    argv = [NPM_CMD, *args]
    logging.info("Running %s in %s", " ".join(argv), ctx.theme_dir)
    try:
        # output streams straight to the terminal
        proc = subprocess.run(argv, cwd=str(ctx.theme_dir))
    except FileNotFoundError as err:
        status_fail(f"{NPM_CMD}: {err}")
        return 1
    if proc.returncode != 0:
        status_fail(f"{' '.join(argv)} exit={proc.returncode}")
        return 1
    status_pass(" ".join(argv))
    return 0
