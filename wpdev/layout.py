"""Theme source layout for the Vite build.

    <theme>/sass  ->  <theme>/src/sass
                      <theme>/src/js/{main.js,import_sass.js}

The layout step re-derives what is missing on every run, so an interrupted
run (src/ created, sass/ not yet moved) completes on the next one.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from . import templates
from .errors import SkipStep
from .steps import Context, write_file
from .utils import log

LEGACY_JS = "js"
LEGACY_SASS = "sass"
SRC = "src"


def src_dir(ctx: Context) -> Path:
    return ctx.theme_dir / SRC


def layout_done(ctx: Context) -> bool:
    src = src_dir(ctx)
    if not (src / "js").is_dir():
        return False
    if (src / "sass").is_dir():
        return True
    # nothing left to move
    return not (ctx.theme_dir / LEGACY_SASS).exists()


def build_layout(ctx: Context) -> None:
    src = src_dir(ctx)
    src.mkdir(parents=True, exist_ok=True)
    legacy = ctx.theme_dir / LEGACY_SASS
    target = src / "sass"
    if legacy.is_dir() and not target.exists():
        # single rename: the move is either done or not
        os.replace(legacy, target)
        log(f"PASS: Moved {legacy} -> {target}")
    elif not target.exists():
        logging.warning("No %s to move into %s", legacy, src)
    (src / "js").mkdir(exist_ok=True)
    log(f"PASS: Source layout ready in {src}")


def write_entries(ctx: Context) -> None:
    js_dir = src_dir(ctx) / "js"
    if not js_dir.is_dir():
        raise SkipStep(f"{js_dir} does not exist")
    write_file(js_dir / "main.js", "")
    write_file(js_dir / "import_sass.js", templates.render(templates.IMPORT_SASS_JS))
