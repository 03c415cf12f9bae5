"""Theme management: directory, _s scaffold and functions.php enqueue patch."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from wpdev import templates
from wpdev.errors import PatchError, SkipStep
from wpdev.steps import Context
from wpdev.utils import log
from .cli import wp_check

FUNCTIONS_PHP = "functions.php"
SCAFFOLD_MARKER = "style.css"

# _s ships `function <prefix>_scripts() { ... } add_action(...);`
SCRIPTS_FN_RE = re.compile(r"function\s+\w+_scripts\s*\(\)\s*\{[\s\S]+?add_action\([\s\S]+?\);\n?")
PATCH_MARKERS = ("function enqueue_style_scripts()", "function add_module_attribute(")


def ensure_theme_dir(ctx: Context) -> None:
    ctx.theme_dir.mkdir(parents=True, exist_ok=True)
    log(f"PASS: Created theme directory {ctx.theme_dir}")


def is_scaffolded(ctx: Context) -> bool:
    return (ctx.theme_dir / SCAFFOLD_MARKER).exists()


def scaffold_theme(ctx: Context) -> None:
    name = ctx.theme_name
    wp_check(
        ctx,
        [
            "scaffold",
            "_s",
            name,
            f"--theme_name={name}",
            f"--author={ctx.env['WP_THEME_AUTHOR']}",
            "--sassify",
            "--force",
            "--activate",
        ],
        "theme scaffold",
    )


def is_patched(text: str) -> bool:
    return all(marker in text for marker in PATCH_MARKERS)


def patch_enqueue_block(text: str, path: Path) -> str:
    """Swap the scaffolded *_scripts() block for the Vite-aware one.

    Raises PatchError when no block matches.
    """
    block = templates.render(templates.ENQUEUE_PHP)
    updated, count = SCRIPTS_FN_RE.subn(lambda _m: block, text, count=1)
    if count == 0:
        raise PatchError(path, "no `function *_scripts()` block followed by add_action()")
    return updated


def _read_php(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as err:
        raise PatchError(path, f"not valid UTF-8 ({err.reason} at byte {err.start})") from err


def functions_patched(ctx: Context) -> bool:
    path = ctx.theme_dir / FUNCTIONS_PHP
    if not path.exists():
        return False
    return is_patched(_read_php(path))


def patch_functions_php(ctx: Context) -> None:
    path = ctx.theme_dir / FUNCTIONS_PHP
    if not path.exists():
        raise SkipStep(f"{path} does not exist")
    text = _read_php(path)
    path.write_text(patch_enqueue_block(text, path), encoding="utf-8")
    logging.info("Patched enqueue block in %s", path)
