"""npm helpers: manifest init, script table rewrite, dependency install."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping, Sequence

from config import NPM_CMD, PACKAGE_JSON
from .errors import CommandError
from .steps import Context
from .utils import log


def read_manifest(project_dir: Path) -> dict:
    return json.loads((project_dir / PACKAGE_JSON).read_text(encoding="utf-8"))


def write_scripts(project_dir: Path, scripts: Mapping[str, str]) -> None:
    manifest = read_manifest(project_dir)
    manifest["scripts"] = dict(scripts)
    text = json.dumps(manifest, indent=2, ensure_ascii=False)
    (project_dir / PACKAGE_JSON).write_text(text, encoding="utf-8")
    log(f"PASS: Rewrote scripts in {project_dir / PACKAGE_JSON}")


def is_vite_manifest(project_dir: Path) -> bool:
    """True for a manifest this tool wrote or one the user has since edited.

    The _s scaffolder's manifest has neither a `vite` dev script nor a
    `vite` dependency.
    """
    path = project_dir / PACKAGE_JSON
    if not path.exists():
        return False
    try:
        manifest = read_manifest(project_dir)
    except ValueError:
        return False
    if not isinstance(manifest, dict):
        return False
    scripts = manifest.get("scripts") or {}
    if isinstance(scripts, dict) and scripts.get("dev") == "vite":
        return True
    for section in ("dependencies", "devDependencies"):
        deps = manifest.get(section) or {}
        if isinstance(deps, dict) and "vite" in deps:
            return True
    return False


def init_manifest(ctx: Context, project_dir: Path, scripts: Mapping[str, str]) -> None:
    argv = [NPM_CMD, "init", "-y"]
    result = ctx.run(argv, project_dir)
    if not result.ok:
        raise CommandError("npm init", argv, result)
    write_scripts(project_dir, scripts)


def missing_packages(project_dir: Path, packages: Sequence[str]) -> list[str]:
    modules = project_dir / "node_modules"
    return [p for p in packages if not (modules / p).exists()]


def install_packages(ctx: Context, project_dir: Path, packages: Sequence[str]) -> None:
    argv = [NPM_CMD, "install", *packages]
    result = ctx.run(argv, project_dir)
    if not result.ok:
        raise CommandError(f"npm install {' '.join(packages)}", argv, result)
