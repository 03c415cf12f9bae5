"""Ordered provisioning pipeline for the local WordPress + Vite environment.

Each step owns one artifact and checks it before doing any work, so the
whole pipeline is safe to re-run after a failure or on a finished project.
"""

from __future__ import annotations

from pathlib import Path

from config import (
    COMPOSE_FILE,
    DB_KEYS,
    ENV_FILE,
    PACKAGE_JSON,
    REQUIRED_KEYS,
    ROOT_DEPENDENCIES,
    ROOT_SCRIPTS,
    SITE_KEYS,
    THEME_COMMAND_FILE,
    THEME_DEPENDENCIES,
    THEME_KEYS,
    THEME_SCRIPTS,
)
from . import compose, layout, npm, templates
from .env import load_env, missing_keys
from .steps import Context, Step, ensure_absent, ensure_present, run_steps, write_file
from .utils import log, status_fail, status_pass
from .wordpress import installer, themes

# Every theme step resolves paths from the theme directory name.
THEME_DIR_KEY = ("WP_THEME_DIR_NAME",)


def _load_config(ctx: Context) -> None:
    ctx.env = load_env(ctx.env_file)
    log(f"PASS: Loaded configuration from {ctx.env_file}")


def _template_step(name: str, path, template: str, requires: tuple[str, ...] = ()) -> Step:
    return ensure_present(
        name,
        path,
        lambda ctx: write_file(path(ctx), templates.render(template)),
        requires,
    )


def build_steps() -> list[Step]:
    return [
        ensure_present(
            "init package.json",
            lambda ctx: ctx.root / PACKAGE_JSON,
            lambda ctx: npm.init_manifest(ctx, ctx.root, ROOT_SCRIPTS),
        ),
        Step(
            "install " + " ".join(ROOT_DEPENDENCIES),
            lambda ctx: npm.install_packages(ctx, ctx.root, ROOT_DEPENDENCIES),
            lambda ctx: not npm.missing_packages(ctx.root, ROOT_DEPENDENCIES),
        ),
        Step("load .env", _load_config),
        _template_step(
            "write docker-compose.yml",
            lambda ctx: ctx.root / COMPOSE_FILE,
            templates.COMPOSE,
        ),
        Step("check docker", compose.require_docker),
        Step("start containers", compose.compose_up, requires=DB_KEYS),
        Step(
            "wait for database",
            compose.wait_for_db,
            requires=("MYSQL_USER", "MYSQL_PASSWORD"),
        ),
        Step(
            "install WordPress",
            installer.install_wordpress,
            installer.is_installed,
            requires=SITE_KEYS,
        ),
        ensure_present(
            "create theme directory",
            lambda ctx: ctx.theme_dir,
            themes.ensure_theme_dir,
            requires=THEME_KEYS,
        ),
        Step(
            "scaffold theme",
            themes.scaffold_theme,
            themes.is_scaffolded,
            requires=THEME_KEYS,
        ),
        ensure_absent(
            "remove scaffolded package.json",
            lambda ctx: ctx.theme_dir / PACKAGE_JSON,
            keep=lambda ctx: npm.is_vite_manifest(ctx.theme_dir),
            requires=THEME_DIR_KEY,
        ),
        Step(
            "init theme package.json",
            lambda ctx: npm.init_manifest(ctx, ctx.theme_dir, THEME_SCRIPTS),
            lambda ctx: npm.is_vite_manifest(ctx.theme_dir),
            requires=THEME_DIR_KEY,
        ),
        Step(
            "install " + " ".join(THEME_DEPENDENCIES),
            lambda ctx: npm.install_packages(ctx, ctx.theme_dir, THEME_DEPENDENCIES),
            lambda ctx: not npm.missing_packages(ctx.theme_dir, THEME_DEPENDENCIES),
            requires=THEME_DIR_KEY,
        ),
        ensure_absent(
            "remove legacy js directory",
            lambda ctx: ctx.theme_dir / layout.LEGACY_JS,
            requires=THEME_DIR_KEY,
        ),
        Step(
            "create src layout",
            layout.build_layout,
            layout.layout_done,
            requires=THEME_DIR_KEY,
        ),
        Step("write js entries", layout.write_entries, requires=THEME_DIR_KEY),
        _template_step(
            "write vite.config.mjs",
            lambda ctx: ctx.theme_dir / "vite.config.mjs",
            templates.VITE_CONFIG,
            THEME_DIR_KEY,
        ),
        _template_step(
            "write index.html",
            lambda ctx: ctx.theme_dir / "index.html",
            templates.INDEX_HTML,
            THEME_DIR_KEY,
        ),
        Step(
            "patch functions.php",
            themes.patch_functions_php,
            themes.functions_patched,
            requires=THEME_DIR_KEY,
        ),
        _template_step(
            "write " + THEME_COMMAND_FILE,
            lambda ctx: ctx.root / THEME_COMMAND_FILE,
            templates.THEME_COMMAND_JS,
        ),
    ]


def provision(ctx: Context) -> bool:
    ok = run_steps(build_steps(), ctx)
    if ok:
        log(f"PASS: Provisioning complete in {ctx.root}")
    return ok


def make_context(root: Path, env_file: Path | None = None, **kwargs) -> Context:
    root = root.resolve()
    return Context(root=root, env_file=env_file or root / ENV_FILE, **kwargs)


def preflight(ctx: Context) -> bool:
    """Report every missing prerequisite without changing anything."""
    ctx.env = load_env(ctx.env_file)
    ok = True
    missing = missing_keys(ctx.env, REQUIRED_KEYS)
    if missing:
        status_fail(f"missing required keys in {ctx.env_file.name}: {', '.join(missing)}")
        ok = False
    if not compose.docker_running(ctx):
        status_fail("docker is not running")
        ok = False
    if ok:
        status_pass("preflight")
    return ok
