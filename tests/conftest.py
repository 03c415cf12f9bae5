"""pytest configuration and shared fixtures.

FakeRunner stands in for npm, docker and wp-cli: it records every argv and
reproduces the filesystem side effects the real tools have.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from config import REQUIRED_KEYS
from wpdev.provisioner import make_context
from wpdev.steps import Context
from wpdev.utils import CommandResult

OK = CommandResult(0, "", "")

ENV_VALUES = {
    "MYSQL_DATABASE": "wordpress",
    "MYSQL_USER": "wp",
    "MYSQL_PASSWORD": "secret",
    "MYSQL_ROOT_PASSWORD": "rootsecret",
    "WP_SITE_TITLE": "Local Site",
    "WP_ADMIN_USER": "admin",
    "WP_ADMIN_PASSWORD": "password",
    "WP_THEME_DIR_NAME": "mytheme",
    "WP_THEME_AUTHOR": "Jane Doe",
}

SCAFFOLD_FUNCTIONS_PHP = """<?php
/**
 * mytheme functions and definitions
 */

function mytheme_setup() {
\tadd_theme_support( 'title-tag' );
}
add_action( 'after_setup_theme', 'mytheme_setup' );

/**
 * Enqueue scripts and styles.
 */
function mytheme_scripts() {
\twp_enqueue_style( 'mytheme-style', get_stylesheet_uri(), array(), _S_VERSION );
\twp_enqueue_script( 'mytheme-navigation', get_template_directory_uri() . '/js/navigation.js', array(), _S_VERSION, true );
}
add_action( 'wp_enqueue_scripts', 'mytheme_scripts' );

/**
 * Custom template tags for this theme.
 */
require get_template_directory() . '/inc/template-tags.php';
"""


class FakeRunner:
    def __init__(self, root: Path):
        self.root = root
        self.calls: list[list[str]] = []
        self.db_failures = 0
        self.installed = False
        self.docker_up = True
        # substring of the joined argv -> forced result
        self.forced: dict[str, CommandResult] = {}

    def commands(self, needle: str) -> list[str]:
        return [c for c in (" ".join(a) for a in self.calls) if needle in c]

    def __call__(self, argv, cwd=None) -> CommandResult:
        argv = list(argv)
        self.calls.append(argv)
        joined = " ".join(argv)
        cwd = Path(cwd) if cwd else self.root
        for needle, result in self.forced.items():
            if needle in joined:
                return result
        if argv[:3] == ["npm", "init", "-y"]:
            manifest = {"name": cwd.name, "version": "1.0.0", "scripts": {"test": "exit 1"}}
            (cwd / "package.json").write_text(json.dumps(manifest, indent=2))
            return OK
        if argv[:2] == ["npm", "install"]:
            for pkg in argv[2:]:
                (cwd / "node_modules" / pkg).mkdir(parents=True, exist_ok=True)
            return OK
        if argv == ["docker", "info"]:
            return OK if self.docker_up else CommandResult(1, "", "Cannot connect to the Docker daemon")
        if "mysql" in argv:
            if self.db_failures > 0:
                self.db_failures -= 1
                return CommandResult(1, "", "ERROR 2002 (HY000): Can't connect")
            return OK
        if "core is-installed" in joined:
            return OK if self.installed else CommandResult(1, "", "")
        if "core install" in joined:
            self.installed = True
            return CommandResult(0, "Success: WordPress installed successfully.", "")
        if "scaffold _s" in joined:
            name = argv[argv.index("_s") + 1]
            self._scaffold(self.root / "wp-content" / "themes" / name)
            return OK
        return OK

    def _scaffold(self, theme: Path) -> None:
        (theme / "sass").mkdir(parents=True, exist_ok=True)
        (theme / "js").mkdir(exist_ok=True)
        (theme / "style.css").write_text("/* Theme Name: mytheme */\n")
        (theme / "functions.php").write_text(SCAFFOLD_FUNCTIONS_PHP)
        (theme / "sass" / "style.scss").write_text("body { margin: 0; }\n")
        (theme / "js" / "navigation.js").write_text("// navigation\n")
        (theme / "package.json").write_text(
            json.dumps({"name": "mytheme", "scripts": {"watch": "node-sass sass/ -o ./"}})
        )


def write_env(root: Path, values: dict[str, str]) -> Path:
    path = root / ".env"
    path.write_text("".join(f"{k}={v}\n" for k, v in values.items()))
    return path


@pytest.fixture(autouse=True)
def clean_environ(monkeypatch):
    for key in REQUIRED_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def fake(tmp_path: Path) -> FakeRunner:
    return FakeRunner(tmp_path)


@pytest.fixture
def ctx(tmp_path: Path, fake: FakeRunner) -> Context:
    write_env(tmp_path, ENV_VALUES)
    return make_context(tmp_path, run=fake)


@pytest.fixture
def theme_ctx(tmp_path: Path, fake: FakeRunner) -> Context:
    """Context with config loaded and the theme already scaffolded."""
    context = make_context(tmp_path, run=fake, env=dict(ENV_VALUES))
    fake._scaffold(context.theme_dir)
    return context
