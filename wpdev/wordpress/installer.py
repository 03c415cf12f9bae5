"""Install core WordPress through the wpcli container."""

from __future__ import annotations

from config import ADMIN_EMAIL, SITE_URL
from wpdev.steps import Context
from .cli import wp_check, wp_ok


def is_installed(ctx: Context) -> bool:
    return wp_ok(ctx, ["core", "is-installed"])


def install_wordpress(ctx: Context) -> None:
    env = ctx.env
    wp_check(
        ctx,
        [
            "core",
            "install",
            f"--url={SITE_URL}",
            f"--title={env['WP_SITE_TITLE']}",
            f"--admin_user={env['WP_ADMIN_USER']}",
            f"--admin_password={env['WP_ADMIN_PASSWORD']}",
            f"--admin_email={ADMIN_EMAIL}",
            "--skip-email",
        ],
        "WordPress install",
    )
