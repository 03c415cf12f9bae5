"""Idempotent step model and the ordered runner.

A step is satisfied when its artifact already holds; only unsatisfied steps
apply. The runner stops at the first failure and leaves earlier work in
place: re-running is what recovers.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Mapping, Sequence

from config import THEMES_DIR
from .env import require_keys
from .errors import ProvisionError, SkipStep
from .utils import CommandResult, log, run_cmd, status_fail, status_pass, status_skip


# run(argv, cwd) -> CommandResult
Runner = Callable[..., CommandResult]


@dataclass
class Context:
    root: Path
    env_file: Path
    env: Mapping[str, str] = field(default_factory=dict)
    run: Runner = run_cmd

    @property
    def theme_name(self) -> str:
        return (self.env.get("WP_THEME_DIR_NAME") or "").strip()

    @property
    def theme_dir(self) -> Path:
        return self.root / THEMES_DIR / self.theme_name


@dataclass
class Step:
    name: str
    apply: Callable[[Context], None]
    check: Callable[[Context], bool] | None = None
    requires: tuple[str, ...] = ()

    def is_satisfied(self, ctx: Context) -> bool:
        if self.check is None:
            return False
        return bool(self.check(ctx))


def ensure_present(
    name: str,
    path: Callable[[Context], Path],
    create: Callable[[Context], None],
    requires: tuple[str, ...] = (),
) -> Step:
    return Step(name, create, lambda ctx: path(ctx).exists(), requires)


def ensure_absent(
    name: str,
    path: Callable[[Context], Path],
    keep: Callable[[Context], bool] | None = None,
    requires: tuple[str, ...] = (),
) -> Step:
    """Remove path if present; keep(ctx) True marks a present path as wanted."""

    def _check(ctx: Context) -> bool:
        if not path(ctx).exists():
            return True
        return bool(keep and keep(ctx))

    def _remove(ctx: Context) -> None:
        target = path(ctx)
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        else:
            target.unlink()
        log(f"PASS: Removed {target}")

    return Step(name, _remove, _check, requires)


def write_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    log(f"PASS: Wrote {path}")


def run_steps(steps: Sequence[Step], ctx: Context) -> bool:
    for step in steps:
        try:
            require_keys(ctx.env, step.requires, ctx.env_file.name)
            if step.is_satisfied(ctx):
                log(f"SKIP: {step.name} already satisfied")
                status_skip(f"{step.name} (already done)")
                continue
            step.apply(ctx)
        except SkipStep as reason:
            logging.warning("%s skipped: %s", step.name, reason)
            status_skip(f"{step.name}: {reason}")
            continue
        except (ProvisionError, OSError) as err:
            logging.error("%s failed: %s", step.name, err)
            status_fail(f"{step.name}: {err}")
            return False
        status_pass(step.name)
    return True
