"""Docker / docker-compose operations.

- docker_running: `docker info` reachability check.
- compose_up: start the container group, classifying port conflicts.
- poll_db: bounded readiness poll; wait_for_db runs it against the db service.
"""

from __future__ import annotations

import enum
import logging
import shlex
from typing import Callable

from config import (
    COMPOSE_CMD,
    DB_MAX_ATTEMPTS,
    DB_SERVICE,
    DOCKER_CMD,
    PORT_CONFLICT_MARKERS,
)
from .errors import CommandError, DbTimeoutError, PortConflictError, ProvisionError
from .steps import Context
from .utils import CommandResult, log, status_wait


class DbState(enum.Enum):
    POLLING = "polling"
    CONNECTED = "connected"
    TIMED_OUT = "timed_out"


def compose_argv(*args: str) -> list[str]:
    return shlex.split(COMPOSE_CMD) + list(args)


def docker_running(ctx: Context) -> bool:
    return ctx.run([DOCKER_CMD, "info"], ctx.root).ok


def require_docker(ctx: Context) -> None:
    if not docker_running(ctx):
        raise ProvisionError("docker is not running; start Docker and re-run")


def is_port_conflict(result: CommandResult) -> bool:
    text = f"{result.stderr}\n{result.stdout}".lower()
    return any(marker in text for marker in PORT_CONFLICT_MARKERS)


def compose_up(ctx: Context) -> None:
    argv = compose_argv("up", "-d")
    result = ctx.run(argv, ctx.root)
    if result.ok:
        return
    if is_port_conflict(result):
        raise PortConflictError(argv, result)
    raise CommandError("container start", argv, result)


def db_ping_argv(user: str, password: str) -> list[str]:
    # -T: no tty, output is captured
    return compose_argv(
        "exec", "-T", DB_SERVICE, "mysql", f"-u{user}", f"-p{password}", "-e", "SELECT 1"
    )


def poll_db(attempt: Callable[[], bool], max_attempts: int = DB_MAX_ATTEMPTS) -> tuple[DbState, int]:
    """Try until success or max_attempts; returns final state and attempts used.

    No delay between attempts; each attempt's own latency paces the loop.
    """
    state = DbState.POLLING
    attempts = 0
    while state is DbState.POLLING:
        if attempts >= max_attempts:
            state = DbState.TIMED_OUT
            break
        attempts += 1
        if attempt():
            state = DbState.CONNECTED
            break
        if attempts == 1:
            status_wait("waiting for the database to accept connections")
    logging.debug("DB poll finished: state=%s attempts=%d", state.value, attempts)
    return state, attempts


def wait_for_db(ctx: Context, max_attempts: int | None = None) -> int:
    if max_attempts is None:
        max_attempts = DB_MAX_ATTEMPTS
    argv = db_ping_argv(ctx.env["MYSQL_USER"], ctx.env["MYSQL_PASSWORD"])
    state, attempts = poll_db(lambda: ctx.run(argv, ctx.root).ok, max_attempts)
    if state is DbState.TIMED_OUT:
        raise DbTimeoutError(attempts)
    log(f"PASS: database reachable after {attempts} attempt(s)")
    return attempts
