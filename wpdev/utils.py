"""Utility helpers shared by the provisioning steps.

- init_logging: configure console + file logging with run-id.
- status_pass/status_fail/status_skip/status_wait: concise console status lines.
- run_cmd: thin wrapper over subprocess.run returning a CommandResult.
- log: debug-level logger for normal status lines (file-oriented).
- normalize_parts: parse a command into argv parts.
- drop_noise_lines: scrub ANSI codes and PHP noise from tool output.
"""

from __future__ import annotations

import logging
import os
import re
import shlex
import subprocess
import time
import uuid
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import NamedTuple, Sequence

from config import LOG_DIR


_RUN_ID = ""


class CommandResult(NamedTuple):
    code: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.code == 0

    def diagnostic(self) -> str:
        """Best human-readable failure text: stderr, else stdout."""
        text = "\n".join(drop_noise_lines(self.stderr))
        if not text:
            text = "\n".join(drop_noise_lines(self.stdout))
        return text


def _gen_run_id() -> str:
    return uuid.uuid4().hex[:8]


def init_logging(run_id: str | None = None, log_dir: Path | None = None) -> str:
    """Initialize logging with console + rotating file handlers.

    - Console: minimal, intended for terse status only.
    - File: DEBUG+, rich format, written to <log_dir>/wpdev-<rid>.log
    Returns the run-id used.
    """
    global _RUN_ID
    if _RUN_ID:
        return _RUN_ID

    rid = run_id or os.environ.get("WPDEV_RID") or _gen_run_id()
    _RUN_ID = rid

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    base = log_dir or (Path.cwd() / LOG_DIR)
    try:
        base.mkdir(parents=True, exist_ok=True)
        logfile = str(base / f"wpdev-{rid}.log")
    except OSError:
        logfile = os.path.abspath(f"wpdev-{rid}.log")

    # Quiet any pre-existing console handlers
    for h in list(root.handlers):
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler):
            h.setLevel(logging.CRITICAL)

    has_file = any(
        isinstance(h, RotatingFileHandler)
        and getattr(h, "baseFilename", "").endswith(os.path.basename(logfile))
        for h in root.handlers
    )
    if not has_file:
        fh = RotatingFileHandler(logfile, maxBytes=5 * 1024 * 1024, backupCount=3)
        fh.setLevel(logging.DEBUG)
        ffmt = logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
        fh.setFormatter(ffmt)
        root.addHandler(fh)

    # Add a super-quiet console handler if none exist
    has_console = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in root.handlers
    )
    if not has_console:
        ch = logging.StreamHandler()
        ch.setLevel(logging.CRITICAL)
        ch.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        root.addHandler(ch)

    logging.debug("Logging initialized. run_id=%s file=%s", rid, logfile)
    os.environ["WPDEV_RID"] = rid
    return rid


def _rid() -> str:
    return _RUN_ID or os.environ.get("WPDEV_RID", "--------")


def status_pass(msg: str) -> None:
    print(f"PASS: {msg} [{_rid()}]")


def status_fail(msg: str) -> None:
    print(f"FAIL: {msg} [{_rid()}]", flush=True)


def status_skip(msg: str) -> None:
    print(f"SKIP: {msg} [{_rid()}]")


def status_wait(msg: str) -> None:
    print(f"WAIT: {msg} [{_rid()}]", flush=True)


def log(msg: str) -> None:
    # File-oriented normal progress; stays out of console noise.
    logging.debug(msg)


def _fmt_cmd_for_log(args: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in args)


def run_cmd(args: Sequence[str], cwd: Path | None = None) -> CommandResult:
    """Run a command to completion with output captured.

    A missing executable is reported as exit code 127, like a shell would.
    """
    t0 = time.monotonic()
    try:
        proc = subprocess.run(
            list(args),
            cwd=str(cwd) if cwd else None,
            text=True,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError as err:
        logging.error("%s: %s", _fmt_cmd_for_log(args), err)
        return CommandResult(127, "", str(err))

    dt = time.monotonic() - t0
    result = CommandResult(proc.returncode, proc.stdout or "", proc.stderr or "")
    if result.ok:
        log(f"PASS: {_fmt_cmd_for_log(args)} ({dt:.1f}s)")
    else:
        logging.error(
            "%s exit=%s\nSTDERR: %s",
            _fmt_cmd_for_log(args),
            result.code,
            result.diagnostic().strip(),
        )
    return result


def normalize_parts(command: str | Sequence[str]) -> list[str]:
    """Normalize command into argv parts.
    Accepts str (parsed with shlex) or sequence of strings.
    Raises ValueError for empty or unparsable commands.
    """
    if isinstance(command, str):
        text = command.strip()
        if not text:
            raise ValueError("empty command")
        return shlex.split(text)
    parts = [str(p) for p in command]
    if not parts:
        raise ValueError("empty argv list")
    return parts


ANSI_RE = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
NOISE_PREFIXES = (
    "PHP Warning:", "PHP Notice:", "PHP Deprecated:",
    "Warning:", "Notice:", "Deprecated:",
)
NOISE_PATTERNS = (
    re.compile(r"^#\d+:"),               # stack frames
    re.compile(r"^'trace'\s*=>"),        # array trace header
)


def drop_noise_lines(text: str) -> list[str]:
    lines = [ANSI_RE.sub("", ln).strip() for ln in (text or "").splitlines()]
    out: list[str] = []
    for ln in lines:
        if not ln:
            continue
        if any(ln.startswith(p) for p in NOISE_PREFIXES):
            continue
        if any(p.search(ln) for p in NOISE_PATTERNS):
            continue
        out.append(ln)
    return out
