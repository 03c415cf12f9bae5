"""Load the project's .env into a read-only mapping."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

from dotenv import dotenv_values

from .errors import MissingConfigError


def load_env(path: Path, environ: Mapping[str, str] | None = None) -> Mapping[str, str]:
    """Read key=value pairs from path; process variables win over file values.

    A missing file is not an error here: dependent steps report the keys
    they need.
    """
    values: dict[str, str] = {}
    if path.is_file():
        for key, value in dotenv_values(path).items():
            if value is None:
                continue
            values[key] = value
        logging.debug("Loaded %d keys from %s", len(values), path)
    else:
        logging.warning("No env file at %s; using process environment only", path)
    source = os.environ if environ is None else environ
    for key in list(values):
        if key in source:
            values[key] = source[key]
    for key, value in source.items():
        values.setdefault(key, value)
    return MappingProxyType(values)


def missing_keys(env: Mapping[str, str], keys: Iterable[str]) -> list[str]:
    return [k for k in keys if not (env.get(k) or "").strip()]


def require_keys(env: Mapping[str, str], keys: Iterable[str], source: str = ".env") -> None:
    missing = missing_keys(env, keys)
    if missing:
        raise MissingConfigError(missing, source)
