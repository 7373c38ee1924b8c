"""Process environment set up for programs run inside the terminal."""

from __future__ import annotations

import logging
import os
from typing import Iterable, MutableMapping, Optional

log = logging.getLogger(__name__)


def apply_env_vars(
    env_vars: Iterable[str], environ: Optional[MutableMapping[str, str]] = None
) -> None:
    """Set each ``NAME=value`` entry; entries not of exactly that shape are ignored."""
    target = os.environ if environ is None else environ
    for entry in env_vars:
        parts = entry.split("=")
        if len(parts) == 2:
            name, value = parts
            target[name] = value


def setup_environment(
    env_vars: Iterable[str] = (),
    terminfo_available: bool = False,
    environ: Optional[MutableMapping[str, str]] = None,
) -> str:
    """Set TERM, COLORTERM and locale variables, then the configured ones.

    Returns the terminfo name chosen for TERM.
    """
    target = os.environ if environ is None else environ
    terminfo = "rio" if terminfo_available else "xterm-256color"
    log.info("[setup_environment_variables] terminfo: %s", terminfo)

    target["TERM"] = terminfo
    target["COLORTERM"] = "truecolor"
    target.pop("DESKTOP_STARTUP_ID", None)
    target["LC_CTYPE"] = "UTF-8"

    apply_env_vars(env_vars, target)
    return terminfo