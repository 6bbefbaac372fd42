"""
command.py

Responsibility: Build the spec generator argv and hand it off.

There are two terminal actions and callers pick exactly one:
- `print_command`: write the shell-escaped command line and return 0
- `exec_command`: replace this process with the generator (never returns)
"""

from __future__ import annotations

import logging
import os
import shlex
import sys
from typing import NoReturn, Sequence, TextIO

from repo2spec.config import Config
from repo2spec.parameters import ParameterSet

logger = logging.getLogger(__name__)


class CommandError(RuntimeError):
    pass


def executable_type(current: str | None, types: Sequence[str]) -> str | None:
    """Return `<current>-bin` if such a template exists, else `current`."""
    if current is None:
        return None
    candidate = f"{current}-bin"
    return candidate if candidate in types else current


def build_command(
    params: ParameterSet,
    *,
    config: Config,
    types: Sequence[str] = (),
    executable: bool = False,
    extra: Sequence[str] = (),
) -> list[str]:
    if executable:
        params = params.with_value("type", executable_type(params.type, types))

    argv = list(config.generator)
    if params.tag is not None:
        argv.extend([config.tag_flag, params.tag])
    argv.extend(params.to_args())
    argv.extend(extra)
    return argv


def print_command(argv: Sequence[str], stream: TextIO | None = None) -> int:
    stream = stream or sys.stdout
    stream.write(shlex.join(argv) + "\n")
    stream.flush()
    return 0


def exec_command(argv: Sequence[str]) -> NoReturn:
    logger.debug("exec: %s", shlex.join(argv))
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        os.execvp(argv[0], list(argv))
    except OSError as e:
        raise CommandError(f"Cannot run {argv[0]}: {e.strerror or e}") from e
