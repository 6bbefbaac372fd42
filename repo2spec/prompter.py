"""
prompter.py

Responsibility: Decide, per needed parameter, whether to keep the merged value,
ask the user, or abort.

Interactivity levels:
- 0: never prompt; a missing value aborts
- 1: prompt only for missing values
- 2: prompt for every value, showing the current one as default
"""

from __future__ import annotations

import sys
from typing import Callable, Sequence, TextIO

from repo2spec.parameters import NEEDED_PARAMETERS, ParameterSet

Ask = Callable[[str], str]

LEVELS = (0, 1, 2)


class MissingParameterError(RuntimeError):
    def __init__(self, name: str) -> None:
        super().__init__(f"No value for required parameter `{name}`")
        self.name = name


def prompt_text(name: str, default: str | None, types: Sequence[str] = ()) -> str:
    text = name.capitalize()
    if name == "type" and types:
        text += f" (available: {', '.join(types)})"
    if default is not None:
        text += f" [{default}]"
    return text + ": "


def ask_value(
    name: str,
    default: str | None,
    *,
    types: Sequence[str] = (),
    ask: Ask = input,
    err: TextIO | None = None,
) -> str:
    """
    Prompt until a value is obtained.

    Blank input takes `default`; without a default, blank input is rejected
    and the question is repeated. EOF takes the default or aborts.
    """
    err = err or sys.stderr
    prompt = prompt_text(name, default, types)
    while True:
        try:
            answer = ask(prompt).strip()
        except EOFError:
            if default is not None:
                return default
            raise MissingParameterError(name) from None
        if answer:
            return answer
        if default is not None:
            return default
        print("This field is required.", file=err)


def resolve_one(
    name: str,
    value: str | None,
    level: int,
    *,
    types: Sequence[str] = (),
    ask: Ask = input,
    err: TextIO | None = None,
) -> str:
    if level == 2 or (level == 1 and value is None):
        return ask_value(name, value, types=types, ask=ask, err=err)
    if value is None:
        raise MissingParameterError(name)
    return value


def resolve_parameters(
    merged: ParameterSet,
    types: Sequence[str],
    level: int,
    *,
    ask: Ask = input,
    err: TextIO | None = None,
) -> ParameterSet:
    """
    Fill in needed parameters in declared order according to `level`.

    Raises MissingParameterError on the first unresolved parameter at level 0.
    """
    if level not in LEVELS:
        raise ValueError(f"Invalid interactive level: {level}")
    resolved = merged
    for name in NEEDED_PARAMETERS:
        value = resolve_one(name, resolved.get(name), level, types=types, ask=ask, err=err)
        resolved = resolved.with_value(name, value)
    return resolved
