"""
parameters.py

Responsibility: the packaging parameter model shared by every stage.

A `ParameterSet` holds the eight parameters `rpmgp` needs plus the auxiliary
`tag`. Values are strings or `None` (unset). Stages never mutate a set; they
return new ones.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Mapping

NEEDED_PARAMETERS: tuple[str, ...] = (
    "name",
    "summary",
    "license",
    "description",
    "type",
    "url",
    "version",
    "changelog",
)


@dataclass(frozen=True)
class ParameterSet:
    name: str | None = None
    summary: str | None = None
    license: str | None = None
    description: str | None = None
    type: str | None = None
    url: str | None = None
    version: str | None = None
    changelog: str | None = None
    tag: str | None = None

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ParameterSet":
        """
        Keep only recognized fields of `data`.

        Unknown keys are dropped; `None` and blank strings are treated as unset.
        """
        known = set(cls.field_names())
        values: dict[str, str] = {}
        for key, value in data.items():
            if key not in known or value is None:
                continue
            text = str(value).strip()
            if text:
                values[key] = text
        return cls(**values)

    def get(self, name: str) -> str | None:
        return getattr(self, name)

    def with_value(self, name: str, value: str | None) -> "ParameterSet":
        return replace(self, **{name: value})

    def as_dict(self) -> dict[str, str | None]:
        return asdict(self)

    def defined(self) -> dict[str, str]:
        return {k: v for k, v in self.as_dict().items() if v is not None}

    def missing(self) -> list[str]:
        return [name for name in NEEDED_PARAMETERS if self.get(name) is None]

    def to_args(self) -> list[str]:
        """
        Render needed parameters, in declared order, as `-<letter> <value>` pairs.

        Unset parameters are skipped; `tag` is never rendered here.

        The letters are lower case because that is what `rpmgp` accepts
        (`-n NAME -s SUMMARY ...`); the upper-case letters are our own override
        options. The leading `-n` of the default generator argv is rpmgp's
        "new spec" switch, so `-n` legitimately appears twice.
        """
        args: list[str] = []
        for name in NEEDED_PARAMETERS:
            value = self.get(name)
            if value is None:
                continue
            args.extend([f"-{name[0]}", value])
        return args


def merge_parameters(
    defaults: ParameterSet,
    fetched: ParameterSet,
    overrides: ParameterSet,
) -> ParameterSet:
    """
    Merge three parameter sets with precedence overrides > fetched > defaults.

    For each field the highest-precedence source that defines it wins.
    """
    merged: dict[str, str] = {}
    for source in (defaults, fetched, overrides):
        merged.update(source.defined())
    return ParameterSet(**merged)
