"""
config.py

Responsibility: Build the runtime configuration as a deterministic, typed model.

Sources, lowest to highest priority:
- built-in defaults (below)
- an optional YAML config file (`--config` or env REPO2SPEC_CONFIG)
- environment variables (REPO2SPEC_TEMPLATES, REPO2SPEC_API, GITHUB_TOKEN)

Everything downstream receives a `Config` instead of reading globals or the
environment itself.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from repo2spec.parameters import ParameterSet

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.github.com"
DEFAULT_TEMPLATES_DIR = "/usr/share/eterbuild/rpmgp/templates"
DEFAULT_TEMPLATE_SUFFIX = ".spec"
DEFAULT_GENERATOR = ("rpmgp", "-n")
DEFAULT_TAG_FLAG = "--tag"
DEFAULT_FALLBACK_TYPE = "common"

DEFAULT_LANGUAGE_TYPES: dict[str, str] = {
    "C": "cmake",
    "C++": "cmake",
    "Go": "golang",
    "Java": "maven",
    "JavaScript": "nodejs",
    "Perl": "perl",
    "PHP": "php",
    "Python": "python3",
    "Ruby": "ruby",
    "Rust": "rust",
    "TypeScript": "nodejs",
}

DEFAULT_PARAMETERS: dict[str, str] = {
    "description": "%summary",
    "changelog": "Initial build for Sisyphus",
}

ENV_CONFIG = "REPO2SPEC_CONFIG"
ENV_TEMPLATES = "REPO2SPEC_TEMPLATES"
ENV_API = "REPO2SPEC_API"
ENV_TOKEN = "GITHUB_TOKEN"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class Config:
    """Resolved settings for one run."""

    api_base: str = DEFAULT_API_BASE
    token: str | None = None
    templates_dir: Path = Path(DEFAULT_TEMPLATES_DIR)
    template_suffix: str = DEFAULT_TEMPLATE_SUFFIX
    generator: tuple[str, ...] = DEFAULT_GENERATOR
    tag_flag: str = DEFAULT_TAG_FLAG
    fallback_type: str = DEFAULT_FALLBACK_TYPE
    language_types: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_LANGUAGE_TYPES))
    defaults: ParameterSet = field(default_factory=lambda: ParameterSet.from_mapping(DEFAULT_PARAMETERS))


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Config file does not exist: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Config file is not valid YAML: {path}") from e
    if not isinstance(data, dict):
        raise ConfigError("Config file must be a mapping/object at the top level.")
    return data


def _str_mapping(data: dict[str, Any], key: str) -> dict[str, str]:
    raw = data.get(key) or {}
    if not isinstance(raw, dict):
        raise ConfigError(f"`{key}` must be an object/mapping when provided.")
    return {str(k): str(v) for k, v in raw.items() if v is not None}


def _str_value(data: dict[str, Any], key: str, default: str) -> str:
    value = data.get(key)
    if value is None:
        return default
    text = str(value).strip()
    if not text:
        raise ConfigError(f"`{key}` must not be empty when provided.")
    return text


def _generator(data: dict[str, Any]) -> tuple[str, ...]:
    raw = data.get("generator")
    if raw is None:
        return DEFAULT_GENERATOR
    if isinstance(raw, str):
        raw = raw.split()
    if not isinstance(raw, list) or not raw:
        raise ConfigError("`generator` must be a non-empty string or list when provided.")
    return tuple(str(part) for part in raw)


def load_config(path: str | Path | None = None, environ: Mapping[str, str] | None = None) -> Config:
    """
    Build a `Config`.

    `path` wins over env REPO2SPEC_CONFIG; with neither, only built-in defaults
    and the environment are used.

    Recognized YAML keys:
    - api_base, templates_dir, template_suffix, tag_flag, fallback_type: str
    - generator: str or list (argv prefix of the spec generator)
    - language_types: mapping of GitHub language -> template type
    - defaults: mapping of parameter name -> default value
    """
    env = os.environ if environ is None else environ
    config_path = path or env.get(ENV_CONFIG) or None

    data: dict[str, Any] = {}
    if config_path:
        logger.debug("Loading config from %s", config_path)
        data = _read_yaml(Path(config_path).expanduser())

    language_types = dict(DEFAULT_LANGUAGE_TYPES)
    language_types.update(_str_mapping(data, "language_types"))

    default_values = dict(DEFAULT_PARAMETERS)
    default_values.update(_str_mapping(data, "defaults"))
    unknown = sorted(set(default_values) - set(ParameterSet.field_names()))
    if unknown:
        raise ConfigError(f"Unknown parameter(s) in `defaults`: {', '.join(unknown)}")

    templates_dir = env.get(ENV_TEMPLATES) or _str_value(data, "templates_dir", DEFAULT_TEMPLATES_DIR)
    api_base = env.get(ENV_API) or _str_value(data, "api_base", DEFAULT_API_BASE)

    return Config(
        api_base=api_base.rstrip("/"),
        token=env.get(ENV_TOKEN) or None,
        templates_dir=Path(templates_dir).expanduser(),
        template_suffix=_str_value(data, "template_suffix", DEFAULT_TEMPLATE_SUFFIX),
        generator=_generator(data),
        tag_flag=_str_value(data, "tag_flag", DEFAULT_TAG_FLAG),
        fallback_type=_str_value(data, "fallback_type", DEFAULT_FALLBACK_TYPE),
        language_types=language_types,
        defaults=ParameterSet.from_mapping(default_values),
    )
