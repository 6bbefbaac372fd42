"""
cli.py

Responsibility: CLI entrypoint for repo2spec.

High-level flow:
1) Load config, enumerate template types
2) Determine the repository URL (option or prompt) -> owner/name
3) Fetch metadata from GitHub
4) Merge defaults < fetched < command-line overrides
5) Prompt according to the interactive level
6) Build the generator command, then print it or exec it

This module should orchestrate behavior but keep concerns isolated:
- Configuration: `config.py`
- GitHub API: `github_client.py`, `fetcher.py`
- Merge / prompts: `parameters.py`, `prompter.py`
- Command line: `command.py`
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from repo2spec import __version__
from repo2spec.command import CommandError, build_command, exec_command, print_command
from repo2spec.config import ENV_API, ENV_CONFIG, ENV_TEMPLATES, ENV_TOKEN, ConfigError, load_config
from repo2spec.fetcher import InvalidRepositoryURL, MetadataFetcher, parse_repo_id
from repo2spec.github_client import GitHubError
from repo2spec.parameters import NEEDED_PARAMETERS, ParameterSet, merge_parameters
from repo2spec.prompter import LEVELS, Ask, MissingParameterError, resolve_one, resolve_parameters
from repo2spec.templates import list_types

logger = logging.getLogger(__name__)

# parameter -> long option; `url` and `version` clash with -u/--url and -v/--version
_OVERRIDE_LONG = {name: f"--{name}" for name in NEEDED_PARAMETERS}
_OVERRIDE_LONG["url"] = "--url-param"
_OVERRIDE_LONG["version"] = "--pkg-version"


def _interactive_level(value: str) -> int:
    try:
        level = int(value)
    except ValueError:
        level = None
    if level not in LEVELS:
        raise argparse.ArgumentTypeError(f"invalid interactive level: {value!r} (expected 0, 1 or 2)")
    return level


def _split_passthrough(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split argv at the first bare `--`; the tail goes to the generator untouched."""
    argv = list(argv)
    if "--" in argv:
        idx = argv.index("--")
        return argv[:idx], argv[idx + 1 :]
    return argv, []


def _cli_overrides(args: argparse.Namespace, repo_url: str) -> ParameterSet:
    """Collect parameter overrides; the repository URL seeds `url` unless -U was given."""
    values = {name: getattr(args, f"param_{name}") for name in NEEDED_PARAMETERS}
    if values["url"] is None:
        values["url"] = repo_url
    return ParameterSet.from_mapping(values)


def _effective_level(args: argparse.Namespace) -> int:
    if args.interactive is not None:
        return args.interactive
    return 0 if args.url else 1


def build_cmd(
    args: argparse.Namespace,
    extra: Sequence[str] = (),
    *,
    ask: Ask = input,
    fetcher: MetadataFetcher | None = None,
) -> int:
    config = load_config(args.config)
    level = _effective_level(args)
    types = list_types(config.templates_dir, config.template_suffix)
    logger.debug("Interactive level %d, %d template type(s)", level, len(types))

    # only -u or the prompt name the repository; -U is a parameter override
    repo_url = args.url or resolve_one("url", None, level, ask=ask)
    repo_id = parse_repo_id(repo_url)
    overrides = _cli_overrides(args, repo_url)

    fetcher = fetcher or MetadataFetcher.from_config(config)
    fetched = fetcher.fetch(repo_id)

    merged = merge_parameters(config.defaults, fetched, overrides)
    resolved = resolve_parameters(merged, types, level, ask=ask)

    command = build_command(
        resolved,
        config=config,
        types=types,
        executable=bool(args.executable),
        extra=extra,
    )

    if args.print_only:
        return print_command(command)
    exec_command(command)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="repo2spec",
        description="Create a new spec with rpmgp from GitHub repository metadata",
        epilog=(
            "Arguments after a bare '--' are passed to the generator unchanged. "
            f"Environment: {ENV_TEMPLATES} (template directory), {ENV_CONFIG} (config file), "
            f"{ENV_TOKEN} (API token), {ENV_API} (API base URL)."
        ),
    )
    p.add_argument(
        "-i",
        "--interactive",
        type=_interactive_level,
        default=None,
        metavar="LEVEL",
        help="0: never ask, 1: ask for missing values, 2: ask for everything (default: 1, or 0 with --url)",
    )
    p.add_argument("-u", "--url", default=None, help="Repository URL (implies --interactive=0 unless given)")
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-p", "--print-only", action="store_true", help="Print the command instead of running it")
    p.add_argument("-e", "--executable", action="store_true", help="Prefer the '-bin' variant of the type")
    p.add_argument("--config", default=None, help=f"YAML config file (or set env {ENV_CONFIG})")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")

    overrides = p.add_argument_group("parameter overrides")
    for name in NEEDED_PARAMETERS:
        overrides.add_argument(
            f"-{name[0].upper()}",
            _OVERRIDE_LONG[name],
            dest=f"param_{name}",
            default=None,
            metavar=name.upper(),
            help=f"Set {name}",
        )
    return p


def main(argv: list[str] | None = None) -> int:
    own, extra = _split_passthrough(sys.argv[1:] if argv is None else argv)
    parser = _build_parser()
    args = parser.parse_args(own)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        return int(build_cmd(args, extra))
    except (
        CommandError,
        ConfigError,
        GitHubError,
        InvalidRepositoryURL,
        MissingParameterError,
    ) as e:
        print(f"repo2spec: {e}", file=sys.stderr)
    except KeyboardInterrupt:
        print("", file=sys.stderr)
        return 130
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
