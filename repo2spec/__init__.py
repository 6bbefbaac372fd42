"""
repo2spec package

This package implements repo2spec, a CLI that turns GitHub repository metadata
into an `rpmgp` invocation for creating a new packaging spec.

Key responsibilities are split across modules:
- `config.py`: built-in defaults, optional YAML config file, environment overrides
- `github_client.py`: isolated GitHub REST API interactions (repo / license / tags)
- `fetcher.py`: map GitHub metadata onto packaging parameters
- `templates.py`: enumerate available spec template types
- `parameters.py`: the `ParameterSet` model and the three-way merge
- `prompter.py`: interactive fill-in of missing (or all) parameters
- `command.py`: build the generator argv, then print it or exec it
- `cli.py`: CLI entrypoint and orchestration (fetch -> merge -> prompt -> run)
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
