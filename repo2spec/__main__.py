"""Enable `python -m repo2spec` invocation."""
from repo2spec.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
