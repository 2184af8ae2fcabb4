"""Module entry point for running with python -m rst2mdx."""

from rst2mdx.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
