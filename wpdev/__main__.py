"""Module entry point: `python -m wpdev` behaves like provision.py."""

from provision import main

if __name__ == "__main__":
    raise SystemExit(main())
