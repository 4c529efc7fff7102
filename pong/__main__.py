"""Run the headless match simulator with `python -m pong`."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
