"""Run the example driver with ``python -m pyinterp1d``."""

from .driver import main as driver_main


def main() -> None:
    """Entry point for ``python -m pyinterp1d``."""
    driver_main()


if __name__ == "__main__":
    main()
