"""String helpers and the package's greeting command."""

from collections.abc import Sequence

__all__ = ["greet", "main"]


def greet(name: str) -> None:
    """Print a greeting for ``name``."""
    print(f"Hello, {name}!")


def main(argv: Sequence[str] | None = None) -> int:
    """Greet the world."""
    greet("world")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())