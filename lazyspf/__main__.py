"""Allow running lazyspf as a module: ``python -m lazyspf``."""

from lazyspf.cli import main

if __name__ == "__main__":
    main()
