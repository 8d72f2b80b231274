"""Allow ``python -m minicurl``."""

from minicurl.cli import main

if __name__ == "__main__":
    main()
