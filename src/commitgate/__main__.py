"""Allow ``python -m commitgate``; the installed hook script relies on it."""

from commitgate.cli.main import main

if __name__ == "__main__":
    main()
