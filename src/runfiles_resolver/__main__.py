"""Allow ``python -m runfiles_resolver``."""

from runfiles_resolver.cli import main

if __name__ == "__main__":
    main()
