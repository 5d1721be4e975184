"""Entry point for ``python -m blogcorpus``."""

from blogcorpus.cli.app import main

if __name__ == "__main__":
    main()
