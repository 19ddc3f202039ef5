"""Entry point for running the CLI as a module.

Usage:
    python -m torn_api.cli --help
"""

from torn_api.cli.main import app

if __name__ == "__main__":
    app()
