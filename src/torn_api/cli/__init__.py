"""CLI module for the Torn API client.

Usage:
    python -m torn_api.cli --help
    python -m torn_api.cli user -s basic
    python -m torn_api.cli config generate torn.yaml
"""

from torn_api.cli.main import app

__all__ = ["app"]
