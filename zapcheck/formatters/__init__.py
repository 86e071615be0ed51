"""Output formatters for zapcheck."""

from zapcheck.formatters.sarif import render_sarif

__all__ = ["render_sarif"]
