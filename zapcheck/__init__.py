"""zapcheck - OWASP ZAP report analysis."""

__version__ = "0.1.0"
