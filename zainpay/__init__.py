"""Asynchronous client for the ZainPay payments API, with a command that lists zainboxes."""

__version__ = "0.1.0"

__all__ = [
    "bank",
    "card",
    "cli",
    "engine",
    "environment",
    "filters",
    "models",
    "response",
    "settlement",
    "virtual_account",
    "zainbox",
]