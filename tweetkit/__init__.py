"""Client for the Twitter REST API v1.1: accounts, configuration, direct messages, favorites and lists."""

__version__ = "0.1.0"

__all__ = [
    "accounts",
    "api",
    "backoffs",
    "config",
    "direct_messages",
    "entities",
    "errors",
    "favorites",
    "lists",
]