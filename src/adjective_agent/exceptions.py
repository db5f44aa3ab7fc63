"""Custom exceptions for adjective-agent.

Each exception type represents a category of error.
Catch specific exceptions to handle errors appropriately.
"""


class AdjectiveAgentError(Exception):
    """Base exception for all adjective-agent errors."""

    pass


class SnapshotError(AdjectiveAgentError):
    """Raised when a vocabulary snapshot is malformed or unreadable."""

    pass


class ConfigError(AdjectiveAgentError):
    """Raised when configuration is invalid or missing."""

    pass
