class PathTrieError(Exception):
    """Base exception for pathtrie errors."""

    def format_user_message(self) -> str:
        """Format a user-friendly error message."""
        return str(self)

    def get_suggestion(self) -> str | None:
        """Return actionable suggestion for resolving the error."""
        return None


class ConfigError(PathTrieError):
    """Base class for configuration errors."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when a config value fails validation."""

    pass
