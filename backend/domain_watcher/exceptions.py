class ConfigurationError(Exception):
    """Raised when the invocation cannot start because required configuration is missing."""
