class ConfigurationError(Exception):
    """Startup configuration is missing or inconsistent."""
