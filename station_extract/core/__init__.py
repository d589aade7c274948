"""Core infrastructure: configuration, constants, exception taxonomy."""
