"""
The utils package contains helper utilities.

This package provides helper functions used in different parts
of the application.

Modules:
    logger: Logging system setup and function for getting module logger.
"""
