# =============================================================================
# File: custom_exceptions.py
# Date: 2026-10-19
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

"""
Custom exception classes for the Env Guard bootstrap helper.
Provides specific exception types for better error handling and debugging.
"""


class EnvGuardError(Exception):
    """
    Base exception class for all Env Guard errors.

    This is the root exception for the application. All custom exceptions should inherit from this.
    """


class ConfigurationError(EnvGuardError):
    """
    Raised when the settings file cannot be loaded or parsed.
    """

    pass


class StorageError(EnvGuardError):
    """
    Raised when a JSON store key or path cannot be resolved safely.
    """

    pass
