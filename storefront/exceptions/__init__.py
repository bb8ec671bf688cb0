"""
Service-level exceptions mapped to HTTP responses by the handlers module.
"""
import sqlite3

import psycopg2

# Driver errors the SQL backend lets through unchanged.
DATA_ACCESS_ERRORS = (sqlite3.Error, psycopg2.Error)


class StorefrontError(Exception):
    """Base class for errors raised by the service layer."""


class ConflictError(StorefrontError):
    """A record with the same unique value already exists."""


class AuthenticationError(StorefrontError):
    """Credentials did not match an account."""


__all__ = ["DATA_ACCESS_ERRORS", "StorefrontError", "ConflictError", "AuthenticationError"]
