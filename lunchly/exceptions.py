"""
File: exceptions.py
Purpose: Error types raised by the Lunchly data layer.

Database errors (mysql.connector.Error) are not listed here: they propagate
to the caller unchanged.
"""
from werkzeug.exceptions import NotFound


class LunchlyError(Exception):
    """Base class for all Lunchly errors."""


class NotFoundError(LunchlyError, NotFound):
    """
    A lookup by id matched no row.
    Being a werkzeug NotFound, a Flask view can let it bubble up and the
    client receives a 404.
    """

    @property
    def status(self):
        return self.code


class InvalidArgumentError(LunchlyError, ValueError):
    """A field was assigned a value that breaks its contract."""


class InvalidStateError(LunchlyError, RuntimeError):
    """An operation is not allowed in the entity's current state."""
