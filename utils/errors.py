"""
utils/errors.py
---------------
Error taxonomy shared by every layer.
Lower layers raise these; only handlers/errors.py turns them into HTTP statuses.
"""


class ServiceError(Exception):
    """Base class for all errors raised by this service."""


class ConfigError(ServiceError):
    """Required configuration is missing or invalid. Fatal at startup."""


class MalformedInputError(ServiceError):
    """Client input could not be decoded (bad hex id, unparseable body)."""


class NotFoundError(ServiceError):
    """The addressed row does not exist."""


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: str):
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class StorageError(ServiceError):
    """A database statement or connection failed."""
