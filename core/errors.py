"""Exceptions raised by sources, clients and the config loader."""


class NyaaError(Exception):
    """Base class for failures that end up on the error queue."""


class SourceError(NyaaError):
    """A source could not load results."""


class ClientError(NyaaError):
    """A client could not dispatch a download."""


class ConfigError(NyaaError):
    """The persisted configuration could not be read or applied."""
