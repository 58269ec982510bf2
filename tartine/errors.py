"""Exceptions raised by the networking layer."""


class SocketError(RuntimeError):
    """A socket operation failed."""


class ServerError(RuntimeError):
    """The server could not perform the requested operation."""