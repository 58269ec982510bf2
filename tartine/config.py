"""Compile-time style defaults shared across the package."""

MAX_BACKLOG = 128
MAX_EVENTS = 1024
MAX_BUFFER = 4096
DEFAULT_WORKERS = 1

DEFAULT_TIMER_POOL_SIZE = 128

DEFAULT_MAX_REQUEST_SIZE = 4096
DEFAULT_MAX_RESPONSE_SIZE = 2**32 - 1
CHUNK_SIZE = 1024

HTTP_STANDARD_PORT = 80