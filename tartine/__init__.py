"""HTTP building blocks: status codes, dates, headers, cookies, addresses, Base64, byte views, flags and logging."""

__version__ = "0.1.0"