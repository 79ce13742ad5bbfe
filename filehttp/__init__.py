"""A minimal threaded HTTP file server and a matching interactive downloader."""

__version__ = "0.1.0"
__all__ = ["client", "http", "server"]