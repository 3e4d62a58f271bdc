"""Networking building blocks: a byte buffer, timers, TCP socket wrappers and SHA-1."""

__version__ = "0.1.0"
__all__ = ["buffer", "timer", "sockets", "sha1"]