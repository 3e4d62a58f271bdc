"""Thin owners of TCP sockets with the accept error handling of a server."""

from __future__ import annotations

import errno
import os
import socket
import sys
from typing import Optional

_IDLE_FD_PLATFORM = sys.platform.startswith("linux") or sys.platform == "darwin"


class EintrError(Exception):
    """Accept was interrupted by a signal."""


class AcceptError(RuntimeError):
    """Accept failed with an operating-system error code."""

    def __init__(self, error_code: int) -> None:
        super().__init__(str(error_code))
        self.error_code = error_code


class TcpSocket:
    """Owns a connected TCP socket and closes it when done."""

    def __init__(self, sock: socket.socket, server_side: bool) -> None:
        self._sock = sock
        self._server_side = server_side

    def set_nodelay(self) -> None:
        self._sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)

    def set_nonblock(self) -> bool:
        self._sock.setblocking(False)
        return True

    def set_send_size(self, size: int) -> None:
        self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_SNDBUF, size)

    def set_recv_size(self, size: int) -> None:
        self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_RCVBUF, size)

    def remote_ip(self) -> str:
        return self._sock.getpeername()[0]

    def is_server_side(self) -> bool:
        return self._server_side

    def fileno(self) -> int:
        return self._sock.fileno()

    def close(self) -> None:
        self._sock.close()

    def __enter__(self) -> "TcpSocket":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def _open_idle_fd() -> Optional[int]:
    flags = os.O_RDONLY | getattr(os, "O_CLOEXEC", 0)
    try:
        return os.open(os.devnull, flags)
    except OSError:
        return None


class ListenSocket:
    """Owns a listening socket and hands out accepted connections.

    On Linux and macOS a spare descriptor is kept open so that, when the
    process runs out of descriptors, the pending connection can still be
    accepted and dropped instead of spinning on it.
    """

    def __init__(self, sock: socket.socket) -> None:
        self._sock = sock
        self._idle_fd = _open_idle_fd() if _IDLE_FD_PLATFORM else None

    def _release_idle(self) -> None:
        if self._idle_fd is not None:
            os.close(self._idle_fd)
            self._idle_fd = None

    def _drop_pending(self) -> None:
        self._release_idle()
        try:
            conn, _ = self._sock.accept()
            conn.close()
        except OSError:
            pass
        self._idle_fd = _open_idle_fd()

    def accept(self) -> TcpSocket:
        """Accept one connection.

        Raises EintrError when interrupted and AcceptError for other failures.
        """
        try:
            conn, _ = self._sock.accept()
        except InterruptedError as exc:
            raise EintrError() from exc
        except OSError as exc:
            code = exc.errno if exc.errno is not None else 0
            if _IDLE_FD_PLATFORM and code == errno.EMFILE:
                self._drop_pending()
            if code == errno.EINTR:
                raise EintrError() from exc
            raise AcceptError(code) from exc
        return TcpSocket(conn, True)

    def close(self) -> None:
        self._release_idle()
        self._sock.close()

    def __enter__(self) -> "ListenSocket":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()