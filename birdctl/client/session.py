"""Session with the BIRD control socket.

A BirdSession owns one unix socket connection for its whole lifetime.
Every command is a single write followed by a single line read, done while
holding the session lock, so threads sharing a session never see each
other's replies.

Usage:
    with BirdSession("/var/run/bird/bird.ctl") as bird:
        bird.disable_protocol("bgp_upstream")
        bird.enable_protocol("bgp_upstream")
"""

import logging
import os
import socket
import threading
from typing import TYPE_CHECKING, BinaryIO, Optional, Union

from birdctl.client.errors import (
    BirdConnectionError,
    ProtocolOperationError,
    ReadError,
    WriteError,
)
from birdctl.client.protocol import (
    DISABLE,
    ENABLE,
    decode_line,
    encode_command,
    format_command,
    is_success,
)

if TYPE_CHECKING:
    from birdctl.core.configs import ClientConfig

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class BirdSession:
    """
    Client for BIRD's control socket.

    Thread safety: a single lock covers the write+read pair of every
    command. Callers queued on the lock run in unspecified order.
    """

    def __init__(self, socket_path: PathLike, timeout: Optional[float] = None):
        """
        Connect to the daemon and drain its banner.

        Args:
            socket_path: Path to BIRD's unix control socket
            timeout: Seconds to wait on any socket operation. None blocks
                forever (as does 0), which means a stalled daemon stalls
                the caller.

        Raises:
            ValueError: If timeout is negative
            BirdConnectionError: If the socket cannot be reached or the
                banner cannot be read
        """
        if timeout is not None and timeout < 0:
            raise ValueError(f"Timeout must not be negative: {timeout!r}")
        self._socket_path = os.fspath(socket_path)
        self.timeout = timeout or None
        self._lock = threading.Lock()
        self._sock: Optional[socket.socket] = None
        self._reader: Optional[BinaryIO] = None
        self.banner = ""

        self._sock = self._connect()
        self._reader = self._sock.makefile("rb")
        try:
            self.banner = self._read_banner()
        except BirdConnectionError:
            self._release()
            raise

        logger.debug(f"Connected to BIRD at {self._socket_path}")

    @classmethod
    def from_config(cls, config: "ClientConfig") -> "BirdSession":
        """Open a session from a ClientConfig."""
        return cls(config.socket_path, timeout=config.timeout)

    @property
    def socket_path(self) -> str:
        return self._socket_path

    @property
    def closed(self) -> bool:
        return self._sock is None

    def enable_protocol(self, protocol: str) -> None:
        """
        Enable a protocol instance.

        An "already enabled" reply counts as success.

        Raises:
            ExecError: If the command could not be exchanged
            ProtocolOperationError: If BIRD did not confirm the change
        """
        self._toggle(ENABLE, protocol)

    def disable_protocol(self, protocol: str) -> None:
        """
        Disable a protocol instance.

        An "already disabled" reply counts as success.

        Raises:
            ExecError: If the command could not be exchanged
            ProtocolOperationError: If BIRD did not confirm the change
        """
        self._toggle(DISABLE, protocol)

    def close(self) -> None:
        """
        Close the connection. Safe to call more than once.

        Shuts the socket down first, so a command blocked on a stalled
        daemon fails with ReadError instead of holding the session open.

        Raises:
            BirdConnectionError: If the OS reports an error while closing
        """
        sock = self._sock
        if sock is not None:
            try:
                sock.shutdown(socket.SHUT_RDWR)
            except OSError as e:
                # Peer already gone or socket already released.
                logger.debug(f"shutdown of BIRD connection failed: {e}")

        with self._lock:
            if self._sock is None:
                return
            try:
                self._release()
            except OSError as e:
                raise BirdConnectionError(
                    f"failed to close BIRD connection: {e}"
                ) from e
        logger.debug(f"Closed BIRD connection {self._socket_path}")

    def __enter__(self) -> "BirdSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"<BirdSession {self._socket_path!r} {state}>"

    def _toggle(self, action: str, protocol: str) -> None:
        response = self._exec(format_command(action, protocol))
        if is_success(action, protocol, response):
            logger.info(f"BIRD: {response}")
            return
        raise ProtocolOperationError(protocol, action, response)

    def _exec(self, command: str) -> str:
        """
        Send one command and return its single reply line.

        `command` must already end in a newline.

        Raises:
            WriteError: If the session is closed or the send fails
            ReadError: If no full line arrives before EOF, error or timeout
        """
        with self._lock:
            if self._sock is None:
                raise WriteError("session is closed")

            try:
                self._sock.sendall(encode_command(command))
            except OSError as e:
                raise WriteError(f"writing to BIRD failed: {e}") from e

            try:
                line = self._reader.readline()
            except OSError as e:
                raise ReadError(f"reading response from BIRD failed: {e}") from e

            # Partial line means the daemon hung up mid-reply.
            if not line.endswith(b"\n"):
                raise ReadError("reading response from BIRD failed: connection closed")

        return decode_line(line)

    def _connect(self) -> socket.socket:
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        sock.settimeout(self.timeout)
        try:
            sock.connect(self._socket_path)
        except OSError as e:
            sock.close()
            raise BirdConnectionError(
                f"failed to connect to BIRD at {self._socket_path}: {e}"
            ) from e
        return sock

    def _read_banner(self) -> str:
        """Consume the greeting BIRD sends on connect, one full line."""
        try:
            line = self._reader.readline()
        except OSError as e:
            raise BirdConnectionError(f"failed to read BIRD banner: {e}") from e

        if not line.endswith(b"\n"):
            raise BirdConnectionError(
                "failed to read BIRD banner: connection closed"
            )

        banner = decode_line(line)
        logger.debug(f"BIRD banner: {banner}")
        return banner

    def _release(self) -> None:
        reader, sock = self._reader, self._sock
        self._reader = None
        self._sock = None
        try:
            if reader is not None:
                reader.close()
        finally:
            if sock is not None:
                sock.close()
