"""Exceptions raised by the BIRD control socket client.

Transport failures and daemon-side rejections are kept apart so callers can
tell a dead session (rebuild it) from a refused command (session still fine).
"""


class BirdError(Exception):
    """Base class for all client errors."""


class BirdConnectionError(BirdError, ConnectionError):
    """The session could not be established, primed, or closed."""


class ExecError(BirdError):
    """A command could not be exchanged with the daemon."""


class WriteError(ExecError):
    """Sending the command failed."""


class ReadError(ExecError):
    """No complete response line was received."""


class ProtocolOperationError(BirdError):
    """The daemon answered, but not with a recognized success reply."""

    def __init__(self, protocol: str, action: str, response: str):
        self.protocol = protocol
        self.action = action
        self.response = response
        super().__init__(f"failed to {action} {protocol}: {response}")
