"""Client for the BIRD routing daemon's control socket."""

from birdctl.client import (
    BirdConnectionError,
    BirdError,
    BirdSession,
    ExecError,
    ProtocolOperationError,
    ReadError,
    WriteError,
)

__version__ = "0.1.0"

__all__ = [
    "BirdSession",
    "BirdError",
    "BirdConnectionError",
    "ExecError",
    "WriteError",
    "ReadError",
    "ProtocolOperationError",
]
