"""BIRD control socket client.

- BirdSession: one connection, serialized command/reply exchanges
- protocol: command formatting and reply classification
- errors: exception hierarchy
"""

from birdctl.client.errors import (
    BirdConnectionError,
    BirdError,
    ExecError,
    ProtocolOperationError,
    ReadError,
    WriteError,
)
from birdctl.client.session import BirdSession

__all__ = [
    "BirdSession",
    "BirdError",
    "BirdConnectionError",
    "ExecError",
    "WriteError",
    "ReadError",
    "ProtocolOperationError",
]
