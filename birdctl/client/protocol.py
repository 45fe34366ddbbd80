"""Wire format for the BIRD control socket.

Commands are a keyword, one space, a protocol name and a newline:

    enable bgp_upstream\\n
    disable bgp_upstream\\n

Each command gets exactly one reply line, whose content is free text. Only
these substrings are understood:

    "<name>: enabled"          "<name>: already enabled"
    "<name>: disabled"         "<name>: already disabled"

Anything else is a daemon-side refusal (unknown protocol, wrong state, ...).
"""

from typing import Tuple

ENABLE = "enable"
DISABLE = "disable"

# Substrings (after "<name>: ") that count as success for each action.
SUCCESS_REPLIES = {
    ENABLE: ("already enabled", "enabled"),
    DISABLE: ("already disabled", "disabled"),
}

ENCODING = "utf-8"


def format_command(action: str, protocol: str) -> str:
    """
    Build the command line for an action.

    Args:
        action: "enable" or "disable"
        protocol: Protocol instance name (passed through as-is)

    Returns:
        Command string terminated by a newline
    """
    if action not in SUCCESS_REPLIES:
        raise ValueError(f"Unsupported action: {action}")
    return f"{action} {protocol}\n"


def success_markers(action: str, protocol: str) -> Tuple[str, ...]:
    """Return the reply substrings that mean `action` succeeded for `protocol`."""
    return tuple(f"{protocol}: {reply}" for reply in SUCCESS_REPLIES[action])


def is_success(action: str, protocol: str, response: str) -> bool:
    """True if `response` contains one of the success markers."""
    return any(marker in response for marker in success_markers(action, protocol))


def encode_command(command: str) -> bytes:
    return command.encode(ENCODING)


def decode_line(line: bytes) -> str:
    """Decode a reply line and strip its terminator."""
    return line.decode(ENCODING, errors="replace").rstrip("\r\n")
