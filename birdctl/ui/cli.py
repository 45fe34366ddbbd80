"""Main CLI entry point."""

import logging
from typing import Optional

import typer

from birdctl.client import BirdError, BirdSession, ProtocolOperationError
from birdctl.core.configs import ClientConfig, get_client_config, parse_timeout
from birdctl.ui import output

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="birdctl - enable and disable BIRD protocols over the control socket.",
)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _load_config(socket: Optional[str], timeout: Optional[str]) -> ClientConfig:
    """
    Resolve configuration: CLI flags > environment > config file > defaults.
    Exits on error.
    """
    try:
        config = get_client_config()
        if socket:
            config.socket_path = socket
        if timeout is not None:
            config.timeout = parse_timeout(timeout)
    except ValueError as e:
        output.error(f"Invalid configuration: {e}")
        raise typer.Exit(1)
    return config


def _toggle(action: str, protocol: str, config: ClientConfig) -> None:
    """Open a session, run one enable/disable, report the outcome."""
    try:
        with BirdSession.from_config(config) as bird:
            if action == "enable":
                bird.enable_protocol(protocol)
            else:
                bird.disable_protocol(protocol)
    except ProtocolOperationError as e:
        output.error(f"BIRD refused to {e.action} {e.protocol}: {e.response}")
        raise typer.Exit(1)
    except BirdError as e:
        output.error(str(e))
        raise typer.Exit(1)

    output.success(f"BIRD confirmed {action} {protocol}")


# Shared options
SocketOption = typer.Option(
    None, "--socket", "-s", help="Path to BIRD's control socket"
)
TimeoutOption = typer.Option(
    None, "--timeout", "-t", help="Socket timeout in seconds (0 = wait forever)"
)
VerboseOption = typer.Option(False, "--verbose", "-v", help="Show debug logging")


@app.command()
def enable(
    protocol: str = typer.Argument(..., help="Protocol instance name"),
    socket: Optional[str] = SocketOption,
    timeout: Optional[str] = TimeoutOption,
    verbose: bool = VerboseOption,
) -> None:
    """
    Enable a protocol instance.

    Example: birdctl enable bgp_upstream
    """
    _setup_logging(verbose)
    _toggle("enable", protocol, _load_config(socket, timeout))


@app.command()
def disable(
    protocol: str = typer.Argument(..., help="Protocol instance name"),
    socket: Optional[str] = SocketOption,
    timeout: Optional[str] = TimeoutOption,
    verbose: bool = VerboseOption,
) -> None:
    """
    Disable a protocol instance.

    Example: birdctl disable bgp_upstream
    """
    _setup_logging(verbose)
    _toggle("disable", protocol, _load_config(socket, timeout))


@app.command()
def config(
    socket: Optional[str] = SocketOption,
    timeout: Optional[str] = TimeoutOption,
) -> None:
    """Show the effective configuration."""
    output.show_config(_load_config(socket, timeout))


def run() -> None:
    """Run the Typer app."""
    app()
