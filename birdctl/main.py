#!/usr/bin/env python3
"""
Main entry point for the birdctl CLI.

Delegates to the UI layer in birdctl.ui.cli.
"""

from birdctl.ui.cli import run as birdctl


if __name__ == "__main__":
    birdctl()
