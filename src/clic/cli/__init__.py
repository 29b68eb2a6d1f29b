"""Command-line tool for trying the terminal primitives."""

from clic.cli.app import create_app
from clic.cli.main import main

__all__ = ["create_app", "main"]
