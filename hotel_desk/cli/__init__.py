"""Text menu front end."""

from hotel_desk.cli.menu import MenuShell

__all__ = ["MenuShell"]
