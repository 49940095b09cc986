"""
Notification sinks for progress lines and warnings.

The generator never prints directly; it reports to a Notifier so callers
(and tests) decide where the output goes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import click


class Notifier(ABC):
    """Line-oriented sink for user-facing generator output."""

    @abstractmethod
    def info(self, message: str) -> None:
        """Report a general message."""

    @abstractmethod
    def progress(self, filename: str, type_name: str) -> None:
        """Report that the file for a content type has been generated."""

    @abstractmethod
    def warn(self, warning: Warning) -> None:
        """Report a non-fatal problem."""


class ClickNotifier(Notifier):
    """Writes to the terminal with click, highlighting names in yellow."""

    def __init__(self, color: bool | None = None):
        self.color = color

    def info(self, message: str) -> None:
        click.echo(message, color=self.color)

    def progress(self, filename: str, type_name: str) -> None:
        click.echo(f"{click.style(filename, fg='yellow')} ({type_name})", color=self.color)

    def warn(self, warning: Warning) -> None:
        click.echo(click.style(str(warning), fg="yellow"), err=True, color=self.color)
