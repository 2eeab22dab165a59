from __future__ import annotations

import click


class NullReporter:
    """Reporter that discards everything. Used when the caller passes none."""

    def info(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass


class EchoReporter(NullReporter):
    """Terminal reporter. Info lines only show up in verbose mode."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def info(self, message: str) -> None:
        if self.verbose:
            click.echo(message)

    def warning(self, message: str) -> None:
        click.echo(f"WARN: {message}", err=True)

    def error(self, message: str) -> None:
        click.echo(f"ERROR: {message}", err=True)
