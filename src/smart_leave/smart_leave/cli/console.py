from __future__ import annotations

from abc import ABC, abstractmethod

import click


class Console(ABC):
    """Input/output port for the interactive session.

    ``read`` raises EOFError when no more input is available.
    """

    @abstractmethod
    def read(self, prompt: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def write(self, message: str = "") -> None:
        raise NotImplementedError

    def read_secret(self, prompt: str) -> str:
        return self.read(prompt)

    def success(self, message: str) -> None:
        self.write(f"[OK] {message}")

    def error(self, message: str) -> None:
        self.write(f"[ERROR] {message}")

    def info(self, message: str) -> None:
        self.write(f"[INFO] {message}")

    def heading(self, message: str) -> None:
        self.write(message)


class ClickConsole(Console):
    """Terminal console with coloured output."""

    def read(self, prompt: str) -> str:
        try:
            return click.prompt(prompt, default="", show_default=False, prompt_suffix=": ")
        except click.Abort:
            raise EOFError from None

    def read_secret(self, prompt: str) -> str:
        try:
            return click.prompt(prompt, default="", show_default=False, hide_input=True, prompt_suffix=": ")
        except click.Abort:
            raise EOFError from None

    def write(self, message: str = "") -> None:
        click.echo(message)

    def success(self, message: str) -> None:
        click.echo(click.style(f"✅ {message}", fg="green"))

    def error(self, message: str) -> None:
        click.echo(click.style(f"🚫 {message}", fg="red"))

    def info(self, message: str) -> None:
        click.echo(click.style(f"ℹ {message}", fg="cyan"))

    def heading(self, message: str) -> None:
        click.echo(click.style(message, fg="magenta", bold=True))
