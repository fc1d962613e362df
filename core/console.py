"""Coloured console output and the timestamped log format."""

from __future__ import annotations

import logging
import time

import click


def blue(text: str) -> str:
    return click.style(text, fg="blue", bold=True)


def yellow(text: str) -> str:
    return click.style(text, fg="yellow", bold=True)


def red(text: str) -> str:
    return click.style(text, fg="red", bold=True)


def print_error(message: str) -> None:
    click.echo(red(message))


class TimestampFormatter(logging.Formatter):
    """Render records as ``[HH:MM:SS] message`` with a UTC clock.

    Warnings and anything more severe are printed in red.
    """

    converter = time.gmtime

    def __init__(self) -> None:
        super().__init__(datefmt="%H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        if record.levelno >= logging.WARNING:
            message = red(message)
        stamp = self.formatTime(record, self.datefmt)
        return f"{yellow('[')}{stamp}{yellow(']')} {message}"


def configure_logging(level: str) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(TimestampFormatter())
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        handlers=[handler],
        force=True,
    )
