"""Line-oriented console input and output."""

import sys
from typing import Optional, TextIO

import click


class Console:
    """Reads answers one line at a time and writes text through click.

    Args:
        input_stream: Stream to read answers from. Defaults to sys.stdin
            as it is when the console is created.
    """

    def __init__(self, input_stream: Optional[TextIO] = None) -> None:
        self.input_stream = input_stream or sys.stdin

    def echo(self, message: str = "", nl: bool = True) -> None:
        click.echo(message, nl=nl)

    def prompt(self, message: str, nl: bool = False) -> str:
        """Write a prompt and read the answer line without its line ending.

        Raises:
            EOFError: If the input has no more lines
        """
        self.echo(message, nl=nl)
        line = self.input_stream.readline()
        if not line:
            raise EOFError("No more console input")
        return line.rstrip("\r\n")
