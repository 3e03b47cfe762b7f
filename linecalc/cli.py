"""
Command-line interface for linecalc.

Reads one line (from stdin or the EXPRESSION argument), runs it through
the lexer, parser and evaluator, and prints ``Result: <value>``. The first
error is printed as ``Error: <message>`` on stderr with exit status 1.

Author: xwest
"""

import logging
import sys
from typing import Optional, TextIO

import click

from linecalc import __version__
from linecalc.lexer import lex, CalculatorError, SourceLocation, UnsupportedCharacterError
from linecalc.parser import parse, format_number
from linecalc.evaluator import evaluate

logger = logging.getLogger("linecalc")


def read_line(stream: TextIO) -> str:
    """
    Read a single line, guaranteeing it ends with a newline.

    The lexer only emits the final number and END on a newline, so a
    stream that ends without one (or is empty) gets it appended here.
    """
    return ensure_newline(stream.readline())


def ensure_newline(line: str) -> str:
    if line.endswith("\n"):
        return line
    return line + "\n"


def check_single_line(line: str, filename: str) -> None:
    """Reject a line break anywhere but the very end of ``line``."""
    newline = line.find("\n")
    if 0 <= newline < len(line) - 1:
        raise UnsupportedCharacterError("\n", SourceLocation(filename, 1, newline + 1, newline))


def calculate(line: str, filename: str = "<stdin>") -> float:
    """Run the pipeline over one line, logging the intermediate forms."""
    tokens = lex(line, filename)
    logger.debug("Tokens: [%s]", ", ".join(str(token) for token in tokens))

    expression = parse(tokens)
    logger.debug("Expression tree: %s", expression)
    logger.debug("Expression repr: %r", expression)

    return evaluate(expression)


@click.command()
@click.version_option(version=__version__)
@click.argument("expression", required=False)
@click.option("--debug", "-d", is_flag=True, help="Log the token list and expression tree to stderr")
def main(expression: Optional[str], debug: bool) -> None:
    """Evaluate one line of arithmetic: numbers with + - * /.

    Reads the line from standard input unless EXPRESSION is given.
    """
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    if expression is None:
        line = read_line(sys.stdin)
        filename = "<stdin>"
    else:
        line = ensure_newline(expression)
        filename = "<argument>"

    try:
        check_single_line(line, filename)
        result = calculate(line, filename)
    except CalculatorError as e:
        logger.debug("Diagnostic:\n%s", e.diagnostic)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Result: {format_number(result)}")


if __name__ == "__main__":
    main()
