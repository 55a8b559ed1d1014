"""
Style engine - inline markup to ANSI escape codes

Markup looks like ``hello [red,bold]world[reset]``. A directive lists one or
more style names separated by commas. Prefix a bracket with ``/`` to print
it literally: ``/[x/]`` renders as ``[x]``.
"""

import sys
from types import MappingProxyType

STYLES = MappingProxyType({
    "red": "\033[31;1m",
    "blue": "\033[34;1m",
    "green": "\033[32;1m",
    "yellow": "\033[33;1m",
    "black": "\033[30m",
    "white": "\033[37m",
    "cyan": "\033[36m",
    "magenta": "\033[35m",
    "gray": "\033[30;1m",
    "lightGray": "\033[37;1m",
    "bgWhite": "\033[47m",
    "bgBlack": "\033[40m",
    "bgBlue": "\033[44m",
    "bold": "\033[1m",
    "reset": "\033[0m",
    "underline": "\033[4m",
    "blink": "\033[5m",
    "reverse": "\033[7m",
})

ESCAPE = "/"
OPEN = "["
CLOSE = "]"

_LITERAL = 0
_DIRECTIVE = 1


def resolve(directive: str) -> str:
    """Concatenate the codes for a comma-separated list of style names."""
    return "".join(STYLES.get(name.strip(), "") for name in directive.split(","))


def parse(markup: str) -> str:
    """
    Render markup into text with raw escape codes.

    Unknown style names render as nothing. An unterminated directive is
    dropped, and an ``[`` inside a directive restarts it.
    """
    out = []
    directive = []
    state = _LITERAL
    i = 0
    length = len(markup)

    while i < length:
        char = markup[i]
        if state == _LITERAL:
            if char == ESCAPE and i + 1 < length and markup[i + 1] in (OPEN, CLOSE):
                out.append(markup[i + 1])
                i += 2
                continue
            if char == OPEN:
                directive = []
                state = _DIRECTIVE
            elif char != CLOSE:
                out.append(char)
        else:
            if char == OPEN:
                directive = []
            elif char == CLOSE:
                out.append(resolve("".join(directive)))
                state = _LITERAL
            else:
                directive.append(char)
        i += 1

    return "".join(out)


def escape(text: str) -> str:
    """Make arbitrary text safe to embed in markup."""
    return text.replace(OPEN, ESCAPE + OPEN).replace(CLOSE, ESCAPE + CLOSE)


def print_markup(markup: str) -> None:
    sys.stdout.write(parse(markup))
    sys.stdout.flush()


def println(markup: str) -> None:
    sys.stdout.write(parse(markup) + "\n")
    sys.stdout.flush()
