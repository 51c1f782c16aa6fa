"""
utils/choice_parser.py
----------------------
Parses the text of a reply-keyboard button back into its key.

Keyboard rows carry a decorative label after a `-->` separator:
    "es --> Español"
    "/delete BQACAgIAAxk --> report.pdf"
The key is whatever precedes the first separator. A message typed by hand
without the separator is taken as the key in its entirety.
"""

from dataclasses import dataclass
from typing import Union

SEPARATOR = "-->"


@dataclass(frozen=True)
class Choice:
    key: str
    label: str


@dataclass(frozen=True)
class NoSeparator:
    whole: str

    @property
    def key(self) -> str:
        return self.whole


ParsedChoice = Union[Choice, NoSeparator]


def parse_choice(text: str) -> ParsedChoice:
    """
    Split `text` on the first `-->` and trim both sides.

    Examples:
        >>> parse_choice("es --> Español")
        Choice(key='es', label='Español')
        >>> parse_choice("  es  ")
        NoSeparator(whole='es')
    """
    key, sep, label = text.partition(SEPARATOR)
    if not sep:
        return NoSeparator(text.strip())
    return Choice(key.strip(), label.strip())


def format_choice(key: str, label: str) -> str:
    """Build the keyboard text that parse_choice() reads back."""
    return f"{key} {SEPARATOR} {label}"
