"""Post-processing strategies applied to raw generated prompts."""

from typing import Callable, Dict
from src.models.prompt import ResponseFormat

Formatter = Callable[[str], str]


def identity(response: str) -> str:
    """Return the response unchanged; structure is enforced by the instructions."""
    return response


def strip_quotes_and_trim(response: str) -> str:
    """
    Remove one leading and one trailing double quote, then surrounding whitespace.
    Quotes are only removed at the very start/end of the raw string.
    """
    if response.startswith('"'):
        response = response[1:]
    if response.endswith('"'):
        response = response[:-1]
    return response.strip()


FORMATTERS: Dict[ResponseFormat, Formatter] = {
    ResponseFormat.IDENTITY: identity,
    ResponseFormat.STRIP_QUOTES_AND_TRIM: strip_quotes_and_trim,
}


def apply_format(strategy: ResponseFormat, response: str) -> str:
    """Run the named strategy over a raw model response."""
    return FORMATTERS[ResponseFormat(strategy)](response)
