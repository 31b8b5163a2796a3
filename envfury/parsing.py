"""
ABOUTME: Text-to-value conversion used by every retrieval function
ABOUTME: Resolves a target type or parser callable into a parse of environment text
"""

from typing import Any, Callable, Dict, TypeVar

from .custom import CustomParse

T = TypeVar("T")

# Exceptions that mean "the text is not a valid T". Anything else is a bug in
# the parser and is left to propagate.
PARSE_ERRORS = (ValueError, ArithmeticError, LookupError)

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


def parse_bool(text: str) -> bool:
    """Parse a boolean flag such as ``true``/``false``, ``1``/``0``, ``yes``/``no``."""
    value = text.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean value: {text!r}")


_BUILTIN_PARSERS: Dict[type, Callable[[str], Any]] = {
    bool: parse_bool,
}


def parse(type_: Callable[[str], T], text: str) -> T:
    """
    Convert text into a value of the requested type.

    Parameters:
        type_: Target type or any callable taking the text. Types exposing a
            ``from_str`` classmethod are parsed through it, ``CustomParse``
            types through ``parse_custom``; ``bool`` uses ``parse_bool``;
            everything else is called with the text.
        text (str): The text to convert.

    Returns:
        The converted value.

    Raises:
        Whatever the underlying conversion raises; see ``PARSE_ERRORS``.
    """
    from_str = getattr(type_, "from_str", None)
    if isinstance(type_, type) and callable(from_str):
        return from_str(text)
    if isinstance(type_, type) and issubclass(type_, CustomParse):
        return type_.parse_custom(text)
    builtin = _BUILTIN_PARSERS.get(type_)
    if builtin is not None:
        return builtin(text)
    return type_(text)
