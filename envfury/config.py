"""
ABOUTME: Environment variable configuration utilities
ABOUTME: Provides typed retrieval of environment variables with structured errors
"""

import logging
import os
from typing import Callable, Mapping, Optional, TypeVar, Union

from .exceptions import Error, NonUnicode, NotSet, Parse, ParseDefault, Value
from .parsing import PARSE_ERRORS, parse

logger = logging.getLogger(__name__)

T = TypeVar("T")

Environ = Mapping[str, Union[str, bytes]]

_missing = object()


def _read(key: str, env: Optional[Environ]) -> Optional[str]:
    """
    Read the raw text of ``key`` from the environment source.

    Returns None when the variable is absent. Raises Error(NonUnicode) when the
    value cannot be represented as text: undecodable OS values show up in
    ``os.environ`` as lone surrogates, and raw ``bytes`` values must be UTF-8.
    """
    source = os.environ if env is None else env
    raw = source.get(key)
    if raw is None:
        return None
    try:
        if isinstance(raw, bytes):
            return raw.decode("utf-8")
        raw.encode("utf-8")
    except UnicodeError as e:
        logger.debug(f"Environment variable {key} is not valid unicode")
        raise Error(key, NonUnicode()) from e
    return raw


def _lookup(type_: Callable[[str], T], key: str, env: Optional[Environ]) -> object:
    """Parse ``key`` as ``type_``, returning ``_missing`` when it is not set."""
    text = _read(key, env)
    if text is None:
        logger.debug(f"Environment variable {key} is not set")
        return _missing
    try:
        return parse(type_, text)
    except PARSE_ERRORS as e:
        logger.debug(
            f"Environment variable {key} could not be parsed: {type(e).__name__}"
        )
        raise Error(key, Parse(e)) from e


def maybe(
    type_: Callable[[str], T], key: str, *, env: Optional[Environ] = None
) -> Optional[T]:
    """
    Get environment variable ``key`` parsed as ``type_`` if it is set.

    Parameters:
        type_: Target type or parser callable, e.g. ``int`` or ``Custom[int]``.
        key (str): Name of the environment variable.
        env (Mapping, optional): Environment source. Defaults to ``os.environ``.

    Returns:
        The parsed value, or None if the variable is not set.

    Raises:
        Error: With reason NonUnicode if the value is not valid text, or
            Parse if the value could not be parsed.
    """
    value = _lookup(type_, key, env)
    return None if value is _missing else value


def must(type_: Callable[[str], T], key: str, *, env: Optional[Environ] = None) -> T:
    """
    Get required environment variable ``key`` parsed as ``type_``.

    Raises:
        Error: With reason NotSet if the variable is not set, or Value wrapping
            the reason reported by ``maybe``.
    """
    try:
        value = _lookup(type_, key, env)
    except Error as e:
        raise e.map_reason(Value) from e.__cause__
    if value is _missing:
        raise Error(key, NotSet())
    return value


def or_(
    type_: Callable[[str], T], key: str, default: T, *, env: Optional[Environ] = None
) -> T:
    """
    Get environment variable ``key`` parsed as ``type_``, or ``default`` if it is not set.

    Errors from ``maybe`` propagate unchanged.
    """
    value = _lookup(type_, key, env)
    if value is _missing:
        return default
    return value


def or_else(
    type_: Callable[[str], T],
    key: str,
    default: Callable[[], T],
    *,
    env: Optional[Environ] = None,
) -> T:
    """
    Get environment variable ``key`` parsed as ``type_``, or ``default()`` if it is not set.

    ``default`` is only called when the variable is not set.
    """
    value = _lookup(type_, key, env)
    if value is _missing:
        return default()
    return value


def or_parse(
    type_: Callable[[str], T],
    key: str,
    default: object,
    *,
    env: Optional[Environ] = None,
) -> T:
    """
    Get environment variable ``key`` parsed as ``type_``, or parse ``default`` if it is not set.

    The default is given as text, in the same form as the variable itself.

    Raises:
        Error: With reason Value wrapping the reason reported by ``maybe``, or
            ParseDefault if the variable is not set and ``default`` could not
            be parsed.
    """
    try:
        value = _lookup(type_, key, env)
    except Error as e:
        raise e.map_reason(Value) from e.__cause__
    if value is not _missing:
        return value
    try:
        return parse(type_, str(default))
    except PARSE_ERRORS as e:
        logger.debug(
            f"Default for {key} could not be parsed: {type(e).__name__}"
        )
        raise Error(key, ParseDefault(e)) from e
