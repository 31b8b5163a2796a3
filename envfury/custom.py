"""
ABOUTME: Custom parsing overrides for types without a suitable text conversion
ABOUTME: Provides the CustomParse interface, the override registry and the Custom wrapper
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict

logger = logging.getLogger(__name__)

_OVERRIDES: Dict[Any, Callable[[str], Any]] = {}
_SPECIALIZED: Dict[Any, type] = {}


class CustomParse(ABC):
    """Interface for types that provide their own parsing of environment text."""

    @classmethod
    @abstractmethod
    def parse_custom(cls, text: str) -> Any:
        """
        Convert environment text into an instance of the implementing type.

        Implementations signal invalid text by raising ``ValueError``, ``KeyError``
        or another exception from ``envfury.parsing.PARSE_ERRORS``.
        """
        pass


def register(type_: Any) -> Callable[[Callable[[str], Any]], Callable[[str], Any]]:
    """
    Register a parsing override for a type you cannot modify.

    Example:
        @register(int)
        def one_or_two(text):
            if text == "one":
                return 1
            if text == "two":
                return 2
            raise ValueError('not "one" or "two"')

        value = must(Custom[int], "MY_ONE_OR_TWO").value
    """

    def decorator(fn: Callable[[str], Any]) -> Callable[[str], Any]:
        if type_ in _OVERRIDES:
            logger.warning(f"Replacing custom parser for {_type_name(type_)}")
        _OVERRIDES[type_] = fn
        logger.debug(f"Registered custom parser for {_type_name(type_)}")
        return fn

    return decorator


def unregister(type_: Any) -> None:
    """Remove the parsing override registered for ``type_``.

    Raises:
        KeyError: If no override is registered for ``type_``.
    """
    del _OVERRIDES[type_]


def parse_custom(type_: Any, text: str) -> Any:
    """Parse text with the override for ``type_``, raising TypeError when there is none."""
    if isinstance(type_, type) and issubclass(type_, CustomParse):
        return type_.parse_custom(text)
    override = _OVERRIDES.get(type_)
    if override is None:
        raise TypeError(f"no custom parser registered for {_type_name(type_)}")
    return override(text)


class Custom:
    """
    Wrapper that routes parsing of ``T`` through its custom override.

    ``Custom[T]`` is a parser for the retrieval functions; the parsed result is
    a ``Custom`` instance holding the value in ``.value``.
    """

    __slots__ = ("value",)
    __match_args__ = ("value",)

    _target: Any = None

    def __init__(self, value: Any):
        self.value = value

    def __class_getitem__(cls, target: Any) -> type:
        if cls._target is not None:
            raise TypeError(f"{cls.__name__} is already specialized")
        if target is None:
            raise TypeError("Custom cannot be specialized with None")
        specialized = _SPECIALIZED.get(target)
        if specialized is None:
            specialized = type(
                f"Custom[{_type_name(target)}]",
                (cls,),
                {"__slots__": (), "_target": target, "__module__": cls.__module__},
            )
            _SPECIALIZED[target] = specialized
        return specialized

    @classmethod
    def from_str(cls, text: str) -> "Custom":
        """Parse text through the override of the wrapped type."""
        if cls._target is None:
            raise TypeError("Custom must be specialized with a type, e.g. Custom[int]")
        return cls(parse_custom(cls._target, text))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Custom):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"Custom({self.value!r})"


def _type_name(type_: Any) -> str:
    return getattr(type_, "__qualname__", repr(type_))
