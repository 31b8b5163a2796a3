"""
ABOUTME: Error taxonomy for environment variable retrieval
ABOUTME: Provides the Error exception and the reason types that classify each failure
"""

from dataclasses import dataclass
from typing import Callable


class ConfigError(Exception):
    """Configuration error raised by envfury."""

    pass


class Reason:
    """Base class for every failure reason carried by an Error."""

    __slots__ = ()


class ValueReason(Reason):
    """A value was found but could not be interpreted."""

    __slots__ = ()


class MustReason(Reason):
    """Failure of a required variable lookup."""

    __slots__ = ()


class OrParseReason(Reason):
    """Failure of a lookup whose default is given as text."""

    __slots__ = ()


@dataclass(frozen=True)
class NonUnicode(ValueReason):
    """The value is not valid text."""

    def __str__(self) -> str:
        return "value is not a valid unicode"


@dataclass(frozen=True)
class Parse(ValueReason):
    """The value could not be parsed."""

    error: BaseException

    def __str__(self) -> str:
        return f"unable to parse: {self.error}"


@dataclass(frozen=True)
class NotSet(MustReason):
    """The variable was not set."""

    def __str__(self) -> str:
        return "not set"


@dataclass(frozen=True)
class Value(MustReason, OrParseReason):
    """A value reason lifted into a richer reason type."""

    reason: ValueReason

    def __str__(self) -> str:
        return str(self.reason)


@dataclass(frozen=True)
class ParseDefault(OrParseReason):
    """The textual default could not be parsed while the variable was not set."""

    error: BaseException

    def __str__(self) -> str:
        return (
            "unable to parse the default value while the variable was not set: "
            f"{self.error}"
        )


class Error(ConfigError):
    """Error reading an environment variable.

    Always pairs the variable name with exactly one reason. Higher level
    lookups re-wrap the reason with ``map_reason`` so the key and the
    original cause survive.
    """

    def __init__(self, key: str, reason: Reason):
        if not isinstance(reason, Reason):
            raise TypeError(f"reason must be a Reason, got {type(reason).__name__}")
        super().__init__(key, reason)
        self.key = key
        self.reason = reason

    def __str__(self) -> str:
        return f"error reading {self.key} env var: {self.reason}"

    def __repr__(self) -> str:
        return f"Error(key={self.key!r}, reason={self.reason!r})"

    def map_reason(self, fn: Callable[[Reason], Reason]) -> "Error":
        """Return a new Error for the same key with ``fn(reason)`` as its reason."""
        err = Error(self.key, fn(self.reason))
        err.__cause__ = self.__cause__
        return err
