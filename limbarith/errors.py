"""Exceptions raised when parsing or converting big integers."""

from __future__ import annotations

from enum import Enum
from typing import Any


class BigIntErrorKind(Enum):
    """Why a string could not be parsed as a big integer."""

    EMPTY = "cannot parse integer from empty string"
    INVALID_DIGIT = "invalid digit found in string"

    @property
    def description(self) -> str:
        """Human-readable explanation of this kind of failure."""
        return self.value


class ParseBigIntError(ValueError):
    """Raised when text cannot be parsed as a big integer."""

    def __init__(self, kind: BigIntErrorKind) -> None:
        super().__init__(kind.description)
        self.kind = kind

    @classmethod
    def empty(cls) -> ParseBigIntError:
        """Error for an input with no digits at all."""
        return cls(BigIntErrorKind.EMPTY)

    @classmethod
    def invalid(cls) -> ParseBigIntError:
        """Error for an input holding a character that is not a digit."""
        return cls(BigIntErrorKind.INVALID_DIGIT)

    def __str__(self) -> str:
        return self.kind.description

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.name})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseBigIntError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


class TryFromBigIntError(ValueError):
    """Raised when a big integer does not fit the requested target type.

    The value that failed to convert is kept and can be recovered with
    :meth:`into_original`.
    """

    _DESCRIPTION = "out of range conversion regarding big integer attempted"

    def __init__(self, original: Any) -> None:
        super().__init__(self._DESCRIPTION)
        self.original = original

    def into_original(self) -> Any:
        """Return the value whose conversion failed."""
        return self.original

    def __str__(self) -> str:
        return self._DESCRIPTION

    def __repr__(self) -> str:
        return f"{type(self).__name__}(original={self.original!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TryFromBigIntError):
            return NotImplemented
        return self.original == other.original

    def __hash__(self) -> int:
        return hash(self._DESCRIPTION)