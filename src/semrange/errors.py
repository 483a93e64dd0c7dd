"""Error types raised while parsing version ranges.

Every error derives from ``RangeParseError`` so callers can catch the
whole family with one clause.  Errors carry the offending substring and,
where known, the full range text so that the CLI can print an
actionable message.  Parsing never recovers locally: the first error
aborts the whole ``parse_range`` call.
"""
from __future__ import annotations


class RangeParseError(ValueError):
    """Base class for every range parsing failure.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    range_text:
        The complete range string being parsed, if known.
    """

    def __init__(self, message: str, range_text: str = "") -> None:
        self.parse_message = message
        self.range_text = range_text
        super().__init__(self._render())

    def _render(self) -> str:
        if self.range_text:
            return f"{self.parse_message} in range {self.range_text!r}"
        return self.parse_message


class ComparatorSyntaxError(RangeParseError):
    """Raised when a token's operator is not one of the known comparators.

    Parameters
    ----------
    operator:
        The unrecognized operator substring.
    token:
        The comparator token the operator was taken from.
    range_text:
        The complete range string being parsed.
    """

    def __init__(self, operator: str, token: str, range_text: str = "") -> None:
        self.operator = operator
        self.token = token
        super().__init__(
            f"Could not parse comparator {operator!r} in {token!r}", range_text
        )


class VersionSyntaxError(RangeParseError):
    """Raised when a version substring is not a valid version.

    Parameters
    ----------
    version_text:
        The substring that failed to parse.
    range_text:
        The complete range string being parsed; empty when the version
        was parsed on its own.
    reason:
        Optional detail from the underlying version parser.
    """

    def __init__(self, version_text: str, range_text: str = "", reason: str = "") -> None:
        self.version_text = version_text
        self.reason = reason
        message = f"Could not parse version {version_text!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, range_text)


class RangeSyntaxError(RangeParseError):
    """Raised when a range is structurally malformed.

    Covers tokens with no version part (a bare ``-`` or ``>=``) and
    ranges that contain no usable segment at all.
    """


class ArithmeticOverflowError(RangeParseError, OverflowError):
    """Raised when a wildcard expansion would exceed the component limit.

    Parameters
    ----------
    value:
        The value that could not be represented.
    limit:
        The largest representable version component.
    """

    def __init__(self, value: int, limit: int, range_text: str = "") -> None:
        self.value = value
        self.limit = limit
        super().__init__(
            f"Version component {value} exceeds the maximum of {limit}", range_text
        )
