"""Range parser: the ``parse_range`` entry point.

Splits a range on ``||`` (with any surrounding whitespace), normalizes
each non-empty segment, builds each into an ``And`` group and returns
the groups as one ``Or``::

    >1.0.0 <2.0.0 || >=3.0.0
        → Or(And(>1.0.0, <2.0.0), And(>=3.0.0))

AND binds tighter than OR and there is no grouping syntax.  Any error
aborts the whole parse; no partial range is returned.
"""
from __future__ import annotations

import dataclasses
import logging

from semrange.ast.nodes import And, Or
from semrange.config import DEFAULT_CONFIG, RangeConfig
from semrange.errors import ArithmeticOverflowError, RangeParseError, RangeSyntaxError
from semrange.grammar import Grammar, PatternName, default_grammar
from semrange.normalizer import Normalizer
from semrange.parser.builder import build

logger = logging.getLogger(__name__)


class RangeParser:
    """Parses range strings into ``Or``-of-``And`` expression trees.

    Parameters
    ----------
    config:
        Parsing configuration shared by the normalizer and the builder.
    grammar:
        Compiled grammar.  Defaults to the shared process-wide grammar.
    """

    __slots__ = ("_config", "_grammar", "_normalizer")

    def __init__(
        self, config: RangeConfig | None = None, grammar: Grammar | None = None
    ) -> None:
        self._config: RangeConfig = config or DEFAULT_CONFIG
        self._grammar: Grammar = grammar or default_grammar()
        self._normalizer = Normalizer(self._config, self._grammar)

    def split(self, raw: str) -> list[str]:
        """Return the non-empty OR-segments of ``raw``, trimmed."""
        segments = self._grammar.split(PatternName.OR_SEPARATOR, " ".join(raw.split()))
        return [s.strip() for s in segments if s.strip()]

    def normalize(self, raw: str) -> list[list[str]]:
        """Return the canonical comparator tokens of every OR-segment.

        Raises
        ------
        RangeSyntaxError
            If ``raw`` has no usable segment.
        ArithmeticOverflowError
            If a wildcard expansion overflows.
        """
        segments = self.split(raw)
        if not segments:
            raise RangeSyntaxError("Range contains no comparators", raw)
        try:
            return [self._normalizer.normalize(segment) for segment in segments]
        except ArithmeticOverflowError as exc:
            if exc.range_text:
                raise
            raise ArithmeticOverflowError(exc.value, exc.limit, raw) from exc

    def parse(self, raw: str) -> Or:
        """Parse ``raw`` into a range.

        Raises
        ------
        RangeSyntaxError
            If ``raw`` has no usable segment, or a token has no version.
        ComparatorSyntaxError
            If a token carries an unknown operator.
        VersionSyntaxError
            If a token's version does not parse.
        ArithmeticOverflowError
            If a wildcard expansion overflows.
        """
        token_groups = self.normalize(raw)
        logger.debug("range %r segments: %s", raw, token_groups)

        groups: list[And] = [build(tokens, raw, self._config) for tokens in token_groups]
        result = Or(tuple(groups))
        logger.debug("range %r parsed as %s", raw, result)
        return result


def parse_range(
    raw: str, config: RangeConfig | None = None, *, loose: bool | None = None
) -> Or:
    """Parse a range string into an ``Or``-of-``And`` expression tree.

    Parameters
    ----------
    raw:
        The range, for example ``"^1.2.3 || >=3.0.0 <4.0.0"``.
    config:
        Parsing configuration.  Defaults to ``DEFAULT_CONFIG``.
    loose:
        Shortcut overriding ``config.loose``.

    Raises
    ------
    RangeParseError
        Any subclass, on malformed input.
    """
    config = config or DEFAULT_CONFIG
    if loose is not None and loose != config.loose:
        config = dataclasses.replace(config, loose=loose)
    return RangeParser(config).parse(raw)


def must_parse_range(
    raw: str, config: RangeConfig | None = None, *, loose: bool | None = None
) -> Or:
    """Parse a range, terminating the process if it is malformed.

    Meant for ranges in static configuration where a parse failure is a
    fatal startup error.

    Raises
    ------
    SystemExit
        If ``raw`` cannot be parsed.
    """
    try:
        return parse_range(raw, config, loose=loose)
    except RangeParseError as exc:
        logger.critical("parse_range(%r) failed: %s", raw, exc)
        raise SystemExit(f"semrange: parse_range({raw!r}): {exc}") from exc
