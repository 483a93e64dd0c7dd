"""Range normalizer: rewrites shorthand range syntax into plain comparators.

A single OR-group (no ``||``) is pushed through a fixed pipeline:

1. hyphen ranges     ``1.2 - 3.4``   → ``>=1.2.0 <3.5.0``
2. whitespace trim   ``> 1.2.3``     → ``>1.2.3``, ``~ 1.2`` → ``~1.2``
3. per token, in order:
   carets            ``^1.2.3``      → ``>=1.2.3 <2.0.0``
   tildes            ``~1.2.3``      → ``>=1.2.3 <1.3.0``
   x-ranges          ``1.2.x``       → ``>=1.2.0 <1.3.0``
   stars             ``*``           → ``>=0.0.0``
4. the result is split on whitespace into canonical comparator tokens.

Every stage is exposed as a public method so it can be exercised on its
own; each is a no-op on input that does not have its shape.

A position is a *wildcard* when it is ``x``, ``X``, ``*`` or absent
(``1.2`` has a wildcard patch).  Upper bounds for wildcards are produced
by incrementing the next position up; increments are checked against
``RangeConfig.max_component``.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from string import whitespace

from semrange.config import DEFAULT_CONFIG, RangeConfig
from semrange.errors import ArithmeticOverflowError
from semrange.grammar import Grammar, PatternName, default_grammar

logger = logging.getLogger(__name__)

_WILDCARDS = frozenset({"", "x", "X", "*"})
_VERSION_PREFIX = "v=" + whitespace


def is_wildcard(part: str | None) -> bool:
    """Return True if a version position is unconstrained."""
    return part is None or part in _WILDCARDS


def increment(part: str, limit: int = DEFAULT_CONFIG.max_component) -> str:
    """Return the decimal text of ``int(part) + 1``.

    Raises
    ------
    ArithmeticOverflowError
        If the result would be larger than ``limit``.
    """
    value = int(part) + 1
    if value > limit:
        raise ArithmeticOverflowError(value, limit)
    return str(value)


class Normalizer:
    """Rewrites one range segment into canonical comparator tokens.

    Parameters
    ----------
    config:
        Parsing configuration; selects strict or loose patterns and the
        increment limit.
    grammar:
        Compiled grammar to match against.  Defaults to the shared
        process-wide grammar.
    """

    __slots__ = ("_config", "_grammar")

    def __init__(
        self, config: RangeConfig | None = None, grammar: Grammar | None = None
    ) -> None:
        self._config: RangeConfig = config or DEFAULT_CONFIG
        self._grammar: Grammar = grammar or default_grammar()

    @property
    def config(self) -> RangeConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def normalize(self, segment: str) -> list[str]:
        """Normalize one OR-group into its comparator tokens.

        Parameters
        ----------
        segment:
            A range expression without ``||``.

        Returns
        -------
        list[str]
            Comparator tokens in source order, such as ``[">=1.2.0",
            "<1.3.0"]``.  Empty for an empty segment.

        Raises
        ------
        ArithmeticOverflowError
            If a wildcard expansion overflows.
        """
        text = self.expand_hyphen(" ".join(segment.split()))
        logger.debug("hyphen expansion: %r -> %r", segment, text)
        text = self.trim_whitespace(text)
        logger.debug("whitespace trim: %r", text)

        expanded = [self._expand_token(token) for token in text.split(" ")]
        tokens = " ".join(expanded).split()
        logger.debug("normalized %r -> %s", segment, tokens)
        return tokens

    def expand_hyphen(self, text: str) -> str:
        """Rewrite a whole-segment hyphen range into two bounds.

        ``1.2 - 3.4.5`` becomes ``>=1.2.0 <=3.4.5`` and ``1.2.3 - 3.4``
        becomes ``>=1.2.3 <3.5.0``.  A wildcard major on either side
        drops that bound entirely.
        """
        match = self._grammar.match(PatternName.HYPHEN_RANGE, text, self._config.loose)
        if match is None:
            return text
        groups = match.groups(default="")
        from_text, from_major, from_minor, from_patch = groups[0:4]
        to_text, to_major, to_minor, to_patch, to_prerelease = groups[6:11]

        if is_wildcard(from_major):
            lower = ""
        elif is_wildcard(from_minor):
            lower = f">={from_major}.0.0"
        elif is_wildcard(from_patch):
            lower = f">={from_major}.{from_minor}.0"
        else:
            lower = f">={from_text.lstrip(_VERSION_PREFIX)}"

        if is_wildcard(to_major):
            upper = ""
        elif is_wildcard(to_minor):
            upper = f"<{self._increment(to_major)}.0.0"
        elif is_wildcard(to_patch):
            upper = f"<{to_major}.{self._increment(to_minor)}.0"
        elif to_prerelease:
            upper = f"<={to_major}.{to_minor}.{to_patch}-{to_prerelease}"
        else:
            upper = f"<={to_text.lstrip(_VERSION_PREFIX)}"

        return f"{lower} {upper}".strip()

    def trim_whitespace(self, text: str) -> str:
        """Attach operators to their operands and collapse whitespace.

        Whitespace runs are collapsed before any pattern runs; the trim
        patterns stay linear only on single-space separators.
        """
        text = " ".join(text.split())
        text = self._grammar.sub(PatternName.COMPARATOR_TRIM, r"\1\2\3", text)
        text = self._grammar.sub(PatternName.TILDE_TRIM, r"\1~", text)
        text = self._grammar.sub(PatternName.CARET_TRIM, r"\1^", text)
        return " ".join(text.split())

    def expand_carets(self, text: str) -> str:
        """Expand every ``^`` token in a space-separated string.

        ``^1.2.3`` allows changes that do not modify the left-most
        non-zero position: ``>=1.2.3 <2.0.0``, ``^0.2.3`` is
        ``>=0.2.3 <0.3.0`` and ``^0.0.3`` is ``>=0.0.3 <0.0.4``.
        """
        return self._each_token(text, self._expand_caret)

    def expand_tildes(self, text: str) -> str:
        """Expand every ``~``/``~>`` token in a space-separated string.

        ``~1.2.3`` allows patch-level changes: ``>=1.2.3 <1.3.0``.
        """
        return self._each_token(text, self._expand_tilde)

    def expand_xranges(self, text: str) -> str:
        """Expand every x-range token in a space-separated string."""
        return self._each_token(text, self._expand_xrange)

    def expand_stars(self, text: str) -> str:
        """Rewrite every star token (``*``, ``>=*``) to ``>=0.0.0``."""
        return self._each_token(text, self._expand_star)

    # ------------------------------------------------------------------
    # Token expansions
    # ------------------------------------------------------------------

    def _expand_token(self, token: str) -> str:
        text = self.expand_carets(token)
        text = self.expand_tildes(text)
        text = self.expand_xranges(text)
        return self.expand_stars(text)

    def _expand_caret(self, token: str) -> str:
        match = self._grammar.match(PatternName.CARET, token, self._config.loose)
        if match is None:
            return token
        major, minor, patch, prerelease = match.groups(default="")[0:4]

        if is_wildcard(major):
            return "*"
        if is_wildcard(minor):
            return f">={major}.0.0 <{self._increment(major)}.0.0"
        if is_wildcard(patch):
            if int(major) == 0:
                return f">={major}.{minor}.0 <{major}.{self._increment(minor)}.0"
            return f">={major}.{minor}.0 <{self._increment(major)}.0.0"

        lower = f">={major}.{minor}.{patch}"
        if prerelease:
            lower = f"{lower}-{prerelease}"
        if int(major) == 0:
            if int(minor) == 0:
                upper = f"<{major}.{minor}.{self._increment(patch)}"
            else:
                upper = f"<{major}.{self._increment(minor)}.0"
        else:
            upper = f"<{self._increment(major)}.0.0"
        return f"{lower} {upper}"

    def _expand_tilde(self, token: str) -> str:
        match = self._grammar.match(PatternName.TILDE, token, self._config.loose)
        if match is None:
            return token
        major, minor, patch, prerelease = match.groups(default="")[0:4]

        if is_wildcard(major):
            return "*"
        if is_wildcard(minor):
            return f">={major}.0.0 <{self._increment(major)}.0.0"
        if is_wildcard(patch):
            return f">={major}.{minor}.0 <{major}.{self._increment(minor)}.0"

        lower = f">={major}.{minor}.{patch}"
        if prerelease:
            lower = f"{lower}-{prerelease}"
        return f"{lower} <{major}.{self._increment(minor)}.0"

    def _expand_xrange(self, token: str) -> str:
        match = self._grammar.match(PatternName.XRANGE, token, self._config.loose)
        if match is None:
            return token
        operator, major, minor, patch = match.groups(default="")[0:4]

        major_x = is_wildcard(major)
        minor_x = major_x or is_wildcard(minor)
        any_x = minor_x or is_wildcard(patch)

        if operator == "=" and any_x:
            operator = ""

        if major_x:
            # a strict bound against "any version" admits nothing
            if operator in (">", "<"):
                return "<0.0.0"
            return "*"

        if operator and any_x:
            if minor_x:
                minor = "0"
            patch = "0"
            if operator == ">":
                # >1 => >=2.0.0, >1.2 => >=1.3.0
                operator = ">="
                if minor_x:
                    major = self._increment(major)
                    minor = "0"
                else:
                    minor = self._increment(minor)
            elif operator == "<=":
                # <=0.7.x is <0.8.0, <=7.x is <8.0.0
                operator = "<"
                if minor_x:
                    major = self._increment(major)
                else:
                    minor = self._increment(minor)
            return f"{operator}{major}.{minor}.{patch}"

        if minor_x:
            return f">={major}.0.0 <{self._increment(major)}.0.0"
        if any_x:
            return f">={major}.{minor}.0 <{major}.{self._increment(minor)}.0"
        return token

    def _expand_star(self, token: str) -> str:
        if self._grammar.test(PatternName.STAR, token):
            return ">=0.0.0"
        return token

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _increment(self, part: str) -> str:
        return increment(part, self._config.max_component)

    @staticmethod
    def _each_token(text: str, expand: Callable[[str], str]) -> str:
        return " ".join(expand(token) for token in text.strip().split())


def normalize(segment: str, config: RangeConfig | None = None) -> list[str]:
    """Normalize one OR-group with a throwaway ``Normalizer``."""
    return Normalizer(config).normalize(segment)
