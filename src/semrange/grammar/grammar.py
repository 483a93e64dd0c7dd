"""Compiled grammar for version-range expressions.

The ``Grammar`` object compiles every source in
``semrange.grammar.patterns.PATTERN_SOURCES`` once and exposes them by
``PatternName``.  It is read-only after construction, so a single
instance is shared by the whole process via ``default_grammar()``,
which builds it on first use.

The accepted surface syntax is documented below in EBNF-style notation
(``RANGE_GRAMMAR``).  It is reference documentation only; recognition
is done with the compiled patterns.

Grammar notation used here:
    ``::=``     production rule
    ``|``       alternation
    ``( )``     grouping
    ``[ ]``     optional (zero or one)
    ``{ }``     zero or more repetitions
"""
from __future__ import annotations

import functools
import re
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from semrange.grammar.patterns import LOOSE_VARIANTS, PATTERN_SOURCES, PatternName

RANGE_GRAMMAR = """
range_set  ::= range { logical_or range }
logical_or ::= { ' ' } '||' { ' ' }
range      ::= hyphen | simple { ' ' simple } | ''
hyphen     ::= partial ' - ' partial
simple     ::= primitive | partial | tilde | caret
primitive  ::= ( '<' | '>' | '>=' | '<=' | '=' | '!=' ) partial
partial    ::= xr [ '.' xr [ '.' xr [ qualifier ] ] ]
xr         ::= 'x' | 'X' | '*' | nr
nr         ::= '0' | ['1'-'9'] { ['0'-'9'] }
tilde      ::= ( '~' | '~>' ) partial
caret      ::= '^' partial
qualifier  ::= [ '-' pre ] [ '+' build ]
pre        ::= parts
build      ::= parts
parts      ::= part { '.' part }
part       ::= nr | [-0-9A-Za-z]+
"""


class Grammar:
    """Read-only table of compiled range-grammar patterns.

    Parameters
    ----------
    sources:
        Mapping from pattern name to regular-expression source.  Defaults
        to the built-in ``PATTERN_SOURCES``.
    """

    __slots__ = ("_patterns",)

    def __init__(self, sources: Mapping[PatternName, str] | None = None) -> None:
        table = PATTERN_SOURCES if sources is None else sources
        self._patterns: Mapping[PatternName, re.Pattern[str]] = MappingProxyType(
            {name: re.compile(text, re.ASCII) for name, text in table.items()}
        )

    def __contains__(self, name: object) -> bool:
        return name in self._patterns

    def __iter__(self) -> Iterator[PatternName]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def pattern(self, name: PatternName, loose: bool = False) -> re.Pattern[str]:
        """Return the compiled pattern for ``name``.

        When ``loose`` is true and ``name`` has a loose variant, the loose
        variant is returned instead.

        Raises
        ------
        KeyError
            If ``name`` is not part of this grammar.
        """
        if loose:
            name = LOOSE_VARIANTS.get(name, name)
        return self._patterns[name]

    def match(
        self, name: PatternName, text: str, loose: bool = False
    ) -> re.Match[str] | None:
        """Test ``text`` against a named pattern and return the capture.

        Anchored patterns (``XRANGE``, ``TILDE``, ...) carry their own
        ``^``/``$`` so this is a plain search.
        """
        return self.pattern(name, loose).search(text)

    def test(self, name: PatternName, text: str, loose: bool = False) -> bool:
        """Return True if ``text`` matches the named pattern."""
        return self.match(name, text, loose) is not None

    def sub(self, name: PatternName, replacement: str, text: str) -> str:
        """Replace every match of a named pattern in ``text``."""
        return self._patterns[name].sub(replacement, text)

    def split(self, name: PatternName, text: str) -> list[str]:
        """Split ``text`` on every match of a named pattern."""
        return self._patterns[name].split(text)


@functools.cache
def default_grammar() -> Grammar:
    """Return the process-wide grammar, compiling it on first use."""
    return Grammar()
