"""Unit tests for semrange.grammar: pattern sources, loose variants and
the compiled ``Grammar`` table.
"""
from __future__ import annotations

import pytest

from semrange.grammar import (
    LOOSE_VARIANTS,
    PATTERN_SOURCES,
    RANGE_GRAMMAR,
    Grammar,
    PatternName,
    default_grammar,
)


@pytest.fixture()
def grammar() -> Grammar:
    return default_grammar()


# ---------------------------------------------------------------------------
# Pattern table
# ---------------------------------------------------------------------------


class TestPatternSources:
    def test_every_name_has_a_source(self) -> None:
        assert set(PATTERN_SOURCES) == set(PatternName)

    def test_loose_variants_map_to_loose_names(self) -> None:
        for strict, loose in LOOSE_VARIANTS.items():
            assert strict in PATTERN_SOURCES
            assert loose in PATTERN_SOURCES
            assert strict is not loose

    def test_range_grammar_documents_range_set(self) -> None:
        assert "range_set" in RANGE_GRAMMAR
        assert "caret" in RANGE_GRAMMAR


# ---------------------------------------------------------------------------
# Grammar object
# ---------------------------------------------------------------------------


class TestGrammar:
    def test_default_grammar_is_shared(self) -> None:
        assert default_grammar() is default_grammar()

    def test_contains_all_names(self, grammar: Grammar) -> None:
        assert len(grammar) == len(PatternName)
        for name in PatternName:
            assert name in grammar

    def test_iter_yields_pattern_names(self, grammar: Grammar) -> None:
        assert set(grammar) == set(PatternName)

    def test_loose_flag_selects_loose_variant(self, grammar: Grammar) -> None:
        assert grammar.pattern(PatternName.XRANGE, loose=True) is grammar.pattern(
            PatternName.XRANGE_LOOSE
        )

    def test_loose_flag_ignored_without_variant(self, grammar: Grammar) -> None:
        assert grammar.pattern(PatternName.STAR, loose=True) is grammar.pattern(
            PatternName.STAR
        )

    def test_custom_sources(self) -> None:
        custom = Grammar({PatternName.STAR: r"^\*$"})
        assert len(custom) == 1
        assert custom.test(PatternName.STAR, "*")
        with pytest.raises(KeyError):
            custom.pattern(PatternName.XRANGE)


# ---------------------------------------------------------------------------
# Individual patterns
# ---------------------------------------------------------------------------


class TestFullVersion:
    @pytest.mark.parametrize(
        "text",
        ["1.2.3", "v1.2.3", "0.0.0", "1.2.3-beta.1", "1.2.3+build.5", "1.2.3-rc.1+sha.abc"],
    )
    def test_valid(self, grammar: Grammar, text: str) -> None:
        assert grammar.test(PatternName.FULL, text)

    @pytest.mark.parametrize("text", ["1.2", "01.2.3", "1.2.3beta", "a.b.c", ""])
    def test_invalid(self, grammar: Grammar, text: str) -> None:
        assert not grammar.test(PatternName.FULL, text)

    def test_groups(self, grammar: Grammar) -> None:
        match = grammar.match(PatternName.FULL, "1.2.3-beta.1+build.5")
        assert match is not None
        assert match.groups() == ("1", "2", "3", "beta.1", "build.5")

    @pytest.mark.parametrize("text", ["01.2.3", "=v1.2.3", "1.2.3beta", " 1.2.3"])
    def test_loose_accepts_more(self, grammar: Grammar, text: str) -> None:
        assert grammar.test(PatternName.FULL, text, loose=True)


class TestXRange:
    def test_operator_and_parts(self, grammar: Grammar) -> None:
        match = grammar.match(PatternName.XRANGE, ">=1.2.x")
        assert match is not None
        assert match.groups()[:4] == (">=", "1", "2", "x")

    def test_missing_parts_are_none(self, grammar: Grammar) -> None:
        match = grammar.match(PatternName.XRANGE, "1")
        assert match is not None
        assert match.group(2) == "1"
        assert match.group(3) is None
        assert match.group(4) is None

    def test_rejects_extra_component(self, grammar: Grammar) -> None:
        assert not grammar.test(PatternName.XRANGE, ">=1.2.x.y")


class TestTildeAndCaret:
    @pytest.mark.parametrize("text", ["~1.2.3", "~>1.2", "~1", "~1.x"])
    def test_tilde(self, grammar: Grammar, text: str) -> None:
        assert grammar.test(PatternName.TILDE, text)

    @pytest.mark.parametrize("text", ["^1.2.3", "^0.x", "^*", "^1.2.3-beta"])
    def test_caret(self, grammar: Grammar, text: str) -> None:
        assert grammar.test(PatternName.CARET, text)

    def test_caret_groups(self, grammar: Grammar) -> None:
        match = grammar.match(PatternName.CARET, "^1.2.3-beta")
        assert match is not None
        assert match.groups()[:4] == ("1", "2", "3", "beta")

    def test_tilde_trim_removes_space(self, grammar: Grammar) -> None:
        assert grammar.sub(PatternName.TILDE_TRIM, r"\1~", "~ 1.2.3") == "~1.2.3"

    def test_caret_trim_removes_space(self, grammar: Grammar) -> None:
        assert grammar.sub(PatternName.CARET_TRIM, r"\1^", "^ 1.2.3") == "^1.2.3"


class TestWholeSegmentShapes:
    def test_hyphen_range_groups(self, grammar: Grammar) -> None:
        match = grammar.match(PatternName.HYPHEN_RANGE, "1.2.3 - 2.3.4")
        assert match is not None
        assert match.group(1) == "1.2.3"
        assert match.group(7) == "2.3.4"
        assert match.group(8) == "2"

    def test_hyphen_requires_spaces(self, grammar: Grammar) -> None:
        assert not grammar.test(PatternName.HYPHEN_RANGE, "1.2.3-2.3.4")

    @pytest.mark.parametrize("text", ["*", ">=*", "<*", ">= *"])
    def test_star(self, grammar: Grammar, text: str) -> None:
        assert grammar.test(PatternName.STAR, text)

    @pytest.mark.parametrize("text", ["1.*", "**", "x"])
    def test_not_star(self, grammar: Grammar, text: str) -> None:
        assert not grammar.test(PatternName.STAR, text)

    def test_or_separator_split(self, grammar: Grammar) -> None:
        assert grammar.split(PatternName.OR_SEPARATOR, "a || b||c") == ["a", "b", "c"]

    def test_comparator_trim(self, grammar: Grammar) -> None:
        result = grammar.sub(PatternName.COMPARATOR_TRIM, r"\1\2\3", ">= 1.2.3 < 2.0.0")
        assert result == ">=1.2.3 <2.0.0"
