"""
Directive parser tests

Tests parsing of partial, style and script directive bodies and every
parse failure kind.
"""

import dataclasses

import pytest

from statapp.lib.directives import directive_parse
from statapp.lib.errors import (
    DirectiveArityError,
    DirectiveError,
    DirectiveSyntaxError,
    UnknownDirectiveError,
)
from statapp.models.directives import Directive, DirectiveKind


class TestValidDirectives:
    """Test well-formed directive bodies"""

    def test_partial(self):
        """partial(a) parses to a one-argument partial"""
        assert directive_parse("partial(a)") == Directive(DirectiveKind.PARTIAL, ("a",))

    def test_script(self):
        """script(a, 3) keeps both arguments as text"""
        directive = directive_parse("script(a, 3)")
        assert directive == Directive(DirectiveKind.SCRIPT, ("a", "3"))
        assert directive.filename == "a"
        assert directive.order == 3

    def test_style_whitespace_trimmed(self):
        """Arguments are whitespace-trimmed"""
        assert directive_parse("style( a )") == Directive(DirectiveKind.STYLE, ("a",))

    def test_negative_and_signed_orders(self):
        """Script orders may carry a sign"""
        assert directive_parse("script(a.js, -2)").order == -2
        assert directive_parse("script(a.js, +7)").order == 7

    def test_text_after_closing_parenthesis_ignored(self):
        """Only the text up to the first ')' is considered"""
        assert directive_parse("style(a.css) trailing").args == ("a.css",)

    def test_empty_argument(self):
        """An empty argument list still counts as one (empty) argument"""
        assert directive_parse("partial()").args == ("",)


class TestInvalidDirectives:
    """Test every parse failure"""

    def test_partial_too_many_args(self):
        with pytest.raises(DirectiveArityError):
            directive_parse("partial(a,b)")

    def test_script_missing_order(self):
        with pytest.raises(DirectiveArityError):
            directive_parse("script(a.js)")

    def test_style_too_many_args(self):
        with pytest.raises(DirectiveArityError):
            directive_parse("style(a.css, 1)")

    def test_unknown_name(self):
        with pytest.raises(UnknownDirectiveError):
            directive_parse("foo(a)")

    def test_name_is_not_trimmed(self):
        """Whitespace between name and '(' makes the name unknown"""
        with pytest.raises(UnknownDirectiveError):
            directive_parse("partial (a)")

    def test_missing_open_parenthesis(self):
        with pytest.raises(DirectiveSyntaxError):
            directive_parse("partial a)")

    def test_missing_close_parenthesis(self):
        with pytest.raises(DirectiveSyntaxError):
            directive_parse("partial(a")

    def test_close_before_open(self):
        """The ')' must come after the '('"""
        with pytest.raises(DirectiveSyntaxError):
            directive_parse(")partial(a")

    def test_non_integer_order(self):
        with pytest.raises(DirectiveSyntaxError):
            directive_parse("script(a.js, first)")

    def test_error_carries_directive_text(self):
        """Errors name the offending directive text"""
        with pytest.raises(DirectiveError) as excinfo:
            directive_parse("foo(a)")
        assert excinfo.value.directive == "foo(a)"
        assert "foo(a)" in str(excinfo.value)


class TestDirectiveModel:
    """Test the parsed Directive value"""

    def test_immutable(self):
        directive = directive_parse("style(a.css)")
        with pytest.raises(dataclasses.FrozenInstanceError):
            directive.args = ("b.css",)  # type: ignore[misc]

    def test_order_only_on_scripts(self):
        with pytest.raises(AttributeError):
            directive_parse("style(a.css)").order
