"""
Tag scanner tests

Tests span discovery, laziness and document substitution, including the
dropped character in front of each replaced directive.
"""

import pytest

from statapp.config.settings import AppSettings
from statapp.lib.errors import UnknownDirectiveError, UnterminatedDirectiveError
from statapp.lib.scanner import document_substitute, spans_scan
from statapp.models.directives import DirectiveKind


class TestSpanScanning:
    """Test locating directive spans"""

    def test_no_directives(self):
        """Text without markers yields nothing"""
        assert list(spans_scan("<html><body>plain</body></html>")) == []

    def test_single_span_offsets(self):
        """Span covers both markers; body is trimmed"""
        text = "a\n<- style(x.css) ->\nb"
        spans = list(spans_scan(text))

        assert len(spans) == 1
        span = spans[0]
        assert span.start == 2
        assert span.end == 20
        assert text[span.start:span.end] == "<- style(x.css) ->"
        assert span.body == "style(x.css)"
        assert span.directive.kind == DirectiveKind.STYLE

    def test_document_order(self):
        text = "<- partial(p.html) -> <- style(s.css) -> <- script(j.js, 1) ->"
        kinds = [span.directive.kind for span in spans_scan(text)]
        assert kinds == [DirectiveKind.PARTIAL, DirectiveKind.STYLE, DirectiveKind.SCRIPT]

    def test_lazy_parse_errors(self):
        """A bad directive only fails once the scan reaches it"""
        spans = spans_scan("<- style(a.css) -> <- bogus(x) ->")
        assert next(spans).directive.filename == "a.css"
        with pytest.raises(UnknownDirectiveError):
            next(spans)

    def test_unterminated(self):
        with pytest.raises(UnterminatedDirectiveError):
            list(spans_scan("<p>\n<- style(a.css)\n</p>"))

    def test_restartable(self):
        """Each call scans from the beginning"""
        text = "<- style(a.css) -> <- style(b.css) ->"
        assert list(spans_scan(text)) == list(spans_scan(text))

    def test_custom_markers(self):
        settings = AppSettings(_env_file=None, open_marker="{{", close_marker="}}")
        spans = list(spans_scan("x {{ partial(p.html) }} y <- style(a.css) ->", settings))
        assert [span.body for span in spans] == ["partial(p.html)"]


class TestSubstitution:
    """Test rewriting documents span by span"""

    def test_round_trip_without_directives(self):
        text = "<html>\n  <body>-> arrows <!-- comment --></body>\n</html>\n"
        assert document_substitute(text, lambda span: "X") == text

    def test_preceding_character_dropped(self):
        """The character before the open marker goes with the directive"""
        assert document_substitute("x <- partial(p) ->y", lambda span: "P") == "xPy"

    def test_directive_at_document_start(self):
        assert document_substitute("<- partial(p) ->rest", lambda span: "P") == "Prest"

    def test_directive_on_own_line(self):
        text = "<head>\n<- style(a.css) ->\n</head>"
        assert document_substitute(text, lambda span: "<link>") == "<head><link>\n</head>"

    def test_none_keeps_span(self):
        """Returning None leaves the directive and its neighbour in place"""
        text = "a <- style(s.css) -> b"
        assert document_substitute(text, lambda span: None) == text

    def test_empty_string_deletes(self):
        text = "a\n<- style(s.css) ->\nb"
        assert document_substitute(text, lambda span: "") == "a\nb"

    def test_mixed_kinds(self):
        """Only spans the replacer handles are rewritten"""
        text = "<- partial(p) ->\n<- style(s.css) ->\n<- partial(q) ->"

        def replace(span):
            if span.directive.kind is DirectiveKind.PARTIAL:
                return span.directive.filename.upper()
            return None

        assert document_substitute(text, replace) == "P\n<- style(s.css) ->Q"
