import pytest

from drycore.domain.enums import FormKind
from drycore.domain.form import NormalizedForm
from drycore.domain.identity import FilePath
from drycore.domain.span import LineColumn, Span
from drycore.ports.normalizer import (
    NormalizeError,
    NormalizerPort,
    ParseError,
    PlaceholderPolicy,
    UnsupportedConstructError,
)


class AdHoc(NormalizerPort):
    def extensions(self):
        return ()

    def normalize(self, source, path):
        return []

    def placeholder_policy(self):
        return PlaceholderPolicy.v0_1_default()


class LineAdapter(NormalizerPort):
    """Emits one form per non-empty line; rejects a marker construct."""

    def extensions(self):
        return (".txt",)

    def normalize(self, source, path):
        if not source.strip():
            raise ParseError("empty source")
        forms = []
        for number, text in enumerate(source.splitlines(), start=1):
            if not text:
                continue
            if text.startswith("macro"):
                span = Span(LineColumn(number, 0), LineColumn(number, len(text) - 1))
                raise UnsupportedConstructError("macro_rules!", span)
            span = Span(LineColumn(number, 0), LineColumn(number, len(text) - 1))
            forms.append(
                NormalizedForm(FormKind.PRODUCTION, frozenset({len(text)}), span, 1, 1)
            )
        return forms

    def placeholder_policy(self):
        return PlaceholderPolicy()

    def tool_name(self):
        return "dry4txt"

    def language(self):
        return "text"


def test_parse_error_with_span_displays_message_and_carries_no_cause():
    span = Span(LineColumn(3, 4), LineColumn(3, 4))
    err = ParseError("unexpected token", span)
    assert str(err) == "normalize error: unexpected token"
    assert err.span == span
    assert err.message == "unexpected token"
    assert err.__cause__ is None


def test_parse_error_without_span_renders_message():
    err = ParseError("whole-file parse failure")
    assert str(err) == "normalize error: whole-file parse failure"
    assert err.span is None
    assert err.__cause__ is None


def test_unsupported_error_renders_construct_name_without_span():
    err = UnsupportedConstructError("macro_rules!")
    assert str(err) == "unsupported construct: macro_rules!"
    assert err.span is None
    assert err.__cause__ is None


def test_unsupported_error_carries_optional_span():
    span = Span(LineColumn(7, 0), LineColumn(9, 5))
    err = UnsupportedConstructError("async fn in trait", span)
    assert str(err) == "unsupported construct: async fn in trait"
    assert err.construct == "async fn in trait"
    assert err.span == span


def test_error_variants_share_base_class():
    parse = ParseError("bad")
    unsupported = UnsupportedConstructError("jsx fragment")
    assert isinstance(parse, NormalizeError)
    assert isinstance(unsupported, NormalizeError)
    with pytest.raises(NormalizeError) as info:
        raise parse
    assert info.value is parse
    assert str(info.value) == "normalize error: bad"
    assert str(unsupported) == "unsupported construct: jsx fragment"


def test_placeholder_policy_default_matches_v0_1_default():
    assert PlaceholderPolicy() == PlaceholderPolicy.v0_1_default()


def test_identity_method_defaults_are_safe_fallbacks():
    n = AdHoc()
    assert NormalizerPort.tool_name(n) == "dry"
    assert NormalizerPort.language(n) == "unknown"
    parts = NormalizerPort.tool_version(n).split(".")
    assert parts[0].isdigit()
    assert n.placeholder_policy() == PlaceholderPolicy.v0_1_default()


def test_ad_hoc_adapter_returns_no_forms():
    n = AdHoc()
    assert n.normalize("fn main() {}", FilePath("src/main.rs")) == []
    assert n.extensions() == ()


def test_port_cannot_be_instantiated_without_methods():
    with pytest.raises(TypeError):
        NormalizerPort()


def test_partial_adapter_cannot_be_instantiated():
    class Partial(NormalizerPort):
        def extensions(self):
            return (".rs",)

        def normalize(self, source, path):
            return []

    with pytest.raises(TypeError):
        Partial()

    class Complete(Partial):
        def placeholder_policy(self):
            return PlaceholderPolicy.v0_1_default()

    complete = Complete()
    assert complete.placeholder_policy() == PlaceholderPolicy()
    assert complete.normalize("", FilePath("src/lib.rs")) == []


def test_adapter_overrides_identity_methods():
    n = LineAdapter()
    assert n.tool_name() == "dry4txt"
    assert n.language() == "text"
    assert n.extensions() == (".txt",)
    assert NormalizerPort.tool_name(n) == "dry"
    assert NormalizerPort.language(n) == "unknown"


def test_adapter_normalize_produces_forms():
    forms = LineAdapter().normalize("abc\n\nde\n", FilePath("a.txt"))
    assert [f.span.start.line for f in forms] == [1, 3]
    assert forms[0].fingerprint_set == frozenset({3})
    assert forms[1].span.end == LineColumn(3, 1)


def test_adapter_parse_failure_raises_parse_error():
    with pytest.raises(ParseError) as info:
        LineAdapter().normalize("   ", FilePath("a.txt"))
    assert str(info.value) == "normalize error: empty source"


def test_adapter_unsupported_construct_is_a_normalize_error():
    with pytest.raises(NormalizeError) as info:
        LineAdapter().normalize("ok\nmacro x\n", FilePath("a.txt"))
    assert isinstance(info.value, UnsupportedConstructError)
    assert info.value.span == Span(LineColumn(2, 0), LineColumn(2, 6))
    assert str(info.value) == "unsupported construct: macro_rules!"