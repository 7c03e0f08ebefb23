"""
Property-based tests for route patterns using Hypothesis.

Tests invariants that should hold for all inputs:
- Re-serialization roundtrip
- Compilation idempotence
- Match determinism and capture order
- Parser and matcher never crash
"""

from hypothesis import given, strategies as st, settings

from genuine.patterns import Param, ParseError, Pattern


# ============================================================================
# Strategy Definitions
# ============================================================================

PCHARS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-._~!$&'()*+,;=:@"

literal_segments = st.text(alphabet=PCHARS, min_size=1, max_size=12)

param_names = st.from_regex(r"[A-Za-z][A-Za-z0-9]{0,8}", fullmatch=True)

padding = st.sampled_from(["", " ", "\t", "  "])

# Each segment is ("lit", text) or ("param", name, left pad, right pad)
segments = st.one_of(
    st.tuples(st.just("lit"), literal_segments),
    st.tuples(st.just("param"), param_names, padding, padding),
)

segment_lists = st.lists(segments, min_size=1, max_size=6)

param_values = st.text(alphabet=PCHARS, min_size=1, max_size=12)


def build_pattern(segs):
    """Return (pattern text, pattern without brace whitespace)."""
    raw, clean = [], []
    for seg in segs:
        if seg[0] == "lit":
            raw.append(seg[1])
            clean.append(seg[1])
        else:
            _, name, left, right = seg
            raw.append("{" + left + name + right + "}")
            clean.append("{" + name + "}")
    return "/" + "/".join(raw), "/" + "/".join(clean)


# ============================================================================
# Property Tests
# ============================================================================

class TestParsingProperties:
    """Test parsing properties."""

    @given(segment_lists)
    @settings(max_examples=200)
    def test_render_roundtrip(self, segs):
        raw, clean = build_pattern(segs)
        assert Pattern.compile(raw).render() == clean

    @given(segment_lists)
    @settings(max_examples=100)
    def test_compilation_idempotent(self, segs):
        raw, _ = build_pattern(segs)
        assert Pattern.compile(raw) == Pattern.compile(raw)

    @given(segment_lists)
    @settings(max_examples=100)
    def test_literals_never_adjacent(self, segs):
        raw, _ = build_pattern(segs)
        parts = Pattern.compile(raw).parts
        for left, right in zip(parts, parts[1:]):
            assert isinstance(left, Param) or isinstance(right, Param)

    @given(st.text(max_size=30))
    @settings(max_examples=300)
    def test_parse_never_crashes(self, text):
        """Either compiles or raises a ParseError."""
        try:
            Pattern.compile(text)
        except ParseError as e:
            assert e.pos is not None
            assert 0 <= e.pos <= len(text.encode("utf-8", errors="surrogatepass"))


class TestMatchingProperties:
    """Test matching properties."""

    @given(segment_lists, st.data())
    @settings(max_examples=200)
    def test_generated_path_matches_in_order(self, segs, data):
        raw, _ = build_pattern(segs)
        pattern = Pattern.compile(raw)

        path_segments, expected = [], []
        for seg in segs:
            if seg[0] == "lit":
                path_segments.append(seg[1])
            else:
                value = data.draw(param_values)
                path_segments.append(value)
                expected.append((seg[1], value))
        path = "/" + "/".join(path_segments)

        matches = pattern.try_match(path)
        assert matches is not None
        assert [(m.name, m.value) for m in matches] == expected

    @given(segment_lists, st.text(max_size=40))
    @settings(max_examples=200)
    def test_match_is_deterministic_and_never_crashes(self, segs, path):
        raw, _ = build_pattern(segs)
        pattern = Pattern.compile(raw)
        assert pattern.try_match(path) == pattern.try_match(path)
