"""Tests for span rendering."""
from pii_lens.pii import PiiCategory, PiiMatch, Span, line_breaks, redact_text, render, scan_text
from pii_lens.pii.redact import tag

S1 = "Contact John Smith at john.smith@example.com or 9876543210"


def _email(start, end, value="a@b.co"):
    return PiiMatch(PiiCategory.EMAIL, value, "a****@b****", Span(start, end))


class TestRender:
    def test_no_matches_is_identity(self):
        assert render("nothing here\n", []) == "nothing here\n"
        assert redact_text("nothing here", []) == "nothing here"

    def test_highlight_tag(self):
        text = "Mail: a@b.co now"
        out = render(text, [_email(6, 12)])
        assert out == (
            'Mail: <span class="pii-highlight pii-Email" data-category="Email" '
            'data-confidence="0.80">a@b.co</span> now'
        )

    def test_masked_tag(self):
        out = tag(_email(6, 12), masked=True)
        assert out.startswith('<span class="pii-masked pii-Email"')
        assert ">a****@b****</span>" in out

    def test_offsets_survive_length_changes(self):
        matches = scan_text(S1)
        expected = "Contact Jo" + "*" * 8 + " at j****@e**** or ******3210"
        assert redact_text(S1, matches) == expected

    def test_text_outside_matches_preserved(self):
        text = "line one\nMail: a@b.co\n\tend"
        out = render(text, [_email(15, 21)], masked=True)
        assert out.startswith("line one\nMail: ")
        assert out.endswith("</span>\n\tend")

    def test_deterministic(self):
        matches = scan_text(S1)
        assert render(S1, matches) == render(S1, matches)
        assert render(S1, matches, masked=True) == render(S1, list(reversed(matches)), masked=True)

    def test_out_of_bounds_match_ignored(self):
        assert redact_text("short", [_email(100, 106)]) == "short"

    def test_line_breaks(self):
        assert line_breaks("a\nb\n") == "a<br>b<br>"
