"""End-to-end scenarios for the deterministic pass."""
from pii_lens.pii import PiiCategory, scan, scan_text
from pii_lens.pii.scanner import near_url, url_spans

S1 = "Contact John Smith at john.smith@example.com or 9876543210"


def _by_category(matches):
    return {m.category: m for m in matches}


class TestScenarios:
    def test_plain_contact_line(self):
        found = _by_category(scan_text(S1))
        assert found[PiiCategory.EMAIL].raw_value == "john.smith@example.com"
        assert found[PiiCategory.EMAIL].masked_value == "j****@e****"
        assert found[PiiCategory.MOBILE].raw_value == "9876543210"
        assert found[PiiCategory.MOBILE].masked_value == "******3210"
        assert found[PiiCategory.NAME].raw_value == "John Smith"
        assert found[PiiCategory.NAME].masked_value == "Jo********"
        assert PiiCategory.BANK_ACCOUNT not in found

    def test_spaced_card_number(self):
        text = "Payment details 4111  1111  1111  1111 attached"
        matches = scan_text(text)
        assert len(matches) == 1
        m = matches[0]
        assert m.category is PiiCategory.CREDIT_CARD
        assert m.end - m.start >= 20
        assert text[m.start:m.end] == m.raw_value

    def test_aadhaar_beats_bank_account(self):
        text = "The reference 234567890123 was noted in the file."
        matches = scan_text(text)
        assert [(m.category, m.raw_value) for m in matches] == [(PiiCategory.AADHAAR, "234567890123")]
        assert matches[0].masked_value == "AAAAAAAAAAAA"

    def test_number_inside_url(self):
        assert scan_text("Visit https://mail.example.com/9876543210") == []
        assert scan_text("Phone page: https://mail.example.com/9876543210") == []
        assert [m.category for m in scan_text("Phone: 9876543210")] == [PiiCategory.MOBILE]

    def test_card_with_dashes(self):
        matches = scan_text("Card: 4111-1111-1111-1111")
        assert [(m.category, m.masked_value) for m in matches] == [
            (PiiCategory.CREDIT_CARD, "CCCC-CCCC-CCCC-1111"),
        ]

    def test_card_layouts(self):
        assert [m.raw_value for m in scan_text("Amex 3782 822463 10005")] == ["3782 822463 10005"]
        assert [m.raw_value for m in scan_text("pay 4111111111111111 now")] == ["4111111111111111"]

    def test_address(self):
        found = _by_category(scan_text("Address: 221 Baker Street, Pune"))
        assert found[PiiCategory.ADDRESS].raw_value == "221 Baker Street"
        assert found[PiiCategory.ADDRESS].masked_value == "&& Baker Street"

    def test_birthday(self):
        found = _by_category(scan_text("DOB: 12/03/1990"))
        assert found[PiiCategory.BIRTHDAY].masked_value == "BB/BB/BBBB"

    def test_passport(self):
        found = _by_category(scan_text("Passport No: K1234567"))
        assert found[PiiCategory.PASSPORT].raw_value == "K1234567"

    def test_drivers_license(self):
        found = _by_category(scan_text("Driving license MH12 20110062821"))
        assert found[PiiCategory.DRIVERS_LICENSE].raw_value == "MH12 20110062821"
        assert PiiCategory.BANK_ACCOUNT not in found


class TestScanProperties:
    def test_blank_input(self):
        assert scan("") == []
        assert scan("   \n\t") == []

    def test_span_fidelity(self):
        text = S1 + "\nAccount number: 123456789012, DOB: 12/03/1990"
        for m in scan(text):
            assert text[m.start:m.end] == m.raw_value

    def test_default_confidence(self):
        assert all(m.confidence == 0.8 for m in scan(S1))

    def test_category_filter(self):
        assert {m.category for m in scan(S1, categories={PiiCategory.EMAIL})} == {PiiCategory.EMAIL}

    def test_url_helpers(self):
        text = "see https://x.io/a b"
        urls = url_spans(text)
        assert [(u.start, u.end) for u in urls] == [(4, 18)]
        assert near_url(text, 10, 12, urls)
        assert not near_url("plain 9876543210 text", 6, 16, [])
