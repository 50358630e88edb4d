"""Tests for the context evaluator."""
from pii_lens.pii import PiiCategory, scan_text
from pii_lens.pii.context import context_satisfied, has_context


class TestHasContext:
    def test_keyword_in_window(self):
        assert has_context("my phone is 9876543210", 12, ["phone"])

    def test_keyword_case_insensitive(self):
        assert has_context("PHONE 9876543210", 6, ["phone"])

    def test_keyword_after_value(self):
        text = "9876543210 is my phone"
        assert has_context(text, 0, ["phone"])

    def test_keyword_outside_window(self):
        text = "phone" + " " * 100 + "9876543210"
        assert not has_context(text, 105, ["phone"])

    def test_field_shape_with_zero_window(self):
        assert has_context("IBAN: 123456789012", 6, ["iban"], window=0)
        assert not has_context("IBAN was 123456789012", 9, ["iban"], window=0)


class TestContextSatisfied:
    def test_context_free_category(self):
        assert context_satisfied(PiiCategory.EMAIL, "x a@b.co", 2, "a@b.co")

    def test_name_at_text_start(self):
        assert context_satisfied(PiiCategory.NAME, "Ravi Kumar called", 0, "Ravi Kumar")

    def test_name_after_sentence_end(self):
        text = "We spoke yesterday. Ravi Kumar will call back."
        assert context_satisfied(PiiCategory.NAME, text, 20, "Ravi Kumar")

    def test_name_mid_sentence_without_keyword(self):
        text = "we met Ravi Kumar yesterday"
        assert not context_satisfied(PiiCategory.NAME, text, 7, "Ravi Kumar")

    def test_international_mobile_needs_no_keyword(self):
        text = "reach +919876543210 now"
        assert context_satisfied(PiiCategory.MOBILE, text, 6, "+919876543210")
        assert not context_satisfied(PiiCategory.MOBILE, "reach 9876543210 now", 6, "9876543210")


class TestContextInScan:
    def test_name_keyword(self):
        matches = scan_text("user name: Ravi Kumar")
        assert [(m.category, m.raw_value) for m in matches] == [(PiiCategory.NAME, "Ravi Kumar")]

    def test_name_without_context_dropped(self):
        assert scan_text("we met Ravi Kumar yesterday") == []

    def test_name_after_sentence(self):
        matches = scan_text("We spoke yesterday. Ravi Kumar will call back.")
        assert [m.raw_value for m in matches] == ["Ravi Kumar"]

    def test_international_mobile(self):
        matches = scan_text("reach +919876543210 now")
        assert [(m.category, m.raw_value) for m in matches] == [(PiiCategory.MOBILE, "+919876543210")]

    def test_bank_account_requires_keyword(self):
        assert scan_text("ref 123456789012 ok") == []
        matches = scan_text("Account number: 123456789012")
        assert [(m.category, m.masked_value) for m in matches] == [(PiiCategory.BANK_ACCOUNT, "********9012")]


class TestNameTrimming:
    def test_label_word_trimmed(self):
        from pii_lens.pii import get_detector
        hits = list(get_detector(PiiCategory.NAME).find("Contact John Smith at noon"))
        assert hits == [("John Smith", 8, 18)]

    def test_salutation_is_context(self):
        matches = scan_text("Dear Priya Sharma, thanks for writing")
        assert [(m.category, m.raw_value, m.start) for m in matches] == [(PiiCategory.NAME, "Priya Sharma", 5)]

    def test_field_label_is_not_a_name(self):
        matches = scan_text("Full Name: Ravi Kumar")
        assert [m.raw_value for m in matches] == ["Ravi Kumar"]

    def test_single_word_left_after_trim_dropped(self):
        matches = scan_text("Passport No: K1234567")
        assert [m.category for m in matches] == [PiiCategory.PASSPORT]
