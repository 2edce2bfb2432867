"""
Unit tests for the structured PII recognizers.
"""
import logging

import pytest

from piiscan.entity_extraction.pattern_matcher import (
    PatternExtractor,
    card_brand,
    money_metadata,
    normalize_type,
    quantity_metadata,
)


def _values(candidates, pii_type=None):
    return [c.text for c in candidates if pii_type is None or c.type == pii_type]


class TestEmailAndPhone:
    def test_email_extraction(self, extractor):
        found = extractor.match_type("Reach me at jane.roe@example.com today", "email")

        assert len(found) == 1
        assert found[0].text == "jane.roe@example.com"
        assert found[0].confidence == 1.0
        assert found[0].metadata["domain"] == "example.com"

    def test_valid_phone_metadata(self, extractor):
        found = extractor.match_type("Call +1 650-253-0000 now", "phone")

        assert _values(found) == ["+1 650-253-0000"]
        meta = found[0].metadata
        assert meta["is_valid"] is True
        assert meta["region"] == "US"
        assert meta["is_international"] is True

    def test_invalid_phone_is_kept(self, extractor):
        found = extractor.match_type("Call 123-456-7890 now", "phone")

        assert _values(found) == ["123-456-7890"]
        assert found[0].metadata["is_valid"] is False
        assert found[0].confidence == 1.0


class TestMoneyAndQuantity:
    def test_money_with_symbol(self, extractor):
        found = extractor.match_type("Total was $1,199.99 today", "money")

        assert _values(found) == ["$1,199.99"]
        meta = found[0].metadata
        assert meta["currency"] == "USD"
        assert meta["numeric_value"] == pytest.approx(1199.99)
        assert meta["has_commas"] is True
        assert meta["decimal_places"] == 2
        assert meta["symbol_position"] == "before"

    def test_money_with_currency_code(self):
        meta = money_metadata("100 EUR")
        assert meta["currency"] == "EUR"
        assert meta["symbol_position"] == "after"
        assert meta["numeric_value"] == 100.0

    def test_quantity_with_unit(self, extractor):
        found = extractor.match_type("Ship 5 items tomorrow", "quantity")

        assert _values(found) == ["5 items"]
        assert found[0].metadata["unit"] == "items"
        assert found[0].metadata["numeric_value"] == 5.0

    def test_quantity_ignores_four_digit_year(self, extractor):
        assert extractor.match_type("In 2026 we grow", "quantity") == []

    def test_quantity_inside_date_still_reported(self, extractor):
        found = extractor.match_type("Due Jan 17, 2026", "quantity")
        assert "17" in _values(found)

    def test_quantity_metadata_decimals(self):
        meta = quantity_metadata("3.5 kg")
        assert meta["unit"] == "kg"
        assert meta["decimal_places"] == 1


class TestIdentifiers:
    def test_ssn(self, extractor):
        assert _values(extractor.match_type("SSN 123-45-6789 on file", "ssn")) == ["123-45-6789"]

    def test_credit_card_luhn_valid(self, extractor):
        found = extractor.match_type("Card 4111 1111 1111 1111 on file", "creditCard")

        assert _values(found) == ["4111 1111 1111 1111"]
        assert found[0].metadata["card_type"] == "visa"

    def test_credit_card_luhn_invalid_dropped(self, extractor):
        assert extractor.match_type("Order 1234 5678 9012 3456", "creditCard") == []

    def test_card_brand(self):
        assert card_brand("5500000000000004") == "mastercard"
        assert card_brand("340000000000009") == "amex"
        assert card_brand("9999") == "unknown"

    def test_ipv4_and_ipv6(self, extractor):
        text = "Hosts 192.168.1.1 and 2001:0db8:85a3:0000:0000:8a2e:0370:7334"
        found = extractor.match_type(text, "ipAddress")

        assert _values(found) == ["192.168.1.1", "2001:0db8:85a3:0000:0000:8a2e:0370:7334"]
        assert [c.metadata["version"] for c in found] == [4, 6]

    def test_url_trailing_period_stripped(self, extractor):
        found = extractor.match_type("Visit https://example.com/path.", "url")
        assert _values(found) == ["https://example.com/path"]


class TestDatesAndAddresses:
    def test_month_day_year(self, extractor):
        found = extractor.match_type("Meeting on Jan 17, 2026", "date")
        assert _values(found) == ["Jan 17, 2026"]
        assert found[0].confidence == 0.8

    def test_abbreviated_month_with_period(self, extractor):
        assert _values(extractor.match_type("Dec. 9 meeting", "date")) == ["Dec. 9"]

    def test_numeric_formats(self, extractor):
        found = extractor.match_type("From 12/31/2024 to 2025-01-15", "date")
        assert _values(found) == ["12/31/2024", "2025-01-15"]

    def test_lowercase_may_is_not_a_date(self, extractor):
        assert extractor.match_type("You may proceed", "date") == []

    def test_lowercase_month_abbreviation_is_not_a_date(self, extractor):
        text = "meeting on dec. 9"

        assert extractor.match_type(text, "date") == []
        assert _values(extractor.match_type(text, "quantity")) == ["9"]

    def test_street_address(self, extractor):
        found = extractor.match_type("Ship to 123 Main Street please", "address")
        assert _values(found) == ["123 Main Street"]
        assert found[0].confidence == 0.7


class TestLocations:
    def test_pattern_and_gazetteer(self, extractor):
        text = "Conference in Bay Area, with speakers from Paris and Silicon Valley"
        found = extractor.find_locations(text)

        assert _values(found) == ["Bay Area", "Paris", "Silicon Valley"]
        kinds = {c.text: c.metadata["match_type"] for c in found}
        assert kinds == {"Bay Area": "pattern", "Paris": "gazetteer", "Silicon Valley": "pattern"}
        confidences = {c.text: c.confidence for c in found}
        assert confidences["Paris"] == 0.95
        assert confidences["Bay Area"] == 0.9

    def test_multiword_gazetteer_entry(self, extractor):
        assert "United States" in _values(extractor.find_locations("Trade between United States and Canada"))

    def test_words_checked_individually(self, extractor):
        found = extractor.find_locations("Flying Tokyo London tonight")
        assert _values(found) == ["Tokyo", "London"]

    def test_no_duplicate_spans(self, extractor):
        found = extractor.find_locations("New York City and New York State")
        spans = [(c.start, c.end) for c in found]
        assert len(spans) == len(set(spans))

    def test_no_locations(self, extractor):
        assert extractor.find_locations("Reading a book about history") == []


class TestExtractor:
    def test_offset_and_scope_applied(self, extractor):
        found = extractor.extract("mail a@b.io", types=["email"], scope=3, offset=100)

        assert found[0].start == 105
        assert found[0].end == 111
        assert found[0].scope == 3

    def test_ui_aliases_accepted(self, extractor):
        assert normalize_type("ips") == "ipAddress"
        assert normalize_type("emails") == "email"
        assert _values(extractor.extract("mail a@b.io", types=["emails"])) == ["a@b.io"]

    def test_unknown_type_warns(self, extractor, caplog):
        with caplog.at_level(logging.WARNING):
            assert extractor.match_type("anything", "bogus") == []
        assert "bogus" in caplog.text

    def test_results_sorted_by_start(self, extractor):
        found = extractor.extract("jane@example.com paid $10.00 on 2024-01-15")
        starts = [c.start for c in found]
        assert starts == sorted(starts)

    def test_empty_text(self, extractor):
        assert extractor.extract("") == []

    def test_origin_signal_recorded(self, extractor):
        found = extractor.match_type("SSN 123-45-6789", "ssn")
        assert found[0].origin_signals == {"pattern:ssn": 1.0}


class TestCustomPatterns:
    def test_custom_pattern_matches(self):
        extractor = PatternExtractor()
        assert extractor.add_custom_pattern("ticket", r"TICKET-\d+")

        found = extractor.extract("See TICKET-42 for context")
        custom = [c for c in found if c.type == "custom"]
        assert _values(custom) == ["TICKET-42"]
        assert custom[0].metadata["pattern_name"] == "ticket"

    def test_invalid_custom_pattern_skipped(self, caplog):
        extractor = PatternExtractor()
        with caplog.at_level(logging.WARNING):
            assert extractor.add_custom_pattern("bad", r"[invalid(") is False
        assert "bad" not in extractor.custom_patterns

    def test_validate_pattern(self):
        assert PatternExtractor.validate_pattern(r"\d+") is None
        assert PatternExtractor.validate_pattern(r"[oops") is not None

    def test_remove_custom_pattern(self):
        extractor = PatternExtractor()
        extractor.add_custom_pattern("ticket", r"TICKET-\d+")
        extractor.remove_custom_pattern("ticket")
        extractor.remove_custom_pattern("never-added")

        assert [c for c in extractor.extract("See TICKET-42") if c.type == "custom"] == []


class TestConvenienceLookups:
    def test_first_match(self, extractor):
        assert extractor.first_match("a@b.io and c@d.io", "email").text == "a@b.io"
        assert extractor.first_match("nothing here", "email") is None

    def test_boolean_test(self, extractor):
        assert extractor.test("SSN 123-45-6789", "ssn")
        assert not extractor.test("no numbers", "ssn")

    def test_gazetteer_lookup(self, extractor):
        gazetteer = extractor.gazetteer

        assert "new  york" in gazetteer
        assert "Atlantis" not in gazetteer
        assert gazetteer.stats()["total"] == len(gazetteer)
