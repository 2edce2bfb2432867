"""
End-to-end tests: document leaves → segmented buffer → published entities.

Covers the full scan (segmentation, recognizers, scorer, dictionary
build/refine, type filter), leaf mapping of occurrences, and the JSON
payload contract.
"""
import json

import pytest

from piiscan.detection.output_builder import to_payload, validate_detection_output
from piiscan.models.text_map import DocumentLeaf
from run_detection import load_document, main


class TestDocumentScan:
    def test_published_entities(self, detector, mock_leaves):
        result = detector.detect_document(mock_leaves)

        assert [(e.type, e.text) for e in result] == [
            ("properNoun", "John Doe"),
            ("money", "$1,199.99"),
            ("date", "Jan 17, 2026"),
        ]

    def test_occurrences_map_back_to_leaves(self, detector, mock_leaves):
        result = {e.text: e for e in detector.detect_document(mock_leaves)}

        john = result["John Doe"].occurrences[0]
        assert (john.start, john.end) == (8, 16)
        assert [(s.leaf_id, s.relative_start, s.relative_end) for s in john.segments] == [("p-1", 8, 16)]

        date = result["Jan 17, 2026"].occurrences[0]
        assert [(s.leaf_id, s.relative_start, s.relative_end) for s in date.segments] == [("p-4", 28, 40)]
        assert date.scope == 2

    def test_script_leaf_not_scanned(self, detector, mock_leaves):
        texts = [e.text for e in detector.detect_document(mock_leaves)]
        assert "jane@example.com" not in texts

    def test_hidden_leaf_skipped(self, detector):
        leaves = [DocumentLeaf("p-1", "jane@example.com", container="p", hidden=True)]
        assert detector.detect_document(leaves) == []

    def test_enabled_type_filter(self, detector, mock_leaves):
        result = detector.detect_document(mock_leaves, ["dates"])
        assert [e.text for e in result] == ["Jan 17, 2026"]

    def test_link_text_boosted(self, detector):
        leaves = [DocumentLeaf("a-1", "Zorblax", container="a", inside_link=True)]

        result = detector.detect_document(leaves)

        assert [e.text for e in result] == ["Zorblax"]
        # inside_link and appears_in_page_links both fire on link text
        assert result[0].confidence == 1.0

    def test_word_seen_in_another_link(self, detector):
        leaves = [("p-1", "Zorblax arrived."), DocumentLeaf("a-1", "Zorblax Labs", container="a", inside_link=True)]

        result = {e.text: e for e in detector.detect_document(leaves)}

        assert result["Zorblax"].confidence == pytest.approx(0.9)

    def test_footer_words_penalized(self, detector):
        detector.set_proper_noun_threshold(0.5)
        body = ("p-1", "We thank Zorblax today")

        assert [e.text for e in detector.detect_document([body])] == ["Zorblax"]
        footer = DocumentLeaf("f-1", "Zorblax", container="footer")
        assert detector.detect_document([footer, body]) == []

    def test_name_shapes_across_leaves(self, detector):
        leaves = [
            ("p-1", "Our analyst James O'Brien joined."),
            ("p-2", "Maria D'Angelo and Jean-Luc Picard signed."),
        ]

        texts = [e.text for e in detector.detect_document(leaves)]

        assert texts == ["James O'Brien", "Maria D'Angelo", "Jean-Luc Picard"]

    def test_nearby_email_in_other_leaf(self, detector):
        leaves = [("p-1", "Zorblax"), ("p-2", "info@zorblax.com")]

        result = {e.text: e for e in detector.detect_document(leaves)}

        assert result["Zorblax"].confidence == 1.0
        assert result["info@zorblax.com"].type == "email"

    def test_repeated_scans_are_deterministic(self, detector, mock_leaves):
        first = to_payload(detector.detect_document(mock_leaves))
        second = to_payload(detector.detect_document(mock_leaves))
        assert first == second


class TestPayloadContract:
    def test_payload_matches_schema(self, detector, mock_leaves):
        payload = to_payload(detector.detect_document(mock_leaves))

        assert validate_detection_output(payload) == []
        assert all(item["id"].startswith("pii-") for item in payload)

    def test_invalid_payload_reported(self):
        errors = validate_detection_output([{"id": "x", "type": "email", "text": "", "confidence": 2}])
        assert errors


class TestDebugScan:
    def test_resolved_candidates(self, detector, mock_leaves):
        results = detector.detect_with_debug(mock_leaves)
        texts = [r.text for r in results]

        assert "1,199.99" not in texts
        assert "Jan" not in texts
        assert "$1,199.99" in texts

        starts = [(r.scope, r.start) for r in results]
        assert starts == sorted(starts)


class TestResolutionInvariants:
    MIXED_LEAVES = [
        ("p-1", "Contact James O'Brien at james@northwind.com or +1 650-253-0000."),
        ("p-2", "Invoice total $1,199.99 for 5 items, due Jan 17, 2026."),
        ("p-3", "Ship to 123 Main Street in the Bay Area near Paris."),
        ("p-4", "Card 4111 1111 1111 1111, SSN 123-45-6789 on file."),
        ("p-5", "Docs at https://example.com/help from host 192.168.1.1 today."),
        DocumentLeaf("a-1", "Maria D'Angelo", container="a", inside_link=True),
        ("p-6", "Jean-Luc Picard met Maria D'Angelo on Dec. 9 with 2 guests."),
    ]

    def test_published_occurrences_never_overlap_within_scope(self, detector):
        result = detector.detect_document(self.MIXED_LEAVES)
        spans = [(occ.scope, occ.start, occ.end) for e in result for occ in e.occurrences]

        assert len(spans) >= 10
        for i, (scope_a, start_a, end_a) in enumerate(spans):
            for scope_b, start_b, end_b in spans[i + 1:]:
                if scope_a == scope_b:
                    assert end_a <= start_b or end_b <= start_a, (
                        f"[{start_a},{end_a}) overlaps [{start_b},{end_b}) in scope {scope_a}"
                    )

    def test_mixed_scan_covers_every_family(self, detector):
        types = {e.type for e in detector.detect_document(self.MIXED_LEAVES)}
        assert {"properNoun", "email", "money", "url", "ssn", "creditCard"} <= types

    def test_debug_candidates_never_overlap_within_scope(self, detector):
        results = detector.detect_with_debug(self.MIXED_LEAVES)

        by_scope = {}
        for r in results:
            by_scope.setdefault(r.scope, []).append((r.start, r.end))
        for spans in by_scope.values():
            spans.sort()
            assert all(prev_end <= start for (_, prev_end), (start, _) in zip(spans, spans[1:]))


class TestRunner:
    def test_load_json_leaves(self, tmp_path):
        path = tmp_path / "doc.json"
        path.write_text(json.dumps([
            {"leaf_id": "p-1", "text": "Contact John Doe"},
            {"text": "hidden", "hidden": True},
        ]), encoding="utf-8")

        leaves = load_document(path)

        assert [leaf.leaf_id for leaf in leaves] == ["p-1", "leaf-1"]
        assert leaves[1].hidden is True

    def test_main_writes_output(self, tmp_path):
        source = tmp_path / "doc.txt"
        source.write_text("Contact John Doe at jane@example.com", encoding="utf-8")
        output = tmp_path / "out.json"

        assert main([str(source), "--output", str(output)]) == 0

        payload = json.loads(output.read_text(encoding="utf-8"))
        assert "jane@example.com" in [item["text"] for item in payload]
        assert validate_detection_output(payload) == []
