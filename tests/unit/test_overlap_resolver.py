"""
Unit tests for the deterministic overlap resolver.
"""
from piiscan.entity_extraction.overlap_resolver import pick_primary, resolve


class TestResolve:
    """Tests for resolve()."""

    def test_higher_priority_wins_regardless_of_order(self, make_candidate):
        date = make_candidate("date", 11, 23, confidence=0.8)
        quantity = make_candidate("quantity", 15, 17, confidence=1.0)

        assert resolve([date, quantity]) == [date]
        assert resolve([quantity, date]) == [date]

    def test_later_higher_priority_replaces_earlier(self, make_candidate):
        quantity = make_candidate("quantity", 0, 5)
        date = make_candidate("date", 3, 10, confidence=0.8)

        assert resolve([quantity, date]) == [date]

    def test_scopes_are_independent(self, make_candidate):
        a = make_candidate("email", 0, 10, scope=0)
        b = make_candidate("phone", 0, 10, scope=1)

        assert resolve([a, b]) == [a, b]

    def test_confidence_breaks_priority_tie(self, make_candidate):
        low = make_candidate("email", 0, 10, confidence=0.9)
        high = make_candidate("email", 5, 15, confidence=1.0)

        assert resolve([low, high]) == [high]

    def test_length_breaks_confidence_tie(self, make_candidate):
        short = make_candidate("url", 0, 5)
        long = make_candidate("url", 2, 12)

        assert resolve([short, long]) == [long]

    def test_full_tie_keeps_earlier_item(self, make_candidate):
        first = make_candidate("email", 0, 5)
        second = make_candidate("email", 0, 5)

        result = resolve([first, second])
        assert len(result) == 1
        assert result[0] is first

    def test_unknown_type_ranks_below_everything(self, make_candidate):
        custom = make_candidate("custom", 0, 10)
        noun = make_candidate("properNoun", 2, 6, confidence=0.1)

        assert resolve([custom, noun]) == [noun]

    def test_adjacent_spans_do_not_overlap(self, make_candidate):
        a = make_candidate("email", 0, 5)
        b = make_candidate("email", 5, 10)

        assert resolve([b, a]) == [a, b]

    def test_output_ordered_by_scope_then_start(self, make_candidate):
        late = make_candidate("email", 40, 45, scope=1)
        mid = make_candidate("email", 20, 25, scope=0)
        early = make_candidate("email", 0, 5, scope=0)

        assert resolve([late, mid, early]) == [early, mid, late]

    def test_chain_of_overlaps(self, make_candidate):
        a = make_candidate("properNoun", 0, 6)
        b = make_candidate("money", 4, 10)
        c = make_candidate("properNoun", 8, 14)

        assert resolve([a, b, c]) == [b]

    def test_custom_priorities(self, make_candidate):
        date = make_candidate("date", 0, 10)
        quantity = make_candidate("quantity", 2, 4)

        assert resolve([date, quantity], priorities={"quantity": 99}) == [quantity]

    def test_custom_scope_key(self, make_candidate):
        a = make_candidate("email", 0, 10)
        b = make_candidate("email", 0, 10)

        result = resolve([a, b], scope_key=lambda item: id(item))
        assert len(result) == 2

    def test_empty_input(self):
        assert resolve([]) == []


class TestPickPrimary:
    """Tests for pick_primary()."""

    def test_longer_text_wins(self, make_candidate):
        short = make_candidate("date", 0, 3, text="Jan")
        long = make_candidate("properNoun", 0, 7, text="January")

        assert pick_primary([short, long]) is long

    def test_priority_breaks_length_tie(self, make_candidate):
        noun = make_candidate("properNoun", 0, 5, confidence=1.0, text="Paris")
        location = make_candidate("location", 0, 5, confidence=0.95, text="Paris")

        assert pick_primary([noun, location]) is location

    def test_confidence_breaks_priority_tie(self, make_candidate):
        a = make_candidate("properNoun", 0, 4, confidence=0.6, text="Acme")
        b = make_candidate("properNoun", 10, 14, confidence=0.9, text="Acme")

        assert pick_primary([a, b]) is b

    def test_full_tie_keeps_first(self, make_candidate):
        a = make_candidate("email", 0, 3, text="a@b")
        b = make_candidate("email", 5, 8, text="a@b")

        assert pick_primary([a, b]) is a

    def test_empty(self):
        assert pick_primary([]) is None
