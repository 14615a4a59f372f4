"""Tests for the press counter."""

from patterns_deck.counter import Counter


class TestCounter:

    def test_starts_at_zero(self):
        counter = Counter()
        assert counter.count == 0
        assert counter.label == "Press me - 0"

    def test_three_presses(self):
        counter = Counter()
        for _ in range(3):
            counter.press()
        assert counter.label == "Press me - 3"

    def test_press_returns_new_count(self):
        counter = Counter()
        assert [counter.press() for _ in range(4)] == [1, 2, 3, 4]

    def test_no_upper_bound(self):
        counter = Counter()
        for _ in range(10000):
            counter.press()
        assert counter.count == 10000

    def test_counters_are_independent(self):
        first, second = Counter(), Counter()
        first.press()
        assert second.count == 0
