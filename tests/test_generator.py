"""Tests for short id generation."""

from collections import Counter

from shortener.generator import ALPHABET, SHORT_ID_LENGTH, generate_short_id


class TestGenerateShortId:
    """Test short id generation."""

    def test_length_and_alphabet(self):
        for _ in range(1000):
            short_id = generate_short_id()
            assert len(short_id) == SHORT_ID_LENGTH == 6
            assert all(c in ALPHABET for c in short_id)

    def test_alphabet_is_alphanumeric(self):
        assert len(ALPHABET) == 62
        assert set(ALPHABET) == set(
            "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
        )

    def test_custom_length(self):
        assert len(generate_short_id(length=10)) == 10

    def test_distribution_is_roughly_uniform(self):
        """Every symbol should appear close to its expected share."""
        counts = Counter()
        for _ in range(62 * 1000 // SHORT_ID_LENGTH + 1):
            counts.update(generate_short_id())

        total = sum(counts.values())
        expected = total / len(ALPHABET)
        assert set(counts) == set(ALPHABET)
        # ~32 is one standard deviation here
        for char in ALPHABET:
            assert abs(counts[char] - expected) < 0.25 * expected, char
