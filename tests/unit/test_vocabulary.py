"""Tests for the capacity-bounded vocabulary and per-word context counts."""
import pytest

from wordsketch.core.context_index import UNKNOWN
from wordsketch.core.errors import SketchInvariantError
from wordsketch.core.vocabulary import Vocabulary, WordRepresentation, add_context


class TestVocabulary:
    def test_admit_creates_then_counts(self):
        """Should create with count 1 and increment on later admissions."""
        vocab = Vocabulary(10)
        rep = vocab.admit("good")
        assert rep.occurrence_count == 1
        assert vocab.admit("good") is rep
        assert rep.occurrence_count == 2

    def test_capacity_one_scenario(self):
        """Should give the only slot to the first word and fall back afterwards."""
        vocab = Vocabulary(1)
        first = vocab.admit("good")
        other = vocab.admit("morning")
        again = vocab.admit("evening")

        assert len(vocab) == 1
        assert "morning" not in vocab
        assert other is vocab.fallback
        assert again is vocab.fallback
        assert vocab.fallback.occurrence_count == 0
        assert first.occurrence_count == 1
        assert vocab.admit("good").occurrence_count == 2

    def test_size_never_exceeds_capacity(self):
        """Should stop growing at capacity."""
        vocab = Vocabulary(3)
        for i in range(20):
            vocab.admit(f"w{i}")
            assert len(vocab) <= 3
        assert [r.word for r in vocab] == ["w0", "w1", "w2"]

    def test_lookup_does_not_mutate(self):
        """Should return the representation or the fallback without counting."""
        vocab = Vocabulary(5)
        vocab.admit("good")
        assert vocab.lookup("good").occurrence_count == 1
        assert vocab.lookup("good").occurrence_count == 1
        assert vocab.lookup("absent") is vocab.fallback
        assert "absent" not in vocab

    def test_fallback_word(self):
        assert Vocabulary(2).fallback.word == UNKNOWN

    def test_rejects_zero_capacity(self):
        with pytest.raises(ValueError):
            Vocabulary(0)


class TestAddContext:
    def test_tracked_name_increments(self):
        rep = WordRepresentation("good")
        add_context(rep, "morning", 10)
        add_context(rep, "morning", 10)
        assert rep.context_counts == {"morning": 2}

    def test_overflow_goes_to_unknown_and_marks_full(self):
        """Should track context_size - 1 names, then fold into the unknown bucket."""
        rep = WordRepresentation("good")
        for name in ["a", "b"]:
            assert add_context(rep, name, 3) == name
        assert not rep.is_full

        assert add_context(rep, "c", 3) == UNKNOWN
        assert rep.is_full
        assert add_context(rep, "d", 3) == UNKNOWN
        assert add_context(rep, "a", 3) == "a"
        assert rep.context_counts == {"a": 2, "b": 1, UNKNOWN: 2}

    def test_context_size_one(self):
        """Should route everything to the unknown bucket with one slot."""
        rep = WordRepresentation("good")
        for name in ["a", "b", UNKNOWN]:
            add_context(rep, name, 1)
        assert rep.context_counts == {UNKNOWN: 3}

    def test_dictionary_size_bounded(self):
        """Should never track more than context_size entries."""
        rep = WordRepresentation("good")
        for i in range(40):
            add_context(rep, f"w{i}", 5)
            assert len(rep.context_counts) <= 5

    def test_hashing_holds_every_bin(self):
        """Should keep all bins under hashing and fail on an impossible extra bin."""
        rep = WordRepresentation("good")
        for i in range(3):
            add_context(rep, f"bin_{i}", 3, hashing=True)
        assert rep.is_full
        assert len(rep.context_counts) == 3
        add_context(rep, "bin_1", 3, hashing=True)
        assert rep.context_counts["bin_1"] == 2
        with pytest.raises(SketchInvariantError):
            add_context(rep, "bin_7", 3, hashing=True)
