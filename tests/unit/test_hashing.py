"""Tests for the Jenkins one-at-a-time sketch hash."""
import pytest

from wordsketch.core.hashing import bin_id, bin_name, jenkins_hash


class TestJenkinsHash:
    def test_empty_input_hashes_to_zero(self):
        """Should hash the empty string to 0."""
        assert jenkins_hash("") == 0
        assert jenkins_hash(b"") == 0

    def test_str_and_utf8_bytes_agree(self):
        """Should hash a str exactly like its UTF-8 bytes."""
        for word in ["good", "héllo", "日本", "#tag"]:
            assert jenkins_hash(word) == jenkins_hash(word.encode("utf-8"))

    def test_result_is_signed_32_bit(self):
        """Should stay within the signed 32-bit range."""
        for word in ["a", "morning", "x" * 500, "ñandú", "ÿ" * 40]:
            h = jenkins_hash(word)
            assert -(2 ** 31) <= h < 2 ** 31

    def test_deterministic(self):
        """Should give the same hash on every call."""
        assert jenkins_hash("stream") == jenkins_hash("stream")

    def test_distinct_words_usually_differ(self):
        """Should spread distinct words over different hashes."""
        hashes = {jenkins_hash(w) for w in ["alpha", "beta", "gamma", "delta", "epsilon"]}
        assert len(hashes) == 5


class TestBinId:
    @pytest.mark.parametrize("n_bins", [1, 2, 7, 100, 10000])
    def test_bins_in_range(self, n_bins):
        """Should always land in [0, n_bins), empty strings included."""
        words = ["", "a", "good", "morning", "héllo", "日本語", "@user", "x" * 1000]
        for w in words:
            assert 0 <= bin_id(w, n_bins) < n_bins

    def test_single_bin(self):
        """Should map everything to bin 0 when there is one bin."""
        assert bin_id("anything", 1) == 0

    def test_matches_abs_mod(self):
        """Should be abs(hash) mod n_bins."""
        for w in ["good", "bad", "ñ"]:
            assert bin_id(w, 97) == abs(jenkins_hash(w)) % 97

    def test_rejects_zero_bins(self):
        """Should refuse a zero bin count."""
        with pytest.raises(ValueError):
            bin_id("a", 0)

    def test_bin_name(self):
        assert bin_name(3) == "bin_3"
