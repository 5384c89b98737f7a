"""Tests for the ISAAC-64 generator."""

from __future__ import annotations

import logging

import pytest

from randkit.core.base import CSPRNG, MASK64
from randkit.generators.isaac64 import RANDSIZ, Isaac64, _mix, normalize_seed


@pytest.fixture
def generate_calls(monkeypatch: pytest.MonkeyPatch) -> list[int]:
    """Count batch regenerations across all Isaac64 instances."""
    calls: list[int] = []
    original = Isaac64._generate

    def spy(self: Isaac64) -> None:
        calls.append(self.count)
        original(self)

    monkeypatch.setattr(Isaac64, "_generate", spy)
    return calls


def _take(gen: Isaac64, n: int) -> list[int]:
    return [gen.next_u64() for _ in range(n)]


class TestNormalizeSeed:
    def test_pads_short_seed(self) -> None:
        words = normalize_seed([1, 2, 3])
        assert len(words) == RANDSIZ
        assert words[:3] == [1, 2, 3]
        assert words[3:] == [0] * (RANDSIZ - 3)

    def test_truncates_long_seed(self) -> None:
        words = normalize_seed(list(range(300)))
        assert words == list(range(256))

    def test_exact_length_unchanged(self) -> None:
        seed = list(range(1000, 1256))
        assert normalize_seed(seed) == seed

    def test_empty_seed(self) -> None:
        assert normalize_seed([]) == [0] * RANDSIZ

    def test_logs_normalization(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="randkit.generators.isaac64"):
            normalize_seed([1])
        assert "zero-padded" in caplog.text


class TestMix:
    def test_mix_is_deterministic_and_changes_state(self) -> None:
        a = [0x9E3779B97F4A7C13] * 8
        b = list(a)
        _mix(a)
        _mix(b)
        assert a == b
        assert a != [0x9E3779B97F4A7C13] * 8
        assert all(0 <= w <= MASK64 for w in a)

    def test_mix_known_answer(self) -> None:
        """One cascade over the golden-ratio state gives fixed words."""
        s = [0x9E3779B97F4A7C13] * 8
        _mix(s)
        assert s == [
            7572661011919968382,
            4028260259618928788,
            8043602059889967306,
            9100764156995331019,
            5755359375441160577,
            807705027138091991,
            2018760799893475698,
            2260319203573073553,
        ]

    def test_bootstrap_fills_memory(self) -> None:
        assert Isaac64([])._mm[0] == 12487701688494170406


class TestKnownAnswers:
    @staticmethod
    def _at(gen: Isaac64, positions: list[int]) -> list[int]:
        out = _take(gen, max(positions))
        return [out[p - 1] for p in positions]

    def test_zero_seed(self) -> None:
        assert self._at(Isaac64([]), [1, 2, 3, 256, 257, 512, 513]) == [
            6801769443594191565,
            8035843825213082587,
            9458009917602874542,
            3391747272293483626,
            320092288855430299,
            15206197730614113627,
            7028891446018360339,
        ]

    def test_counting_seed(self) -> None:
        assert self._at(Isaac64(list(range(256))), [1, 2, 3, 256, 257, 512, 513]) == [
            16844286659662008141,
            18329678227031773762,
            3309387186518257067,
            13820540859922933666,
            8959470708607940247,
            3835085461326081172,
            14850507939292290803,
        ]

    def test_short_seed(self) -> None:
        gen = Isaac64([1, 2, 3, 4, 5, 6, 7, 8])
        assert _take(gen, 3) == [
            9993858882239119333,
            16144167050308155447,
            13923846836294552533,
        ]


class TestIsaac64:
    def test_is_csprng(self) -> None:
        assert isinstance(Isaac64([]), CSPRNG)

    def test_short_seed_equals_zero_padded(self) -> None:
        short = Isaac64([5, 6, 7])
        padded = Isaac64([5, 6, 7] + [0] * 253)
        assert _take(short, 600) == _take(padded, 600)

    def test_long_seed_equals_truncated(self) -> None:
        long_seed = [i * 0x1234567 for i in range(400)]
        assert _take(Isaac64(long_seed), 600) == _take(Isaac64(long_seed[:256]), 600)

    def test_excess_words_are_ignored(self) -> None:
        base = list(range(256))
        a = Isaac64(base + [1, 2, 3])
        b = Isaac64(base + [9, 9, 9, 9])
        assert _take(a, 300) == _take(b, 300)

    def test_deterministic(self) -> None:
        seed = list(range(256))
        assert _take(Isaac64(seed), 1000) == _take(Isaac64(seed), 1000)

    def test_seed_sensitivity(self) -> None:
        """Changing the last seed word alters the very first output."""
        a = Isaac64([0] * 256)
        b = Isaac64([0] * 255 + [1])
        assert a.next_u64() != b.next_u64()

    def test_zero_seed_is_not_degenerate(self) -> None:
        out = _take(Isaac64([]), 512)
        assert len(set(out)) > 500
        assert out[:256] != out[256:]

    def test_buffer_starts_exhausted(self, generate_calls: list[int]) -> None:
        gen = Isaac64([])
        assert gen.count == RANDSIZ
        assert generate_calls == []
        gen.next_u64()
        assert generate_calls == [RANDSIZ]
        assert gen.count == 1

    def test_one_generate_per_batch(self, generate_calls: list[int]) -> None:
        gen = Isaac64([42])
        _take(gen, 256)
        assert len(generate_calls) == 1
        assert gen.count == RANDSIZ

        gen.next_u64()
        assert len(generate_calls) == 2
        assert gen.count == 1

        _take(gen, 255)
        assert len(generate_calls) == 2

    def test_batch_matches_result_buffer(self) -> None:
        gen = Isaac64([3, 1, 4, 1, 5])
        first = _take(gen, 256)
        assert first == gen._result

    def test_from_generator_draws_256_words(self, counting_source) -> None:
        Isaac64.from_generator(counting_source)
        assert counting_source.drawn == 256

    def test_outputs_are_64_bit(self) -> None:
        gen = Isaac64([MASK64] * 256)
        assert all(0 <= w <= MASK64 for w in _take(gen, 1024))
