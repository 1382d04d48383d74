"""
Ordering properties of natcmp over random corpora.

Tests cover:
- Reflexivity and antisymmetry
- Transitivity
- Agreement with a token-key reference ordering
- Default strategy equivalence
- Concurrent use
"""

from concurrent.futures import ThreadPoolExecutor
import functools
import itertools
import re

import numpy as np
import pytest

from natcmp import AsciiCaseInsensitiveStrategy, Comparator, natcmp

ALPHABET = b"aAbBzZ_.-0012789 \xe9"
_RUN = re.compile(rb"[0-9]+|[^0-9]+")


def random_corpus(seed: int, size: int, max_len: int = 8):
    """Generate random byte strings biased toward digit runs and case pairs."""
    rng = np.random.default_rng(seed)
    corpus = [b"", b"0", b"00", b"a", b"A", b"a0", b"a00", b"a1", b"a01", b"1a"]
    while len(corpus) < size:
        length = int(rng.integers(0, max_len + 1))
        picks = rng.integers(0, len(ALPHABET), size=length)
        corpus.append(bytes(ALPHABET[i] for i in picks))
    return corpus


def reference_key(s: bytes, fold_case: bool = True):
    """Token key: digit runs by (significant length, digits, raw length)."""
    key = []
    for match in _RUN.finditer(s):
        run = match.group()
        if run[:1].isdigit():
            significant = run.lstrip(b"0") or b"0"
            key.append((0, len(significant), significant, len(run)))
        else:
            key.append((1, run.lower() if fold_case else run))
    return key


def reference_cmp(a: bytes, b: bytes, fold_case: bool = True) -> int:
    ka = reference_key(a, fold_case)
    kb = reference_key(b, fold_case)
    return (ka > kb) - (ka < kb)


@pytest.fixture(scope="module")
def corpus():
    return random_corpus(seed=42, size=30)


class TestOrderingProperties:
    """Algebraic properties of the induced order."""

    def test_reflexive(self, corpus):
        for s in corpus:
            assert natcmp(s, s) == 0

    def test_antisymmetric(self, corpus):
        for x, y in itertools.product(corpus, repeat=2):
            assert natcmp(x, y) == -natcmp(y, x)

    def test_transitive(self, corpus):
        results = {
            (x, y): natcmp(x, y) for x, y in itertools.product(corpus, repeat=2)
        }
        for x, y, z in itertools.product(corpus, repeat=3):
            if results[x, y] <= 0 and results[y, z] <= 0:
                assert results[x, z] <= 0, (x, y, z)

    def test_result_is_a_sign(self, corpus):
        for x, y in itertools.product(corpus, repeat=2):
            assert natcmp(x, y) in (-1, 0, 1)

    def test_sorted_order_is_consistent(self, corpus):
        ordered = sorted(corpus, key=functools.cmp_to_key(natcmp))
        for i, j in itertools.combinations(range(len(ordered)), 2):
            assert natcmp(ordered[i], ordered[j]) <= 0


class TestReferenceOrdering:
    """natcmp agrees with an independent token-key ordering."""

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_case_insensitive(self, seed):
        corpus = random_corpus(seed=seed, size=40)
        for x, y in itertools.product(corpus, repeat=2):
            assert natcmp(x, y) == reference_cmp(x, y), (x, y)

    @pytest.mark.parametrize("seed", [3, 4])
    def test_case_sensitive(self, seed):
        corpus = random_corpus(seed=seed, size=40)
        for x, y in itertools.product(corpus, repeat=2):
            expected = reference_cmp(x, y, fold_case=False)
            assert natcmp(x, y, "ascii-case-sensitive") == expected, (x, y)

    @pytest.mark.slow
    def test_large_corpus(self):
        corpus = random_corpus(seed=1234, size=300, max_len=16)
        for x, y in itertools.product(corpus, repeat=2):
            assert natcmp(x, y) == reference_cmp(x, y), (x, y)


class TestDefaultStrategyEquivalence:
    """No strategy behaves exactly like the explicit ASCII strategy."""

    def test_same_results(self, corpus):
        explicit = AsciiCaseInsensitiveStrategy()
        for x, y in itertools.product(corpus, repeat=2):
            assert natcmp(x, y) == natcmp(x, y, explicit)


class TestConcurrency:
    """Comparisons share no mutable state."""

    def test_threads_agree_with_serial(self, corpus):
        pairs = list(itertools.product(corpus, repeat=2))
        compare = Comparator()
        serial = [compare(x, y) for x, y in pairs]

        with ThreadPoolExecutor(max_workers=4) as pool:
            parallel = list(pool.map(lambda p: compare(*p), pairs))

        assert parallel == serial
