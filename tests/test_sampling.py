import logging
from collections import Counter

import numpy as np

from hexworld.sampling import Weighted, rate, sample, sample_n, shuffle, weighted_sample, weighted_sample_n


def test_sample_empty_logs_and_returns_none(caplog):
    rng = np.random.default_rng(0)
    with caplog.at_level(logging.ERROR, logger="hexworld.sampling"):
        assert sample(rng, []) is None
        assert weighted_sample(rng, []) is None
        assert weighted_sample_n(rng, [], 3) == []
    assert caplog.text.count("Trying to sample an empty list") == 3


def test_sample_picks_members():
    rng = np.random.default_rng(1)
    items = ["a", "b", "c"]
    seen = {sample(rng, items) for _ in range(200)}
    assert seen == set(items)


def test_sample_n_without_replacement():
    rng = np.random.default_rng(2)
    picked = sample_n(rng, range(10), 4)
    assert len(picked) == 4 and len(set(picked)) == 4
    assert sorted(sample_n(rng, [1, 2], 5)) == [1, 2]
    assert sorted(shuffle(rng, range(6))) == list(range(6))


def test_rate_extremes():
    rng = np.random.default_rng(3)
    assert not any(rate(rng, 0.0) for _ in range(100))
    assert all(rate(rng, 1.0) for _ in range(100))


def test_weighted_sample_respects_weights():
    rng = np.random.default_rng(4)
    items = [Weighted(0.0, "never"), Weighted(9.0, "often"), Weighted(1.0, "rare")]
    counts = Counter(weighted_sample(rng, items) for _ in range(2000))
    assert counts["never"] == 0
    assert counts["often"] > counts["rare"] > 0


def test_weighted_sample_n_distinct():
    rng = np.random.default_rng(5)
    items = [Weighted(1.0, i) for i in range(5)]
    picked = weighted_sample_n(rng, items, 3)
    assert len(set(picked)) == 3
    assert sorted(weighted_sample_n(rng, items, 10)) == list(range(5))
