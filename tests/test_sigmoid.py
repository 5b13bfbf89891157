import math
import threading

import numpy as np
import pytest

from backprop.sigmoid import TABLE_MAX, TABLE_MIN, TABLE_SIZE, SigmoidTable, default_table


def test_samples_match_logistic_function() -> None:
    table = SigmoidTable.build()
    assert len(table) == TABLE_SIZE
    step = (TABLE_MAX - TABLE_MIN) / (TABLE_SIZE - 1)
    for i in (0, 1, 17, 4999, 5000, 9998, 9999):
        x = TABLE_MIN + i * step
        assert table.samples[i] == pytest.approx(1.0 / (1.0 + math.exp(-x)), rel=1e-12)


def test_lookup_is_bounded_and_monotonic() -> None:
    table = default_table()
    xs = np.linspace(-50.0, 50.0, 2001)
    values = [table.lookup(float(x)) for x in xs]
    assert all(0.0 < value < 1.0 for value in values)
    assert all(a <= b for a, b in zip(values, values[1:]))
    assert np.all(np.diff(table.samples) >= 0.0)


def test_lookup_saturates_outside_domain() -> None:
    table = default_table()
    low = table.lookup(TABLE_MIN)
    high = table.lookup(TABLE_MAX)
    assert low == table.samples[0]
    assert high == table.samples[-1]
    for x in (-6.5, -100.0, -1e300, float("-inf")):
        assert table.lookup(x) == low
    for x in (6.5, 100.0, 1e300, float("inf")):
        assert table.lookup(x) == high


def test_lookup_truncates_to_lower_sample() -> None:
    table = default_table()
    for i in (0, 10, 2500, 7777, 9997):
        midpoint = table.domain_min + (i + 0.5) * table.step
        assert table.lookup(midpoint) == table.samples[i]
    # no interpolation: just below zero still reads the lower neighbour
    assert table.lookup(-1e-9) < 0.5
    assert table.lookup(0.0) == pytest.approx(0.5, abs=table.step)


def test_lookup_returns_python_float() -> None:
    assert type(default_table()(0.25)) is float


def test_samples_are_read_only() -> None:
    table = default_table()
    with pytest.raises(ValueError):
        table.samples[0] = 0.0


def test_default_table_is_built_once() -> None:
    seen = []

    def grab() -> None:
        seen.append(default_table())

    threads = [threading.Thread(target=grab) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert all(table is seen[0] for table in seen)
    assert default_table() is seen[0]


def test_build_validates_parameters() -> None:
    with pytest.raises(ValueError):
        SigmoidTable.build(resolution=1)
    with pytest.raises(ValueError):
        SigmoidTable.build(domain_min=1.0, domain_max=1.0)
    with pytest.raises(ValueError):
        SigmoidTable.build(resolution=0)


def test_lookup_rejects_nan() -> None:
    with pytest.raises(ValueError):
        default_table().lookup(float("nan"))


def test_custom_resolution() -> None:
    table = SigmoidTable.build(-4.0, 4.0, 9)
    assert table.step == pytest.approx(1.0)
    assert table.lookup(0.99) == table.samples[4] == pytest.approx(0.5)
    assert table.lookup(-3.5) == table.samples[0]
