import math
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

import constants
from tower import GaussianRational, Kind, to_canonical


class TestValues:
    @pytest.mark.parametrize("name, expected", [
        ("E", math.e),
        ("LN2", math.log(2)),
        ("LN10", math.log(10)),
        ("LOG2E", 1 / math.log(2)),
        ("LOG10E", 1 / math.log(10)),
        ("PI", math.pi),
        ("SQRT1_2", math.sqrt(0.5)),
        ("SQRT2", math.sqrt(2)),
    ])
    def test_nearest_double(self, name, expected):
        value = constants.constant(name)
        assert value == to_canonical(expected)
        assert value.kind is Kind.RATIONAL
        assert float(value) == expected

    def test_i(self):
        assert constants.I == GaussianRational(0, 1, 1, 1)
        assert constants.I * constants.I == -1

    def test_attribute_access(self):
        assert constants.PI is constants.constant("PI")

    def test_unknown(self):
        with pytest.raises(KeyError):
            constants.constant("TAU")
        with pytest.raises(AttributeError):
            getattr(constants, "TAU")


class TestCache:
    def test_same_object_every_time(self):
        assert constants.constant("E") is constants.constant("E")

    def test_built_once_under_contention(self, monkeypatch):
        monkeypatch.setattr(constants, "_cache", {})
        calls = []
        barrier = threading.Barrier(8)

        def build():
            calls.append(1)
            return to_canonical(math.pi)

        def fetch(_):
            barrier.wait()
            return constants.constant("PI")

        monkeypatch.setitem(constants._SOURCES, "PI", build)
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(fetch, range(8)))

        assert len(calls) == 1
        assert all(r is results[0] for r in results)
