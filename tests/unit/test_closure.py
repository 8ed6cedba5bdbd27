"""Unit tests for featclosure.core.closure: ClosureEngine and resolve."""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from itertools import combinations

import pytest

from featclosure.core.closure import ClosureEngine, resolve

# ---------------------------------------------------------------------------
# Shared maps
# ---------------------------------------------------------------------------

_CHAIN = {"a": ["b"], "b": ["c"], "c": ["d"]}
_CYCLE = {"a": ["b"], "b": ["a"]}
_DIAMOND = {"top": ["left", "right"], "left": ["bottom"], "right": ["bottom"]}
_CRATE = {
    "default": ["tls"],
    "resolvable": ["feature1", "tls/extra_feature"],
    "feature1": [],
    "extra": [],
}
_MIXED = {
    "a": ["b", "x/y"],
    "b": ["c", "a"],
    "c": [],
    "d": ["d", "e"],
    "e": ["a"],
}

_ALL_MAPS = [_CHAIN, _CYCLE, _DIAMOND, _CRATE, _MIXED, {}]


# ===========================================================================
# Basic reachability
# ===========================================================================


class TestResolve:
    def test_empty_map_empty_seeds(self) -> None:
        assert resolve({}, []) == frozenset()

    def test_seeds_without_map_are_returned(self) -> None:
        assert resolve({}, ["a", "b"]) == frozenset({"a", "b"})

    def test_single_hop(self) -> None:
        assert resolve({"default": ["tls"]}, ["default"]) == frozenset({"default", "tls"})

    def test_multi_hop_chain(self) -> None:
        assert resolve(_CHAIN, ["a"]) == frozenset({"a", "b", "c", "d"})

    def test_chain_from_middle(self) -> None:
        assert resolve(_CHAIN, ["c"]) == frozenset({"c", "d"})

    def test_diamond_visits_shared_node_once(self) -> None:
        assert resolve(_DIAMOND, ["top"]) == frozenset({"top", "left", "right", "bottom"})

    def test_two_node_cycle_terminates(self) -> None:
        assert resolve(_CYCLE, ["a"]) == frozenset({"a", "b"})

    def test_self_implication_is_harmless(self) -> None:
        assert resolve({"a": ["a"]}, ["a"]) == frozenset({"a"})

    def test_unknown_seed_is_a_leaf(self) -> None:
        assert resolve(_CRATE, ["unknown"]) == frozenset({"unknown"})

    def test_qualified_reference_is_a_leaf(self) -> None:
        result = resolve(_CRATE, ["resolvable"])
        assert result == frozenset({"resolvable", "feature1", "tls/extra_feature"})

    def test_qualified_reference_not_expanded_even_if_key_exists(self) -> None:
        # "tls" is a key, but "tls/extra_feature" is a different name.
        implications = {"tls": ["rustls"], "x": ["tls/extra_feature"]}
        assert resolve(implications, ["x"]) == frozenset({"x", "tls/extra_feature"})

    def test_duplicate_seeds(self) -> None:
        assert resolve(_CRATE, ["default", "default", "tls"]) == frozenset({"default", "tls"})

    def test_accepts_generator_seeds(self) -> None:
        assert resolve(_CHAIN, (s for s in ["b"])) == frozenset({"b", "c", "d"})

    def test_accepts_tuple_values(self) -> None:
        assert resolve({"a": ("b",)}, ["a"]) == frozenset({"a", "b"})

    def test_long_chain_does_not_recurse(self) -> None:
        implications = {f"f{i}": [f"f{i + 1}"] for i in range(20_000)}
        result = resolve(implications, ["f0"])
        assert len(result) == 20_001

    def test_large_cycle_terminates(self) -> None:
        size = 5_000
        implications = {f"f{i}": [f"f{(i + 1) % size}"] for i in range(size)}
        assert len(resolve(implications, ["f17"])) == size


# ===========================================================================
# Properties over a handful of maps
# ===========================================================================


def _seed_sets(implications: dict[str, list[str]]) -> list[list[str]]:
    names = sorted(set(implications) | {"unknown", "x/y"})
    seeds: list[list[str]] = [[]]
    for size in (1, 2):
        seeds.extend(list(combo) for combo in combinations(names, size))
    return seeds


class TestProperties:
    @pytest.mark.parametrize("implications", _ALL_MAPS)
    def test_reflexive(self, implications: dict[str, list[str]]) -> None:
        for seeds in _seed_sets(implications):
            assert set(seeds) <= resolve(implications, seeds)

    @pytest.mark.parametrize("implications", _ALL_MAPS)
    def test_idempotent(self, implications: dict[str, list[str]]) -> None:
        for seeds in _seed_sets(implications):
            once = resolve(implications, seeds)
            assert resolve(implications, once) == once

    @pytest.mark.parametrize("implications", _ALL_MAPS)
    def test_monotonic(self, implications: dict[str, list[str]]) -> None:
        for seeds in _seed_sets(implications):
            for extra in implications:
                assert resolve(implications, seeds) <= resolve(implications, [*seeds, extra])

    @pytest.mark.parametrize("implications", _ALL_MAPS)
    def test_seed_order_irrelevant(self, implications: dict[str, list[str]]) -> None:
        for seeds in _seed_sets(implications):
            assert resolve(implications, seeds) == resolve(implications, list(reversed(seeds)))

    def test_closed_under_implication(self) -> None:
        result = resolve(_MIXED, ["d"])
        for flag in result:
            assert set(_MIXED.get(flag, ())) <= result


# ===========================================================================
# ClosureEngine
# ===========================================================================


class TestClosureEngine:
    def test_does_not_mutate_input(self) -> None:
        implications = {"a": ["b"], "b": []}
        ClosureEngine(implications).resolve(["a", "z"])
        assert implications == {"a": ["b"], "b": []}

    def test_snapshot_ignores_later_mutation(self) -> None:
        implications = {"a": ["b"]}
        engine = ClosureEngine(implications)
        implications["b"] = ["c"]
        assert engine.resolve(["a"]) == frozenset({"a", "b"})

    def test_implications_are_read_only(self) -> None:
        engine = ClosureEngine({"a": ["b"]})
        with pytest.raises(TypeError):
            engine.implications["a"] = ("c",)  # type: ignore[index]

    def test_implications_are_tuples(self) -> None:
        engine = ClosureEngine({"a": ["b", "c"]})
        assert engine.implications["a"] == ("b", "c")

    def test_reusable_across_seed_sets(self) -> None:
        engine = ClosureEngine(_CRATE)
        assert engine.resolve(["default"]) == frozenset({"default", "tls"})
        assert engine.resolve(["extra"]) == frozenset({"extra"})

    def test_shared_across_threads(self) -> None:
        engine = ClosureEngine(_MIXED)
        seed_sets = [["a"], ["c"], ["d"], ["x/y"], [], ["b", "c"]] * 20
        expected = [resolve(_MIXED, seeds) for seeds in seed_sets]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(engine.resolve, seed_sets))
        assert results == expected
        assert dict(engine.implications) == {k: tuple(v) for k, v in _MIXED.items()}

    def test_result_is_fresh_frozenset(self) -> None:
        seeds = ["a"]
        result = ClosureEngine({}).resolve(seeds)
        assert isinstance(result, frozenset)
        seeds.append("b")
        assert result == frozenset({"a"})

    def test_repr(self) -> None:
        assert repr(ClosureEngine(_CHAIN)) == "ClosureEngine(flags=3)"

    def test_logs_debug_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="featclosure.core.closure"):
            ClosureEngine(_CHAIN).resolve(["a"])
        assert "Resolved 1 seed flag(s) to 4 flag(s)" in caplog.text
