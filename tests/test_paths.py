"""Tests for shortest-path computation."""

import itertools
import pytest

from wordgraph.analysis.paths import DISCONNECTED, FOUND, NOT_FOUND, shortest_path, shortest_paths_from
from wordgraph.core.builder import build_graph
from wordgraph.datasets import generate_sentence_corpus
from wordgraph.graph import Graph


def _simple_paths(graph, start, end):
    """Every simple path start -> end, by exhaustive DFS."""
    stack = [(start, (start,))]
    while stack:
        node, path = stack.pop()
        if node == end:
            yield path
            continue
        for nxt in graph.successors(node):
            if nxt not in path:
                stack.append((nxt, path + (nxt,)))


class TestShortestPath:

    def test_lighter_two_hop_route(self, word_graph):
        res = shortest_path(word_graph, "word1", "word4")
        assert res.status == FOUND
        assert res.path == ("word1", "word2", "word4")
        assert res.weight == 3

    def test_direct_edge(self, word_graph):
        res = shortest_path(word_graph, "word1", "word3")
        assert res.path == ("word1", "word3") and res.weight == 3

    def test_direct_edge_beats_longer_route(self, science_graph):
        res = shortest_path(science_graph, "the", "dataset")
        assert res.path == ("the", "dataset")
        assert res.weight == 2

    def test_heavier_direct_edge_loses(self):
        g = Graph({"a": {"b": 1, "d": 5}, "b": {"d": 2}})
        assert shortest_path(g, "a", "d").path == ("a", "b", "d")

    def test_self_path(self, word_graph):
        res = shortest_path(word_graph, "isolated", "isolated")
        assert res.path == ("isolated",) and res.weight == 0

    def test_disconnected(self, word_graph):
        for a, b in (("word1", "isolated"), ("isolated", "word1"), ("word4", "word1")):
            res = shortest_path(word_graph, a, b)
            assert res.status == DISCONNECTED
            assert res.path == () and res.weight is None

    def test_missing_nodes_named(self, word_graph):
        assert shortest_path(word_graph, "nope", "word1").missing == ("nope",)
        assert shortest_path(word_graph, "word1", "nope").missing == ("nope",)
        res = shortest_path(word_graph, "x", "y")
        assert res.status == NOT_FOUND and res.missing == ("x", "y")

    def test_equal_cost_ties_are_stable(self):
        g = Graph({"s": {"b": 1, "a": 1}, "a": {"t": 1}, "b": {"t": 1}})
        paths = {shortest_path(g, "s", "t").path for _ in range(5)}
        assert len(paths) == 1

    def test_matches_brute_force(self):
        g = build_graph(generate_sentence_corpus(n_sentences=12, seed=5)["token"].tolist())
        for a, b in itertools.product(sorted(g)[:6], sorted(g)):
            res = shortest_path(g, a, b)
            candidates = [g.path_weight(p) for p in _simple_paths(g, a, b)]
            if not candidates:
                assert res.status == DISCONNECTED
                continue
            assert res.weight == min(candidates)
            assert g.path_weight(res.path) == res.weight
            assert res.path[0] == a and res.path[-1] == b


class TestShortestPathsFrom:

    def test_all_reachable(self, word_graph):
        res = shortest_paths_from(word_graph, "word1")
        assert set(res) == {"word1", "word2", "word3", "word4"}
        assert res["word4"].weight == 3
        assert res["word1"].path == ("word1",)

    def test_unknown_start(self, word_graph):
        assert shortest_paths_from(word_graph, "nope") == {}


class TestPathMessages:

    def test_messages(self, word_graph):
        assert shortest_path(word_graph, "word1", "word4").message() == "*word1* → word2 → *word4*"
        assert shortest_path(word_graph, "word1", "word1").message() == "*word1*"
        assert shortest_path(word_graph, "word1", "isolated").message() == '"word1" and "isolated" are not connected!'
        assert shortest_path(word_graph, "nonexistent", "word1").message() == 'No "nonexistent" or "word1" in the graph!'
