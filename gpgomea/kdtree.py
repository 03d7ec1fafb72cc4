"""A k-d tree over vectors, with nearest-neighbour searches."""

from __future__ import annotations

import bisect
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from gpgomea.utils import _dont_care_match, compute_distance, hash_vector


@dataclass
class _Node:
    idx: int
    axis: int
    children: tuple[_Node | None, _Node | None] = (None, None)


def _as_point(point: Iterable[float]) -> np.ndarray:
    return np.array(point, dtype=np.float64).reshape(-1)


class KDTree:
    """A k-d tree of points, searched by squared Euclidean distance.

    Points added with :meth:`add_point` only take part in searches after the
    next :meth:`build`.
    """

    def __init__(self, points: Iterable[Iterable[float]] | None = None) -> None:
        self._points: list[np.ndarray] = []
        self._root: _Node | None = None
        self._dim = 0
        if points is not None:
            self.build(points)

    def build(self, points: Iterable[Iterable[float]] | None = None) -> None:
        """Build the tree, from ``points`` if given, else from the stored points."""
        if points is not None:
            self._points = [_as_point(p) for p in points]
        self._root = None
        if not self._points:
            return
        self._dim = self._points[0].size
        if self._dim == 0:
            raise ValueError("points must have at least one coordinate")
        self._root = self._build(list(range(len(self._points))), 0)

    def _build(self, indices: list[int], depth: int) -> _Node | None:
        if not indices:
            return None
        axis = depth % self._dim
        mid = (len(indices) - 1) // 2
        indices = sorted(indices, key=lambda i: self._points[i][axis])
        return _Node(
            idx=indices[mid],
            axis=axis,
            children=(
                self._build(indices[:mid], depth + 1),
                self._build(indices[mid + 1 :], depth + 1),
            ),
        )

    def add_point(self, point: Iterable[float]) -> None:
        """Store a point; it is searchable after the next build."""
        self._points.append(_as_point(point))

    def delete_point(self, point: Iterable[float]) -> bool:
        """Remove the first stored point equal to ``point``.

        The built tree is discarded, so call :meth:`build` before searching.
        Returns whether a point was removed.
        """
        wanted = hash_vector(point)
        for i, stored in enumerate(self._points):
            if hash_vector(stored) == wanted:
                del self._points[i]
                self._root = None
                return True
        return False

    def clear(self) -> None:
        """Drop the tree and all points."""
        self._root = None
        self._points = []

    def validate(self) -> bool:
        """Tell whether every node splits its two children correctly."""

        def ok(node: _Node | None) -> bool:
            if node is None:
                return True
            left, right = node.children
            value = self._points[node.idx][node.axis]
            if left is not None and right is not None:
                if value < self._points[left.idx][node.axis]:
                    return False
                if value > self._points[right.idx][node.axis]:
                    return False
            return ok(left) and ok(right)

        return ok(self._root)

    def nn_search(
        self, query: Iterable[float], no_perfect_match: bool = False
    ) -> tuple[int | None, float]:
        """Return the index of the nearest point and its squared distance.

        With ``no_perfect_match`` points at distance zero are skipped. The
        index is None when nothing was found.
        """
        query = _as_point(query)
        best_idx: int | None = None
        best = math.inf

        def visit(node: _Node | None) -> None:
            nonlocal best_idx, best
            if node is None:
                return
            train = self._points[node.idx]
            dist = compute_distance(query, train)
            if (not no_perfect_match or dist != 0) and dist < best:
                best, best_idx = dist, node.idx
            q = float(query[node.axis])
            t = float(train[node.axis])
            near = 0 if (q < t or math.isnan(q)) else 1
            visit(node.children[near])
            if abs(q - t) < best or math.isnan(q):
                visit(node.children[1 - near])

        visit(self._root)
        return best_idx, best

    def nn_search_dont_cares(
        self, query: Sequence[Iterable[float]], no_perfect_match: bool = False
    ) -> tuple[int | None, float]:
        """Nearest-neighbour search where each coordinate lists acceptable values.

        A NaN among a coordinate's values means any value is acceptable there.
        """
        best_idx: int | None = None
        best = math.inf

        def visit(node: _Node | None) -> None:
            nonlocal best_idx, best
            if node is None:
                return
            train = self._points[node.idx]
            dist, generated = _dont_care_match(query, train)
            if (not no_perfect_match or dist != 0) and dist < best:
                best, best_idx = dist, node.idx
            q = float(generated[node.axis])
            t = float(train[node.axis])
            near = 0 if q < t else 1
            visit(node.children[near])
            if abs(q - t) < best:
                visit(node.children[1 - near])

        visit(self._root)
        return best_idx, best

    def knn_search(self, query: Iterable[float], k: int) -> list[int]:
        """Return the indices of the ``k`` nearest points, closest first."""
        if k < 1:
            raise ValueError("k must be at least 1")
        query = _as_point(query)
        queue: list[tuple[float, int]] = []

        def visit(node: _Node | None) -> None:
            if node is None:
                return
            train = self._points[node.idx]
            bisect.insort_right(queue, (compute_distance(query, train), node.idx))
            del queue[k:]
            q = float(query[node.axis])
            t = float(train[node.axis])
            near = 0 if q < t else 1
            visit(node.children[near])
            if len(queue) < k or abs(q - t) < queue[-1][0]:
                visit(node.children[1 - near])

        visit(self._root)
        return [idx for _, idx in queue]

    def radius_search(self, query: Iterable[float], radius: float) -> list[int]:
        """Return the indices of points whose squared distance is below ``radius``."""
        query = _as_point(query)
        found: list[int] = []

        def visit(node: _Node | None) -> None:
            if node is None:
                return
            train = self._points[node.idx]
            if compute_distance(query, train) < radius:
                found.append(node.idx)
            q = float(query[node.axis])
            t = float(train[node.axis])
            near = 0 if q < t else 1
            visit(node.children[near])
            if abs(q - t) < radius:
                visit(node.children[1 - near])

        visit(self._root)
        return found

    def get_point(self, index: int) -> np.ndarray:
        """Return the stored point at ``index``."""
        return self._points[index]

    def get_points(self, indices: Iterable[int]) -> list[np.ndarray]:
        """Return the stored points at ``indices``."""
        return [self._points[i] for i in indices]

    def __len__(self) -> int:
        return len(self._points)