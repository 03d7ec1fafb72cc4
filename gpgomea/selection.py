"""Tournament selection over candidates that carry cached fitness values."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

import numpy as np

T = TypeVar("T", bound=Any)


def _generator(rng: np.random.Generator | None) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def _check(candidates: Sequence[Any], tournament_size: int) -> None:
    if not candidates:
        raise ValueError("cannot select from an empty set of candidates")
    if tournament_size < 1:
        raise ValueError("tournament size must be at least 1")


def tournament_winner(
    candidates: Sequence[T],
    tournament_size: int,
    rng: np.random.Generator | None = None,
) -> T:
    """Return the candidate with the lowest ``cached_fitness`` among random draws.

    ``tournament_size`` candidates are drawn with replacement; on a tie the
    earlier draw wins.
    """
    _check(candidates, tournament_size)
    rng = _generator(rng)
    draws = rng.integers(len(candidates), size=tournament_size)
    winner = candidates[draws[0]]
    for index in draws[1:]:
        candidate = candidates[index]
        if candidate.cached_fitness < winner.cached_fitness:
            winner = candidate
    return winner


def mo_tournament_winner(
    candidates: Sequence[T],
    tournament_size: int,
    rng: np.random.Generator | None = None,
) -> T:
    """Return the best of random draws by ``rank``, then ``crowding_distance``.

    A lower rank wins; at equal rank the larger crowding distance wins.
    """
    _check(candidates, tournament_size)
    rng = _generator(rng)
    draws = rng.integers(len(candidates), size=tournament_size)
    winner = candidates[draws[0]]
    for index in draws[1:]:
        candidate = candidates[index]
        if candidate.rank < winner.rank or (
            candidate.rank == winner.rank
            and candidate.crowding_distance > winner.crowding_distance
        ):
            winner = candidate
    return winner


def population_wise_tournament_selection(
    population: Sequence[T],
    selection_size: int,
    tournament_size: int,
    rng: np.random.Generator | None = None,
) -> list[T]:
    """Select by disjoint tournaments over random permutations of the population.

    Each round shuffles the population and splits it into groups of
    ``tournament_size``; the fittest of each group is selected. As many whole
    rounds are run as fit in ``selection_size``.
    """
    _check(population, tournament_size)
    per_round = len(population) // tournament_size
    if per_round == 0:
        raise ValueError("tournament size must not exceed the population size")
    rng = _generator(rng)
    selected: list[T] = []
    for _ in range(selection_size // per_round):
        perm = rng.permutation(len(population))
        for group in range(per_round):
            members = perm[group * tournament_size : (group + 1) * tournament_size]
            winner = population[members[0]]
            for index in members[1:]:
                if population[index].cached_fitness < winner.cached_fitness:
                    winner = population[index]
            selected.append(winner)
    return selected