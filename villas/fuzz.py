"""Seeded random placement fuzzing for the lattice.

Drives two identical lattices with the same stream of random
``(tile, row, col)`` triples, split into groups: one lattice receives each
group through repeated ``place`` calls, the other through a single
``place_many`` call. After every group both must agree on the outcome (same
error type and message, or success) and on every cell.

A small share of placements (``OUT_OF_BOUNDS_RATE``) fall just outside the
lattice so out-of-bounds failures are compared too.

Lattices are never reset between groups, so later groups run against the
cells committed (or partially committed) by earlier ones.
"""
from __future__ import annotations

import logging
import random
import time
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from .errors import InvalidTransitionError, OutOfBoundsError, VillasError
from .features import Feature
from .lattice import Bounds, Lattice
from .metrics import init_metrics
from .tiles import Tile

logger = logging.getLogger(__name__)

Outcome = Tuple[str, Optional[str], Optional[str]]

OUT_OF_BOUNDS_RATE = 0.05


def random_placements(
    bounds: Bounds, rng: random.Random, out_of_bounds_rate: float = 0.0
) -> Iterator[Feature]:
    """Endless stream of placements with uniformly random tiles.

    Coordinates are in bounds, except that roughly ``out_of_bounds_rate`` of
    them land one step outside the lattice (row -1 or row ``bounds.rows``).
    """
    tiles = list(Tile)
    while True:
        tile = tiles[rng.randrange(len(tiles))]
        if out_of_bounds_rate and rng.random() < out_of_bounds_rate:
            row = rng.choice((-1, bounds.rows))
        else:
            row = rng.randrange(bounds.rows)
        yield Feature(tile, row, rng.randrange(bounds.columns))


def _outcome(action: Callable[[], Any]) -> Outcome:
    try:
        action()
    except VillasError as exc:
        return ("error", type(exc).__name__, str(exc))
    return ("ok", None, None)


def _apply_sequentially(lattice: Lattice, group: List[Feature], metrics: Dict[str, Any]) -> None:
    for feature in group:
        metrics['placements_attempted'] += 1
        try:
            lattice.place(*feature)
        except OutOfBoundsError:
            metrics['out_of_bounds'] += 1
            raise
        except InvalidTransitionError:
            metrics['invalid_transitions'] += 1
            raise
        metrics['placements_applied'] += 1


def compare_batch_and_sequential(
    width: int,
    height: int,
    *,
    seed: int | None = None,
    placements: int = 200,
    group_size: int = 2,
    out_of_bounds_rate: float = OUT_OF_BOUNDS_RATE,
) -> Dict[str, Any]:
    """Run the batch-vs-sequential equivalence check and return a report dict.

    The report carries the seed actually used (a random one is drawn when
    ``seed`` is None), the metrics counters, any mismatching groups and the
    final rendering of the sequentially driven lattice.
    """
    if placements < 0:
        raise ValueError(f"placements must be >= 0; got {placements}")
    if group_size < 1:
        raise ValueError(f"group_size must be >= 1; got {group_size}")
    if not 0.0 <= out_of_bounds_rate <= 1.0:
        raise ValueError(f"out_of_bounds_rate must be within [0, 1]; got {out_of_bounds_rate}")
    if seed is None:
        seed = random.randint(1, 1_000_000)
    rng = random.Random(seed)
    sequential = Lattice(width, height)
    batch = Lattice(width, height)
    metrics = init_metrics()
    start = time.perf_counter()

    stream = random_placements(sequential.bounds(), rng, out_of_bounds_rate)
    drawn = [next(stream) for _ in range(placements)]
    groups = [drawn[i:i + group_size] for i in range(0, len(drawn), group_size)]

    mismatches: List[Dict[str, Any]] = []
    for index, group in enumerate(groups):
        seq_result = _outcome(lambda: _apply_sequentially(sequential, group, metrics))
        batch_result = _outcome(lambda: batch.place_many(group))
        metrics['groups_compared'] += 1
        if seq_result != batch_result or sequential != batch:
            metrics['mismatches'] += 1
            mismatches.append({
                'group': index,
                'placements': [repr(f) for f in group],
                'sequential': list(seq_result),
                'batch': list(batch_result),
            })

    metrics['runtime_ms'] = round((time.perf_counter() - start) * 1000, 2)
    logger.debug(
        "Fuzz seed=%s size=%sx%s groups=%s mismatches=%s runtime_ms=%s",
        seed, width, height, metrics['groups_compared'], metrics['mismatches'], metrics['runtime_ms'],
    )
    return {
        'seed': seed,
        'width': width,
        'height': height,
        'group_size': group_size,
        'metrics': metrics,
        'mismatches': mismatches,
        'ok': not mismatches,
        'lattice': str(sequential).split("\n"),
    }


__all__ = ["random_placements", "compare_batch_and_sequential"]
