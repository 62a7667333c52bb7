"""Iterative PageRank with dangling-mass redistribution.

Public API:
    PageRankConfig: Reset probability, tolerance and iteration cap.
    PageRankResult: Ranks, edge weights and iteration count.
    page_rank(store, config) -> PageRankResult
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ..exceptions import ConvergenceError, ValidationError
from ..graph import Edge, GraphStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageRankConfig:
    """Configuration for :func:`page_rank`.

    Attributes:
        reset_probability: Share of rank spread uniformly each round
            (one minus the damping factor).
        tol: Stop once the L1 change between rounds drops below this.
        max_iter: Rounds allowed before giving up with ConvergenceError.
    """

    reset_probability: float = 0.15
    tol: float = 0.01
    max_iter: int = 100

    def __post_init__(self) -> None:
        if not 0.0 <= self.reset_probability <= 1.0:
            raise ValidationError(
                f"reset_probability must be in [0, 1], got {self.reset_probability}"
            )
        if self.tol <= 0:
            raise ValidationError(f"tol must be > 0, got {self.tol}")
        if self.max_iter < 1:
            raise ValidationError(f"max_iter must be >= 1, got {self.max_iter}")


@dataclass(frozen=True)
class PageRankResult:
    """Outcome of a PageRank run.

    Attributes:
        ranks: Vertex id -> rank; ranks sum to 1.
        edge_weights: Edge -> share of its source's rank it carries
            (1 / out-degree of the source).
        iterations: Rounds run before convergence.
    """

    ranks: Mapping[str, float]
    edge_weights: Mapping[Edge, float]
    iterations: int


def page_rank(store: GraphStore, config: PageRankConfig | None = None) -> PageRankResult:
    """Compute PageRank over *store*.

    Ranks start uniform at 1/N.  Each round every vertex splits its rank
    evenly over its out-edges, and vertices without out-edges spread
    theirs over all vertices so total mass is conserved.  The new rank is
    ``reset/N + (1 - reset) * received``, computed for all vertices from
    the previous round's ranks.

    Raises:
        ConvergenceError: If the L1 change is still >= ``tol`` after
            ``max_iter`` rounds.
    """
    config = config or PageRankConfig()
    index = store.index
    ids = [v.vertex_id for v in store.vertices]
    n = len(ids)
    weights = MappingProxyType(
        {e: 1.0 / index.out_degree(e.src) for e in store.edges}
    )
    if n == 0:
        return PageRankResult(MappingProxyType({}), weights, 0)

    reset = config.reset_probability
    dangling_ids = [vid for vid in ids if index.out_degree(vid) == 0]
    ranks = {vid: 1.0 / n for vid in ids}

    for iteration in range(1, config.max_iter + 1):
        dangling_share = sum(ranks[vid] for vid in dangling_ids) / n
        received = dict.fromkeys(ids, dangling_share)
        for edge, weight in weights.items():
            received[edge.dst] += ranks[edge.src] * weight

        updated = {vid: reset / n + (1.0 - reset) * received[vid] for vid in ids}
        delta = sum(abs(updated[vid] - ranks[vid]) for vid in ids)
        ranks = updated

        if delta < config.tol:
            logger.debug("PageRank converged after %d iteration(s), delta=%.6f", iteration, delta)
            return PageRankResult(MappingProxyType(ranks), weights, iteration)

    raise ConvergenceError(
        f"PageRank did not converge within {config.max_iter} iterations "
        f"(tol={config.tol}, last delta={delta:.6g})"
    )


__all__ = ["PageRankConfig", "PageRankResult", "page_rank"]
