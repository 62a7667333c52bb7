"""Community detection by synchronous label propagation.

Public API:
    LabelPropagationConfig: Iteration count.
    label_propagation(store, config) -> Mapping[str, str]
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ..exceptions import ValidationError
from ..graph import Direction, GraphStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LabelPropagationConfig:
    """Configuration for :func:`label_propagation`.

    Attributes:
        max_iter: Number of voting rounds to run.
    """

    max_iter: int

    def __post_init__(self) -> None:
        if self.max_iter < 1:
            raise ValidationError(f"max_iter must be >= 1, got {self.max_iter}")


def label_propagation(
    store: GraphStore,
    config: LabelPropagationConfig,
) -> Mapping[str, str]:
    """Run label propagation and return vertex id -> label.

    Every vertex starts with its own id as label.  Each round, all
    vertices adopt the most frequent label among their neighbours in both
    directions, computed from the previous round's labels.  Each edge is
    one vote, so parallel edges weigh more.  Ties go to the smallest
    label; a vertex without neighbours keeps its label.  Stops after
    ``max_iter`` rounds or as soon as a round changes nothing.
    """
    index = store.index
    labels: dict[str, str] = {v.vertex_id: v.vertex_id for v in store.vertices}

    for iteration in range(1, config.max_iter + 1):
        updated: dict[str, str] = {}
        for vid, current in labels.items():
            votes = Counter(labels[other] for _, other in index.neighbors(vid, Direction.BOTH))
            if not votes:
                updated[vid] = current
                continue
            best = max(votes.values())
            updated[vid] = min(label for label, n in votes.items() if n == best)

        if updated == labels:
            logger.debug("Label propagation stable after %d iteration(s)", iteration)
            break
        labels = updated

    return MappingProxyType(labels)


__all__ = ["LabelPropagationConfig", "label_propagation"]
