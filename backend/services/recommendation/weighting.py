"""Position-decay weighting for ordered name lists."""

import numpy as np


def position_weights(items: list[str], decay: float) -> dict[str, float]:
    """Map each name to ``1 - (i / n) * decay`` by its position ``i``.

    The first entry always gets 1.0 and later entries never get more than
    earlier ones. A repeated name keeps the weight of its first occurrence.
    """
    n = len(items)
    if n == 0:
        return {}

    weights = 1.0 - (np.arange(n) / n) * decay
    mapping: dict[str, float] = {}
    for name, weight in zip(items, weights):
        mapping.setdefault(name, float(weight))
    return mapping
