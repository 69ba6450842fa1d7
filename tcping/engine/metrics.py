# tcping/engine/metrics.py
from typing import Optional

JITTER_GAIN = 1.0 / 16.0


def smooth_jitter(prev_jitter: Optional[float], diff: float) -> float:
    """
    RFC 3550 style estimator: J = J + (|D| - J) / 16.
    The first difference seeds the estimate directly.
    """
    diff = abs(diff)
    if prev_jitter is None:
        return diff
    return prev_jitter + (diff - prev_jitter) * JITTER_GAIN


def loss_percentage(transmitted: int, received: int) -> float:
    if transmitted == 0:
        return 0.0
    return (transmitted - received) / transmitted * 100.0
