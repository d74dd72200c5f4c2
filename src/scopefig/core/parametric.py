"""Parametric curves for the real-time output.

Each curve maps an array of stream times (in seconds) to X and Y samples.
Time is supplied by a :class:`Phase`, a monotonically advancing accumulator
owned by the output that drives it, so several outputs can run side by side
without sharing state.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from scopefig.config import CurveKind

CurveFunction = Callable[[np.ndarray, float], tuple[np.ndarray, np.ndarray]]

TWO_PI = 2.0 * math.pi


@dataclass
class Phase:
    """Stream time accumulator.

    Attributes:
        frame_time: Seconds per sample (1 / sample rate)
        t: Time of the next sample in seconds
    """

    frame_time: float
    t: float = 0.0

    @classmethod
    def for_sample_rate(cls, sample_rate: int) -> "Phase":
        return cls(frame_time=1.0 / sample_rate)

    def times(self, ramp: np.ndarray) -> np.ndarray:
        """Stream times of the next ``len(ramp)`` samples and advance."""
        times = self.t + ramp * self.frame_time
        self.t += len(ramp) * self.frame_time
        return times


def heart(t: np.ndarray, scan_rate: float) -> tuple[np.ndarray, np.ndarray]:
    """Heart curve with a slow breathing scale."""
    theta = t * TWO_PI * scan_rate
    scale = 0.8 - np.cos(t * TWO_PI * 0.5) * 0.2
    x = scale * (16.0 * np.sin(theta) ** 3) / 18.0
    y = scale * (
        13.0 * np.cos(theta)
        - 5.0 * np.cos(2.0 * theta)
        - 2.0 * np.cos(3.0 * theta)
        - np.cos(4.0 * theta)
    ) / 18.0
    return x, y


def cardioid(t: np.ndarray, scan_rate: float) -> tuple[np.ndarray, np.ndarray]:
    """Cardioid centered on its bounding box."""
    theta = t * TWO_PI * scan_rate
    x = (2.0 * np.cos(theta) - np.cos(2.0 * theta) + 1.0) / 2.6
    y = (2.0 * np.sin(theta) - np.sin(2.0 * theta)) / 2.6
    return x, y


def rose(t: np.ndarray, scan_rate: float, petals: int = 3) -> tuple[np.ndarray, np.ndarray]:
    """Rose curve ``r = cos(k * theta)``; odd k gives k petals."""
    theta = t * TWO_PI * scan_rate
    r = np.cos(petals * theta)
    return r * np.cos(theta), r * np.sin(theta)


def lissajous(t: np.ndarray, scan_rate: float) -> tuple[np.ndarray, np.ndarray]:
    """3:2 Lissajous figure."""
    theta = t * TWO_PI * scan_rate
    return 0.9 * np.sin(3.0 * theta + math.pi / 2), 0.9 * np.sin(2.0 * theta)


CURVES: dict[CurveKind, CurveFunction] = {
    CurveKind.HEART: heart,
    CurveKind.CARDIOID: cardioid,
    CurveKind.ROSE: rose,
    CurveKind.LISSAJOUS: lissajous,
}


def get_curve(kind: CurveKind | str) -> CurveFunction:
    """Look up a curve function by kind or name."""
    return CURVES[CurveKind(kind)]
