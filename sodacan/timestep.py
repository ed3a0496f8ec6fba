"""Frame time step, usable anywhere a float is."""

from __future__ import annotations


class Timestep(float):
    """Elapsed time between frames, in seconds."""

    @property
    def seconds(self) -> float:
        return float(self)

    @property
    def milliseconds(self) -> float:
        return float(self) * 1000.0