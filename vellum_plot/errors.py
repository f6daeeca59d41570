from __future__ import annotations


class PlotDataError(ValueError):
    """Raised when plot input data is empty, malformed or otherwise unusable."""
