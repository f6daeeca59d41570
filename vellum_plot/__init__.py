from vellum_plot.adapters import normalize_points
from vellum_plot.config import PlotConfig, load_config
from vellum_plot.errors import PlotDataError
from vellum_plot.grid import GRID_PRESENTATION, GRID_STRIDE, grid_lines
from vellum_plot.line import LinePlotStyle, render_line
from vellum_plot.points import PlotPoint, extrema, reverse, sample
from vellum_plot.scales import DataLimits, PlotTransform, build_transform, compute_limits, map_points

__all__ = [
    "DataLimits",
    "GRID_PRESENTATION",
    "GRID_STRIDE",
    "LinePlotStyle",
    "PlotConfig",
    "PlotDataError",
    "PlotPoint",
    "PlotTransform",
    "build_transform",
    "compute_limits",
    "extrema",
    "grid_lines",
    "load_config",
    "map_points",
    "normalize_points",
    "render_line",
    "reverse",
    "sample",
]
