"""
Renderer Module
===============

Raster rendering of the height field with the planned route overlaid.
"""

import numpy as np
import matplotlib.pyplot as plt
from pathlib import Path
from typing import Optional, Union

from ..config import MapConfig, VisualizationConfig
from ..planning import Route
from ..terrain import sample_grid


class RouteRenderer:
    """
    Draws terrain and route into an image of exactly width x height pixels.

    The background is white with per-pixel opacity
    ``clip(elevation * gain + offset, 0, 255)``, so high ground shows up
    light-on-transparent and hollows fade out. The route is a polyline
    through the state positions in pixel coordinates (y grows downward).
    """

    def __init__(self, height_field,
                 map_config: Optional[MapConfig] = None,
                 config: Optional[VisualizationConfig] = None):
        """
        Initialize renderer.

        Args:
            height_field: Any object with ``elevation(x, y)``
            map_config: Canvas dimensions
            config: Visualization configuration
        """
        self.height_field = height_field
        self.map_config = map_config or MapConfig()
        self.config = config or VisualizationConfig()
        self._background: Optional[np.ndarray] = None

    @property
    def width(self) -> int:
        return self.map_config.width

    @property
    def height(self) -> int:
        return self.map_config.height

    def _elevation_grid(self) -> np.ndarray:
        return sample_grid(self.height_field, self.width, self.height)

    def background(self) -> np.ndarray:
        """RGBA float image, shape (height, width, 4); cached"""
        if self._background is None:
            elevation = self._elevation_grid()
            alpha = np.clip(
                elevation * self.config.background_gain + self.config.background_offset,
                0, 255
            ).astype(np.uint8)

            rgba = np.ones((self.height, self.width, 4), dtype=np.float32)
            rgba[..., 3] = alpha / 255.0
            self._background = rgba
        return self._background

    def _new_figure(self):
        dpi = self.config.dpi
        fig = plt.figure(figsize=(self.width / dpi, self.height / dpi), dpi=dpi)
        ax = fig.add_axes([0, 0, 1, 1])
        ax.set_axis_off()
        ax.imshow(self.background(), origin='upper', interpolation='nearest',
                  extent=(0, self.width, self.height, 0))
        ax.set_xlim(0, self.width)
        ax.set_ylim(self.height, 0)
        return fig, ax

    def render_terrain(self) -> plt.Figure:
        """Background only"""
        fig, _ = self._new_figure()
        return fig

    def render(self, route: Route) -> plt.Figure:
        """Background plus the route polyline"""
        fig, ax = self._new_figure()
        self.plot_route(ax, route)
        return fig

    def plot_route(self, ax, route: Route):
        """Plot a route on existing axes"""
        if route is None or len(route) < 2:
            return

        path_arr = np.array(route.positions, dtype=np.float64)
        ax.plot(path_arr[:, 0], path_arr[:, 1],
                color=self.config.path_color,
                linewidth=self.config.path_linewidth)

    def save(self, route: Optional[Route], path: Union[str, Path]) -> Path:
        """Render and write an image; ``route=None`` saves the terrain alone"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        fig = self.render_terrain() if route is None else self.render(route)
        try:
            fig.savefig(str(path), dpi=self.config.dpi, transparent=True)
        finally:
            plt.close(fig)
        return path
