"""Static lon/lat plot of the envelope with matplotlib."""

from __future__ import annotations

from math import cos, radians

from matplotlib.artist import Artist
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from dispersim.envelope import FiringParameters, Segment

from .overlay import OverlayRenderer


def _linestyle(dash_array: str):
    dashes = tuple(float(d) for d in dash_array.replace(",", " ").split())
    return (0, dashes) if dashes else "solid"


class MatplotlibOverlayRenderer(OverlayRenderer[list[Artist]]):
    """Plots constructions on a matplotlib ``Axes`` (x = longitude, y = latitude)."""

    def __init__(self, ax: Axes | None = None):
        super().__init__()
        if ax is None:
            fig = Figure(figsize=(8, 8))
            ax = fig.add_subplot()
        self.ax = ax
        self.ax.set_xlabel("Longitude (°)")
        self.ax.set_ylabel("Latitude (°)")
        self.ax.grid(True, alpha=0.3)

    def _draw_origin(self, params: FiringParameters) -> list[Artist]:
        lat, lon = params.origin.to_deg()
        # equal ground distances on both axes near the firing point
        self.ax.set_aspect(1 / max(cos(radians(lat)), 1e-6))
        self.ax.set_title(f"Dispersion envelope ({lat:.4f}, {lon:.4f})")
        return self.ax.plot([lon], [lat], marker="^", color="black", linestyle="none", label="Firing point")

    def _draw(self, segment: Segment) -> list[Artist]:
        style = segment.style
        lats = [p.lat_deg for p in segment.points]
        lons = [p.lon_deg for p in segment.points]
        artists: list[Artist] = self.ax.plot(
            lons,
            lats,
            color=style.color,
            linewidth=style.weight / 2,
            alpha=style.opacity,
            linestyle=_linestyle(style.dash_array),
            label=segment.label.value,
        )
        if not segment.is_arc:
            artists.append(self.ax.scatter([lons[-1]], [lats[-1]], s=20, color=style.color))
        return artists

    def _remove(self, handle: list[Artist]) -> None:
        for artist in handle:
            artist.remove()

    def save(self, path: str) -> None:
        self.ax.relim()
        self.ax.autoscale_view()
        self.ax.legend(loc="best", fontsize="small", ncol=2)
        self.ax.figure.savefig(path, dpi=150, bbox_inches="tight")
