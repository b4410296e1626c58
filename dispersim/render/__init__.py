"""Envelope renderers.

Components:
    OverlayRenderer: Base class with a label -> handle mapping and replace_all
    FoliumOverlayRenderer: Interactive HTML map (tile layer switcher, markers)
    MatplotlibOverlayRenderer: Static figure
"""

from .folium_map import FoliumOverlayRenderer
from .mpl_plot import MatplotlibOverlayRenderer
from .overlay import OverlayRenderer

__all__ = ["OverlayRenderer", "FoliumOverlayRenderer", "MatplotlibOverlayRenderer"]
