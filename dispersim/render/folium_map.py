"""Interactive Leaflet map of the envelope, built with folium."""

from __future__ import annotations

import folium

from dispersim.config import (
    DEFAULT_LATITUDE,
    DEFAULT_LONGITUDE,
    END_MARKER_RADIUS,
    MAP_ATTRIBUTION,
    MAP_MAX_ZOOM,
    MAP_ZOOM,
    TILE_LAYERS,
)
from dispersim.envelope import Envelope, FiringParameters, Segment

from .overlay import OverlayRenderer, end_popup_html, origin_popup_html


class FoliumOverlayRenderer(OverlayRenderer[folium.map.Layer | folium.Marker]):
    """Draws each construction as its own toggleable ``FeatureGroup``.

    The map carries the standard, satellite and terrain tile layers with a
    layer switcher. Lines get a circle marker at their end with a popup giving
    bearing and distance.

    Example:
        >>> from dispersim.envelope import compute_envelope
        >>> renderer = FoliumOverlayRenderer()
        >>> renderer.replace_all(compute_envelope(FiringParameters.from_values()))
        >>> renderer.save("envelope.html")
    """

    def __init__(self, zoom_start: int = MAP_ZOOM, tile_layers: dict[str, str] = TILE_LAYERS):
        super().__init__()
        self.map = folium.Map(
            location=[DEFAULT_LATITUDE, DEFAULT_LONGITUDE],
            zoom_start=zoom_start,
            tiles=None,
        )
        for i, (name, url) in enumerate(tile_layers.items()):
            folium.TileLayer(
                tiles=url,
                attr=MAP_ATTRIBUTION,
                name=name,
                max_zoom=MAP_MAX_ZOOM,
                overlay=False,
                control=True,
                show=i == 0,
            ).add_to(self.map)
        self._control: folium.LayerControl | None = None

    def replace_all(self, envelope: Envelope) -> None:
        super().replace_all(envelope)
        # the switcher must come after the layers it lists
        if self._control is not None:
            self._remove(self._control)
        self._control = folium.LayerControl().add_to(self.map)

    def _draw_origin(self, params: FiringParameters) -> folium.Marker:
        lat, lon = params.origin.to_deg()
        self.map.location = [lat, lon]
        return folium.Marker(
            location=[lat, lon],
            popup=folium.Popup(origin_popup_html(params)),
            tooltip="Firing point",
        ).add_to(self.map)

    def _draw(self, segment: Segment) -> folium.FeatureGroup:
        style = segment.style
        kind = "Arc" if segment.is_arc else "Line"
        group = folium.FeatureGroup(name=f"{kind} {segment.label.value}")
        folium.PolyLine(
            locations=segment.coordinates(),
            color=style.color,
            weight=style.weight,
            opacity=style.opacity,
            dash_array=style.dash_array,
            tooltip=f"{kind} {segment.label.value}",
        ).add_to(group)
        if not segment.is_arc:
            folium.CircleMarker(
                location=list(segment.end.to_deg()),
                radius=END_MARKER_RADIUS,
                color=style.color,
                weight=2,
                opacity=1,
                fill=True,
                fill_color=style.color,
                fill_opacity=0.8,
                popup=folium.Popup(end_popup_html(segment)),
            ).add_to(group)
        return group.add_to(self.map)

    def _remove(self, handle) -> None:
        # folium has no public API to detach a child from its parent
        self.map._children.pop(handle.get_name(), None)

    def save(self, path: str) -> None:
        self.map.save(path)
