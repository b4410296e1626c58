"""Base class for envelope renderers.

A renderer owns one drawable handle per construction label plus one for the
firing point. :meth:`OverlayRenderer.replace_all` discards every handle and
draws the new envelope from scratch; there is no incremental patching, so
calling it twice with the same envelope leaves the same drawing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType
from typing import Generic, TypeVar

from dispersim.envelope import Construction, Envelope, FiringParameters, Segment
from dispersim.unit import Degree

H = TypeVar("H")
"""Renderer-specific handle type."""


class OverlayRenderer(ABC, Generic[H]):
    """Label-keyed drawing of an :class:`~dispersim.envelope.Envelope`."""

    def __init__(self):
        self._handles: dict[Construction, H] = {}
        self._origin_handle: H | None = None

    @property
    def handles(self) -> Mapping[Construction, H]:
        """Read-only view of the currently drawn constructions."""
        return MappingProxyType(self._handles)

    def replace_all(self, envelope: Envelope) -> None:
        """Remove everything drawn so far and draw ``envelope``."""
        self.clear()
        self._origin_handle = self._draw_origin(envelope.params)
        for label, segment in envelope.items():
            self._handles[label] = self._draw(segment)

    def clear(self) -> None:
        for label in list(self._handles):
            self._remove(self._handles.pop(label))
        if self._origin_handle is not None:
            self._remove(self._origin_handle)
            self._origin_handle = None

    @abstractmethod
    def _draw(self, segment: Segment) -> H:
        """Draw one construction and return its handle."""

    @abstractmethod
    def _draw_origin(self, params: FiringParameters) -> H:
        """Draw the firing point marker and return its handle."""

    @abstractmethod
    def _remove(self, handle: H) -> None:
        """Remove a previously drawn handle."""

    @abstractmethod
    def save(self, path: str) -> None:
        """Write the current drawing to ``path``."""


def end_popup_html(segment: Segment) -> str:
    """Popup body for the end marker of a line."""
    return (
        '<div class="text-sm">'
        f'<p class="font-semibold">End of line {segment.label.value}</p>'
        f"<p>Bearing: {segment.bearing.to(Degree):.1f}°</p>"
        f"<p>Distance: {float(segment.length):.1f}m</p>"
        "</div>"
    )


def origin_popup_html(params: FiringParameters) -> str:
    lat, lon = params.origin.to_deg()
    return (
        '<div class="text-sm">'
        '<p class="font-semibold">Firing point</p>'
        f"<p>Latitude: {lat:.6f}</p>"
        f"<p>Longitude: {lon:.6f}</p>"
        "</div>"
    )
