"""
Tests for the map and figure renderers.
"""

import os
import tempfile
import unittest

import folium
import matplotlib

matplotlib.use("Agg")

from dispersim.envelope import FiringParameters, MunitionType, compute_envelope  # noqa: E402
from dispersim.render import FoliumOverlayRenderer, MatplotlibOverlayRenderer  # noqa: E402
from dispersim.render.mpl_plot import _linestyle  # noqa: E402
from dispersim.render.overlay import end_popup_html  # noqa: E402


def feature_groups(m):
    return [c for c in m._children.values() if isinstance(c, folium.FeatureGroup)]


class TestFoliumRenderer(unittest.TestCase):
    """Test the folium map renderer."""

    def setUp(self):
        self.envelope = compute_envelope(FiringParameters.from_values())
        self.renderer = FoliumOverlayRenderer()

    def test_handles_match_envelope(self):
        """One handle per drawn construction."""
        self.renderer.replace_all(self.envelope)
        self.assertEqual(set(self.renderer.handles), set(self.envelope))
        self.assertEqual(len(feature_groups(self.renderer.map)), len(self.envelope))

    def test_replace_all_is_idempotent(self):
        """Drawing the same envelope twice leaves no duplicates."""
        self.renderer.replace_all(self.envelope)
        self.renderer.replace_all(self.envelope)
        children = list(self.renderer.map._children.values())
        self.assertEqual(len(feature_groups(self.renderer.map)), len(self.envelope))
        self.assertEqual(sum(isinstance(c, folium.LayerControl) for c in children), 1)
        self.assertEqual(sum(isinstance(c, folium.Marker) for c in children), 1)

    def test_replace_with_smaller_envelope(self):
        """Constructions missing from the new envelope are removed."""
        self.renderer.replace_all(self.envelope)
        smaller = compute_envelope(FiringParameters.from_values(munition=MunitionType.NON_EXPLOSIVE))
        self.renderer.replace_all(smaller)
        self.assertEqual(set(self.renderer.handles), set(smaller))
        self.assertNotIn("H", self.renderer.handles)
        html = self.renderer.map.get_root().render()
        self.assertNotIn("Line H", html)
        self.assertIn("Line A", html)

    def test_map_follows_firing_point(self):
        params = FiringParameters.from_values(10, 20)
        self.renderer.replace_all(compute_envelope(params))
        lat, lon = self.renderer.map.location
        self.assertAlmostEqual(lat, 10.0)
        self.assertAlmostEqual(lon, 20.0)

    def test_save(self):
        self.renderer.replace_all(self.envelope)
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "envelope.html")
            self.renderer.save(path)
            with open(path, encoding="utf-8") as f:
                html = f.read()
        self.assertIn("Line A", html)
        self.assertIn("Arc circle", html)

    def test_end_popup(self):
        popup = end_popup_html(self.envelope["A"])
        self.assertIn("End of line A", popup)
        self.assertIn("Bearing: 0.0°", popup)
        self.assertIn("Distance: 5474.0m", popup)


class TestMatplotlibRenderer(unittest.TestCase):
    """Test the matplotlib renderer."""

    def setUp(self):
        self.envelope = compute_envelope(FiringParameters.from_values())
        self.renderer = MatplotlibOverlayRenderer()

    def test_one_line_per_construction(self):
        """Each construction plus the firing point is one Line2D."""
        self.renderer.replace_all(self.envelope)
        self.renderer.replace_all(self.envelope)
        self.assertEqual(len(self.renderer.ax.lines), len(self.envelope) + 1)

    def test_clear(self):
        self.renderer.replace_all(self.envelope)
        self.renderer.clear()
        self.assertEqual(len(self.renderer.ax.lines), 0)
        self.assertEqual(len(self.renderer.handles), 0)

    def test_save(self):
        self.renderer.replace_all(self.envelope)
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "envelope.png")
            self.renderer.save(path)
            self.assertGreater(os.path.getsize(path), 0)

    def test_linestyle(self):
        self.assertEqual(_linestyle("5, 5"), (0, (5.0, 5.0)))
        self.assertEqual(_linestyle(""), "solid")


if __name__ == '__main__':
    unittest.main()
