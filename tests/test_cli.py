"""
Tests for the command line entry point.
"""

import json
import os
import tempfile
import unittest

import pandas as pd
from rich.console import Console

from dispersim.cli import build_parser, main, params_from_args
from dispersim.envelope import FiringParameters, MunitionType, compute_envelope
from dispersim.report import print_report
from dispersim.unit import Degree


class TestParser(unittest.TestCase):
    """Test argument parsing."""

    def test_defaults(self):
        """Defaults reproduce the parameter form."""
        params = params_from_args(build_parser().parse_args([]))
        self.assertAlmostEqual(params.origin.lat_deg, -23.5505)
        self.assertAlmostEqual(float(params.range_distance), 5474.0)
        self.assertAlmostEqual(params.angle_p.to(Degree), 24.0)
        self.assertIs(params.munition, MunitionType.EXPLOSIVE)

    def test_overrides(self):
        args = build_parser().parse_args(["--bearing", "90", "--range", "1000", "--munition", "non-explosive"])
        params = params_from_args(args)
        self.assertAlmostEqual(params.firing_bearing.to(Degree), 90.0)
        self.assertAlmostEqual(float(params.range_distance), 1000.0)
        self.assertFalse(params.is_explosive)


class TestMain(unittest.TestCase):
    """Test exports written by main."""

    def test_json_and_csv(self):
        with tempfile.TemporaryDirectory() as tmp:
            json_path = os.path.join(tmp, "envelope.json")
            csv_path = os.path.join(tmp, "points.csv")
            self.assertEqual(main(["-q", "--json", json_path, "--csv", csv_path]), 0)

            with open(json_path, encoding="utf-8") as f:
                data = json.load(f)
            self.assertEqual(len(data["constructions"]), 15)
            self.assertIn("circle", data["constructions"])

            frame = pd.read_csv(csv_path)
            self.assertEqual(list(frame.columns), ["label", "seq", "latitude", "longitude"])
            self.assertEqual(int((frame["label"] == "A").sum()), 51)

    def test_non_explosive_json(self):
        with tempfile.TemporaryDirectory() as tmp:
            json_path = os.path.join(tmp, "envelope.json")
            self.assertEqual(main(["-q", "--munition", "non-explosive", "--json", json_path]), 0)
            with open(json_path, encoding="utf-8") as f:
                data = json.load(f)
        self.assertEqual(len(data["constructions"]), 8)
        self.assertEqual(data["params"]["munition"], "non-explosive")

    def test_invalid_parameters(self):
        """Non-finite input is rejected with exit code 2."""
        self.assertEqual(main(["-q", "--lat", "nan"]), 2)


class TestReport(unittest.TestCase):
    """Test the rich report."""

    def render(self, params):
        console = Console(record=True, width=160)
        print_report(compute_envelope(params), console)
        return console.export_text()

    def test_lists_all_constructions(self):
        text = self.render(FiringParameters.from_values())
        self.assertIn("Constructions", text)
        self.assertIn("circle", text)
        self.assertIn("computed", text)

    def test_omitted_and_fallback(self):
        """Omitted constructions and guard fallbacks are shown."""
        text = self.render(FiringParameters.from_values(angle_p=0, munition="non-explosive"))
        self.assertIn("omitted", text)
        self.assertIn("fallback", text)
        self.assertIn("NUMERIC_OVERFLOW", text)


if __name__ == '__main__':
    unittest.main()
