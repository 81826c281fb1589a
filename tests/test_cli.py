import json
import tempfile
import unittest
from pathlib import Path

from sample_data import TWO_SPECIES
from typer.testing import CliRunner

from thermoinp.cli import app


class TestCli(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def test_parse_writes_json(self):
        source = self.dir / "thermo.inp"
        source.write_text(TWO_SPECIES, encoding="utf-8")
        output = self.dir / "out.json"

        result = self.runner.invoke(app, ["parse", str(source), "--output", str(output)])

        self.assertEqual(result.exit_code, 0)
        self.assertIn('"CO2"', result.output)
        data = json.loads(output.read_text())
        self.assertEqual(data["species_count"], 2)
        self.assertEqual(data["header"]["date"], "9/09/04")
        co2 = data["species"][0]
        self.assertEqual(co2["elements"], [["C", 1.0], ["O", 2.0]])
        self.assertEqual(len(co2["temperature_ranges"]), 2)
        self.assertEqual(len(co2["temperature_ranges"][0]["coefficients"]), 7)

    def test_parse_error_exits_nonzero(self):
        source = self.dir / "bad.inp"
        source.write_text("nothing here\n", encoding="utf-8")

        result = self.runner.invoke(app, ["parse", str(source)])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("error:", result.output)

    def test_strip_comments(self):
        source = self.dir / "input.txt"
        source.write_text("! comment\nkept line\n!another\n", encoding="utf-8")
        output = self.dir / "filtered.txt"

        result = self.runner.invoke(app, ["strip-comments", str(source), "--output", str(output)])

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(output.read_text(), "kept line\n")


if __name__ == '__main__':
    unittest.main()
