import unittest

import numpy as np

from thermoinp.models import Species, TemperatureRange, ThermoFile, ThermoHeader


def _range(low=200.0, high=1000.0):
    return TemperatureRange(
        temp_low=low,
        temp_high=high,
        coefficients=(1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0),
        integration_constants=(8.0, 9.0),
    )


class TestTemperatureRange(unittest.TestCase):
    def test_coeffs_layout(self):
        coeffs = _range().coeffs
        self.assertEqual(coeffs.shape, (9,))
        np.testing.assert_array_equal(coeffs, np.arange(1.0, 10.0))

    def test_fixed_lengths(self):
        with self.assertRaises(ValueError):
            TemperatureRange(200.0, 1000.0, (0.0,) * 6, (0.0, 0.0))
        with self.assertRaises(ValueError):
            TemperatureRange(200.0, 1000.0, (0.0,) * 7, (0.0,))

    def test_contains(self):
        rng = _range()
        self.assertTrue(rng.contains(200.0))
        self.assertTrue(rng.contains(1000.0))
        self.assertFalse(rng.contains(1000.5))


class TestSpecies(unittest.TestCase):
    def test_composition_sums_repeats(self):
        species = Species("X", "", (("H", 2.0), ("O", 1.0), ("H", 1.0)), 0.0, 0.0, ())
        self.assertEqual(species.composition, {"H": 3.0, "O": 1.0})
        self.assertEqual(len(species.elements), 3)


class TestThermoFile(unittest.TestCase):
    def test_lookup(self):
        header = ThermoHeader((200.0, 1000.0, 6000.0, 20000.0), "9/09/04")
        a = Species("A", "", (), 1.0, 0.0, (_range(),))
        b = Species("B", "", (), 2.0, 0.0, ())
        thermo = ThermoFile(header, (a, b))
        self.assertEqual(thermo.species_names, ["A", "B"])
        self.assertIs(thermo.get_species("B"), b)
        self.assertIsNone(thermo.get_species("C"))

    def test_header_needs_four_breakpoints(self):
        with self.assertRaises(ValueError):
            ThermoHeader((200.0, 1000.0, 6000.0), "9/09/04")


if __name__ == '__main__':
    unittest.main()
