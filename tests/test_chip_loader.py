# SPDX-License-Identifier: BSD-2-Clause
import tempfile
import unittest
from pathlib import Path

from pinmux import PinMuxError, ChipDefinition, load_chip_definition
from pinmux.chip import parse_chip_definition

FIXTURES = Path(__file__).parent / "fixtures"


class TestLoadChipDefinition(unittest.TestCase):
    def test_load_fixture(self):
        chip = load_chip_definition(FIXTURES / "chips" / "mini.json")
        self.assertIsInstance(chip, ChipDefinition)
        self.assertEqual(chip.meta.name, "MINI32")
        self.assertEqual(chip.pins["PA1"].functions, ["GPIO", "UART_TX", "ADC_IN1"])
        self.assertEqual(chip.pins["VDD"].type, "power")
        self.assertEqual([p.name for p in chip.package.pins], ["PA1", "PB2", "VDD", "NRST", "NC"])

    def test_integer_numbers_become_strings(self):
        chip = load_chip_definition(FIXTURES / "chips" / "mini.json")
        self.assertEqual(chip.package.pins[1].number, "2")

    def test_inconsistent_definition_is_accepted(self):
        """Physical pins without capabilities are not a load error"""
        chip = parse_chip_definition(
            '{"meta": {"name": "X"}, "pins": {}, "package": {"pins": [{"name": "NC", "number": "1"}]}}'
        )
        self.assertEqual(chip.pins, {})
        self.assertEqual(chip.package.pins[0].name, "NC")

    def test_missing_file(self):
        with self.assertRaises(PinMuxError) as cm:
            load_chip_definition(FIXTURES / "chips" / "does-not-exist.json")
        self.assertIn("not found", str(cm.exception))

    def test_malformed_json(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "bad.json"
            path.write_text("{not json")
            with self.assertRaises(PinMuxError) as cm:
                load_chip_definition(path)
            self.assertIn("misformed", str(cm.exception))

    def test_validation_error_location(self):
        with self.assertRaises(PinMuxError) as cm:
            parse_chip_definition('{"meta": {}, "pins": {"PA1": {"functions": []}}}')
        message = str(cm.exception)
        self.assertIn("Error at 'meta.name'", message)
        self.assertIn("Error at 'pins.PA1.type'", message)


if __name__ == "__main__":
    unittest.main()
