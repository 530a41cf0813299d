# SPDX-License-Identifier: BSD-2-Clause
import os
import tempfile
import unittest
from pathlib import Path

from pinmux import PinMuxError
from pinmux.config import Config, _parse_config, _parse_config_file, resolve_path
from pinmux.utils import ensure_pinmux_root


def _reset_root():
    if hasattr(ensure_pinmux_root, 'root'):
        delattr(ensure_pinmux_root, 'root')


class ParseConfigTestCase(unittest.TestCase):
    def setUp(self):
        self.old_root = os.environ.get("PINMUX_ROOT")
        os.environ["PINMUX_ROOT"] = os.path.dirname(__file__)
        _reset_root()
        self.mock_config = Path(os.path.dirname(__file__)) / "fixtures" / "pinmux.toml"

    def tearDown(self):
        if self.old_root is None:
            os.environ.pop("PINMUX_ROOT", None)
        else:
            os.environ["PINMUX_ROOT"] = self.old_root
        _reset_root()

    def test_mock_config_parsing(self):
        config = _parse_config_file(self.mock_config)
        self.assertIsInstance(config, Config)
        self.assertEqual(config.pinmux.project_name, "mini-board")
        self.assertEqual(config.pinmux.chip, Path("chips/mini.json"))
        self.assertEqual(config.pinmux.export.directory, Path("build"))
        self.assertEqual(config.pinmux.export.delimiter, ",")
        self.assertEqual(config.pinmux.pins, {"PA1": "UART_TX", "PB2": "UART_RX"})

    def test_defaults(self):
        config = Config.model_validate({"pinmux": {"project_name": "p", "chip": "chip.json"}})
        self.assertEqual(config.pinmux.export.directory, Path("."))
        self.assertEqual(config.pinmux.pins, {})

    def test_parse_from_root(self):
        os.environ["PINMUX_ROOT"] = str(Path(os.path.dirname(__file__)) / "fixtures")
        _reset_root()
        config = _parse_config()
        self.assertEqual(config.pinmux.project_name, "mini-board")

    def test_missing_config(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            os.environ["PINMUX_ROOT"] = tmpdir
            _reset_root()
            with self.assertRaises(PinMuxError) as cm:
                _parse_config()
            self.assertIn("Config file not found", str(cm.exception))

    def test_toml_syntax_error(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            Path(tmpdir, "pinmux.toml").write_text("[pinmux\nproject_name = 1\n")
            os.environ["PINMUX_ROOT"] = tmpdir
            _reset_root()
            with self.assertRaises(PinMuxError) as cm:
                _parse_config()
            self.assertIn("formatting error", str(cm.exception))

    def test_validation_error(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_file = Path(tmpdir, "pinmux.toml")
            config_file.write_text('[pinmux]\nchip = "a.json"\n\n[pinmux.export]\ndelimiter = ";;"\n')
            with self.assertRaises(PinMuxError) as cm:
                _parse_config_file(config_file)
            message = str(cm.exception)
            self.assertIn("Validation error in pinmux.toml", message)
            self.assertIn("Error at 'pinmux.project_name'", message)
            self.assertIn("Error at 'pinmux.export.delimiter'", message)

    def test_resolve_path(self):
        root = ensure_pinmux_root()
        self.assertEqual(resolve_path("chips/a.json"), root / "chips" / "a.json")
        self.assertEqual(resolve_path("/abs/a.json"), Path("/abs/a.json"))


if __name__ == "__main__":
    unittest.main()
