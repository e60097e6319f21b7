from __future__ import annotations

import sys
import unittest
from pathlib import Path


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))


from pydantic import ValidationError  # noqa: E402

from ui.settings import GuiSettings  # noqa: E402


class GuiSettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = GuiSettings()
        self.assertEqual(settings.square_size, 80)
        self.assertEqual(settings.log_level, "info")
        self.assertEqual(settings.board_pixels(8), 640)
        self.assertEqual(settings.window_size(8), (720, 870))

    def test_rejects_out_of_range_values(self) -> None:
        with self.assertRaises(ValidationError):
            GuiSettings(square_size=10)
        with self.assertRaises(ValidationError):
            GuiSettings(fps=0)
        with self.assertRaises(ValidationError):
            GuiSettings(log_level="verbose")

    def test_overrides(self) -> None:
        settings = GuiSettings(square_size=64, log_level="debug")
        self.assertEqual(settings.window_size(8), (592, 742))


if __name__ == "__main__":
    unittest.main()
