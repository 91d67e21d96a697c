import unittest
from pathlib import Path

from catan_stage.config import ConfigError, StageSettings, load_settings
from catan_stage.domain.randomizer import MAX_GENERATION_ATTEMPTS


class LoadSettingsTests(unittest.TestCase):
    def test_defaults_without_environment(self) -> None:
        settings = load_settings({})
        self.assertEqual(settings, StageSettings())
        self.assertEqual(settings.theme, "light")
        self.assertEqual(settings.max_attempts, MAX_GENERATION_ATTEMPTS)
        self.assertIsNone(settings.seed)

    def test_environment_values_are_parsed(self) -> None:
        settings = load_settings(
            {
                "CATAN_STAGE_THEME": " Dark ",
                "CATAN_STAGE_MAX_ATTEMPTS": "250",
                "CATAN_STAGE_SEED": "12",
                "CATAN_STAGE_TEXTURE_DIR": "/tmp/textures",
            }
        )
        self.assertEqual(settings.theme, "dark")
        self.assertEqual(settings.max_attempts, 250)
        self.assertEqual(settings.seed, 12)
        self.assertEqual(settings.texture_dir, Path("/tmp/textures"))

    def test_invalid_values_raise_config_error(self) -> None:
        for environ in (
            {"CATAN_STAGE_THEME": "neon"},
            {"CATAN_STAGE_MAX_ATTEMPTS": "many"},
            {"CATAN_STAGE_MAX_ATTEMPTS": "0"},
            {"CATAN_STAGE_SEED": "1.5"},
        ):
            with self.subTest(environ=environ):
                with self.assertRaises(ConfigError):
                    load_settings(environ)

    def test_overrides_skip_none(self) -> None:
        base = StageSettings(seed=3, max_attempts=10)
        updated = base.with_overrides(seed=None, max_attempts=20, theme="HIGH_CONTRAST")
        self.assertEqual(updated.seed, 3)
        self.assertEqual(updated.max_attempts, 20)
        self.assertEqual(updated.theme, "high_contrast")
        self.assertEqual(base.max_attempts, 10)


if __name__ == "__main__":
    unittest.main()
