import logging
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from threat_entities.config import Settings, configure_logging, load_settings
from threat_entities.errors import ConfigError


class TestLoadSettings(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _env_file(self, text, name=".env"):
        path = self.tmp / name
        path.write_text(text, encoding="utf-8")
        return path

    @patch("threat_entities.config.default_env_files", return_value=[])
    def test_defaults(self, _):
        self.assertEqual(load_settings(environ={}), Settings())

    def test_env_file(self):
        path = self._env_file(
            "THREAT_ENTITIES_LOG_LEVEL=debug\n"
            "THREAT_ENTITIES_LOAD_PLUGINS=yes\n"
            "THREAT_ENTITIES_PLUGIN_GROUP=acme.bindings\n"
        )
        settings = load_settings(env_file=path, environ={})
        self.assertEqual(
            settings, Settings(log_level="DEBUG", load_plugins=True, plugin_group="acme.bindings")
        )

    def test_environment_overrides_file(self):
        path = self._env_file("THREAT_ENTITIES_LOG_LEVEL=DEBUG\n")
        settings = load_settings(env_file=path, environ={"THREAT_ENTITIES_LOG_LEVEL": "ERROR"})
        self.assertEqual(settings.log_level, "ERROR")

    def test_default_search_uses_first_existing_file(self):
        first = self._env_file("THREAT_ENTITIES_LOG_LEVEL=INFO\n", name="first.env")
        second = self._env_file("THREAT_ENTITIES_LOG_LEVEL=ERROR\n", name="second.env")
        missing = self.tmp / "missing.env"
        with patch(
            "threat_entities.config.default_env_files", return_value=[missing, first, second]
        ):
            self.assertEqual(load_settings(environ={}).log_level, "INFO")

    def test_missing_explicit_file(self):
        with self.assertRaises(ConfigError):
            load_settings(env_file=self.tmp / "nope.env", environ={})

    @patch("threat_entities.config.default_env_files", return_value=[])
    def test_invalid_values(self, _):
        for environ in (
            {"THREAT_ENTITIES_LOG_LEVEL": "LOUD"},
            {"THREAT_ENTITIES_LOAD_PLUGINS": "maybe"},
            {"THREAT_ENTITIES_PLUGIN_GROUP": "   "},
        ):
            with self.subTest(environ=environ), self.assertRaises(ConfigError):
                load_settings(environ=environ)


class TestConfigureLogging(unittest.TestCase):
    @patch("threat_entities.config.logging.basicConfig")
    def test_uses_settings_level(self, mock_basic):
        configure_logging(Settings(log_level="DEBUG"))
        self.assertEqual(mock_basic.call_args.kwargs["level"], logging.DEBUG)


if __name__ == "__main__":
    unittest.main()
