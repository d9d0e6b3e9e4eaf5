"""Tests for config file loading and priority."""

import os
import tempfile
import unittest
from pathlib import Path

from otel_xray import config
from otel_xray.errors import ConfigError
from otel_xray.translator.attributes import UnknownAttributePolicy


def _clear_env():
    for key in list(os.environ.keys()):
        if key.startswith(config.ENV_PREFIX):
            del os.environ[key]


class TestConfigFileLoading(unittest.TestCase):
    """Test TOML config file loading."""

    def test_load_toml_config_basic(self):
        """Test loading a basic TOML config file."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.toml', delete=False) as f:
            f.write("""
[naming]
max_length = 64
default_name = "unnamed"

[translation]
unknown_attributes = "null"
""")
            f.flush()

        try:
            loaded = config.load_toml_config(f.name)
            self.assertEqual(loaded["naming"]["max_length"], 64)
            self.assertEqual(loaded["naming"]["default_name"], "unnamed")
            self.assertEqual(loaded["translation"]["unknown_attributes"], "null")
        finally:
            os.unlink(f.name)

    def test_load_toml_config_missing_file(self):
        """Test that loading missing file returns empty dict."""
        self.assertEqual(config.load_toml_config("/nonexistent/file.toml"), {})

    def test_load_toml_config_invalid_toml(self):
        """Test that invalid TOML raises ConfigError."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.toml', delete=False) as f:
            f.write("invalid [toml content")
            f.flush()

        try:
            with self.assertRaises(ConfigError):
                config.load_toml_config(f.name)
        finally:
            os.unlink(f.name)

    def test_find_config_file_current_directory(self):
        """Test finding config file in current directory."""
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "otel_xray.toml"
            config_path.write_text("[logging]\ndebug = true")

            original_cwd = os.getcwd()
            try:
                os.chdir(tmpdir)
                found = config.find_config_file()
                self.assertIsNotNone(found)
                self.assertEqual(Path(found).name, "otel_xray.toml")
            finally:
                os.chdir(original_cwd)


class TestConfigPriority(unittest.TestCase):
    """Test configuration loading priority."""

    def setUp(self):
        _clear_env()

    def tearDown(self):
        _clear_env()

    def _write_config(self, content: str) -> str:
        with tempfile.NamedTemporaryFile(mode='w', suffix='.toml', delete=False) as f:
            f.write(content)
        self.addCleanup(os.unlink, f.name)
        return f.name

    def test_defaults(self):
        """Test that a missing file yields the default config."""
        loaded = config.load_config(config_file="/nonexistent/file.toml")
        self.assertEqual(loaded.naming.max_length, 200)
        self.assertEqual(loaded.naming.default_name, "span")
        self.assertEqual(loaded.identifiers.max_age_seconds, 28 * 24 * 60 * 60)
        self.assertEqual(loaded.identifiers.max_skew_seconds, 300)
        self.assertIs(loaded.translation.unknown_attributes, UnknownAttributePolicy.DROP)
        self.assertFalse(loaded.translation.legacy_remote_namespace)
        self.assertFalse(loaded.logging.debug)

    def test_config_file_loaded_when_no_overrides(self):
        """Test that config file values are used."""
        path = self._write_config("""
[identifiers]
max_age_seconds = 3600

[translation]
legacy_remote_namespace = true
""")
        loaded = config.load_config(config_file=path)
        self.assertEqual(loaded.identifiers.max_age_seconds, 3600)
        self.assertTrue(loaded.translation.legacy_remote_namespace)

    def test_env_override_config_file(self):
        """Test that environment variables override config file."""
        path = self._write_config("[naming]\ndefault_name = \"file-name\"\n")
        os.environ["OTEL_XRAY_DEFAULT_NAME"] = "env-name"
        loaded = config.load_config(config_file=path)
        self.assertEqual(loaded.naming.default_name, "env-name")

    def test_explicit_params_override_env(self):
        """Test that explicit overrides beat environment variables."""
        os.environ["OTEL_XRAY_MAX_SKEW_SECONDS"] = "60"
        loaded = config.load_config(config_file="/nonexistent/file.toml", overrides={"max_skew_seconds": 10})
        self.assertEqual(loaded.identifiers.max_skew_seconds, 10)

    def test_unknown_override_key(self):
        """Test that an unknown flat key is rejected."""
        with self.assertRaises(ConfigError):
            config.load_config(config_file="/nonexistent/file.toml", overrides={"sample_rate": 0.5})

    def test_invalid_values_raise_config_error(self):
        """Test that validation failures surface as ConfigError."""
        with self.assertRaises(ConfigError):
            config.load_config(config_file="/nonexistent/file.toml", overrides={"max_name_length": 0})
        with self.assertRaises(ConfigError):
            config.load_config(config_file="/nonexistent/file.toml", overrides={"invalid_characters": "[unclosed"})
        with self.assertRaises(ConfigError):
            config.load_config(config_file="/nonexistent/file.toml", overrides={"default_name": ""})


class TestConfigFromEnv(unittest.TestCase):
    """Test loading configuration from environment variables."""

    def setUp(self):
        _clear_env()

    def tearDown(self):
        _clear_env()

    def test_load_config_from_env_conversion(self):
        """Test that environment variables are converted to correct types."""
        os.environ.update({
            "OTEL_XRAY_MAX_NAME_LENGTH": "100",
            "OTEL_XRAY_LEGACY_REMOTE_NAMESPACE": "yes",
            "OTEL_XRAY_MILLISECOND_PRECISION": "0",
            "OTEL_XRAY_DEBUG": "true",
            "OTEL_XRAY_UNKNOWN_ATTRIBUTES": "null",
        })
        env_config = config.load_config_from_env(flat=True)
        self.assertEqual(env_config["max_name_length"], 100)
        self.assertTrue(env_config["legacy_remote_namespace"])
        self.assertFalse(env_config["millisecond_precision"])
        self.assertTrue(env_config["debug"])
        self.assertEqual(env_config["unknown_attributes"], "null")

    def test_load_config_from_env_nested(self):
        """Test that the default layout matches the config file sections."""
        os.environ["OTEL_XRAY_MAX_AGE_SECONDS"] = "120"
        self.assertEqual(config.load_config_from_env(), {"identifiers": {"max_age_seconds": 120}})

    def test_load_config_from_env_missing_vars(self):
        """Test that missing env vars don't appear in result."""
        self.assertEqual(config.load_config_from_env(flat=True), {})

    def test_invalid_boolean(self):
        """Test that an unparseable boolean raises ConfigError."""
        os.environ["OTEL_XRAY_DEBUG"] = "maybe"
        with self.assertRaises(ConfigError):
            config.load_config_from_env()


class TestValidateConfig(unittest.TestCase):
    """Test non-raising validation."""

    def test_valid(self):
        is_valid, msg, loaded = config.validate_config({"naming": {"max_length": 50}})
        self.assertTrue(is_valid)
        self.assertEqual(msg, "ok")
        self.assertEqual(loaded.naming.max_length, 50)

    def test_invalid(self):
        is_valid, msg, loaded = config.validate_config({"naming": {"max_length": -1}})
        self.assertFalse(is_valid)
        self.assertIn("max_length", msg)
        self.assertIsNone(loaded)

    def test_unknown_section(self):
        is_valid, _, loaded = config.validate_config({"exporters": {"enable_console": True}})
        self.assertFalse(is_valid)
        self.assertIsNone(loaded)


if __name__ == "__main__":
    unittest.main()
