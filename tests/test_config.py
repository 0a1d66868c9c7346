import os
import shutil
import tempfile
import toml
import unittest
from click.testing import CliRunner
from buildgrinder import config
from buildgrinder.commands.config import config as config_command
import json

class TestConfig(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.config_path = os.path.join(self.test_dir, config.CONFIG_FILE)
        self.sample_config = {
            "project": {
                "name": "demo",
                "default_resource_dir": "defaults"
            },
            "properties": {
                "generate:schema": "api.xsd",
                "version": "1.0"
            }
        }
        with open(self.config_path, "w") as f:
            toml.dump(self.sample_config, f)
        self.runner = CliRunner()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def invoke(self, *args):
        return self.runner.invoke(config_command, list(args), obj={"path": self.test_dir})

    def test_load_config_not_found(self):
        """Test that loading a non-existent config returns an empty dict."""
        os.remove(self.config_path)
        self.assertEqual(config.load_config(path=self.test_dir), {})

    def test_load_malformed_config(self):
        """Test that a config with syntax errors loads as an empty dict."""
        with open(self.config_path, "w") as f:
            f.write("[project\nname = ")
        self.assertEqual(config.load_config(path=self.test_dir), {})

    def test_load_config(self):
        """Test loading a config written by hand."""
        self.assertEqual(config.load_config(path=self.test_dir), self.sample_config)

    def test_config_is_read_only(self):
        """Test that the config command offers no way to change the file."""
        with open(self.config_path) as f:
            before = f.read()
        for args in (['set', 'properties.version', '2.0'], ['unset', 'properties.version']):
            result = self.invoke(*args)
            self.assertEqual(result.exit_code, 2)
        self.assertFalse(hasattr(config, "save_config"))
        with open(self.config_path) as f:
            self.assertEqual(f.read(), before)

    def test_get_nested_value(self):
        result = self.invoke('get', 'project.name')
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.strip(), 'demo')

    def test_get_task_property(self):
        """Property keys carry a task prefix and are looked up as a whole."""
        result = self.invoke('get', 'properties.generate:schema')
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.strip(), 'api.xsd')

    def test_get_non_existent_value(self):
        result = self.invoke('get', 'project.nonexistent')
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Error: Key 'project.nonexistent' not found", result.output)

    def test_get_without_config_file(self):
        os.remove(self.config_path)
        result = self.invoke('get', 'project.name')
        self.assertIn("No buildgrinder.toml found", result.output)

    def test_list_config(self):
        result = self.invoke('list')
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(json.loads(result.output.strip()), self.sample_config)

    def test_view_config(self):
        result = self.invoke('view')
        self.assertEqual(result.exit_code, 0)
        with open(self.config_path, "r") as f:
            self.assertEqual(result.output.strip(), f.read().strip())

if __name__ == "__main__":
    unittest.main()
