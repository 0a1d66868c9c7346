import os
import shutil
import tempfile
import unittest
import zipfile
from pathlib import Path
from unittest.mock import patch
from click.testing import CliRunner
from buildgrinder.cli_logger import logger
from buildgrinder.main import cli

PROJECT_TOML = """
[project]
name = "demo"

[properties]
"generate:schema" = "api.xsd"
"generate:out" = "build"
version = "1.0"

[source_sets.main]

[configurations.compile]
files = ["libs/*.jar"]
"""

class TestMain(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()
        self.test_dir = tempfile.mkdtemp()
        with open(os.path.join(self.test_dir, "buildgrinder.toml"), "w") as f:
            f.write(PROJECT_TOML)
        self.resources = os.path.join(self.test_dir, "src", "main", "resources")
        os.makedirs(self.resources)
        os.makedirs(os.path.join(self.test_dir, "libs"))

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def invoke(self, *args):
        return self.runner.invoke(cli, ["--path", self.test_dir] + list(args))

    def write(self, *parts):
        path = os.path.join(self.test_dir, *parts)
        with open(path, "w") as f:
            f.write("x")
        return path

    def make_jar(self, name, entries):
        with zipfile.ZipFile(os.path.join(self.test_dir, "libs", name), "w") as zf:
            for entry in entries:
                zf.writestr(entry, b"x")

    # -------- properties --------
    def test_properties(self):
        result = self.invoke("properties")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("1) generate:out    = build", result.output)
        self.assertIn("3) version         = 1.0", result.output)

    def test_task_properties(self):
        result = self.invoke("properties", "--task", "generate", "--no-index")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("out    = build", result.output)
        self.assertIn("schema = api.xsd", result.output)
        self.assertNotIn("version", result.output)

    def test_task_properties_invalid_key(self):
        result = self.invoke("properties", "--task", "generate", "--valid-key", "schema")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Invalid input", result.output)
        self.assertIn("out", result.output)

    def test_no_properties(self):
        result = self.invoke("properties", "--task", "package")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("No properties defined.", result.output)

    def test_log_level_applies_to_one_invocation(self):
        before = logger.threshold
        result = self.invoke("--log-level", "debug", "properties")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Project properties are:", result.output)
        self.assertEqual(logger.threshold, before)
        result = self.invoke("properties")
        self.assertNotIn("Project properties are:", result.output)

    # -------- resolve --------
    def test_resolve_prefers_source_set(self):
        expected = self.write("src", "main", "resources", "app.conf")
        self.write("app.conf")
        result = self.invoke("resolve", "app.conf", "--source-set", "main")
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.strip(), expected)

    def test_resolve_against_project_directory(self):
        expected = self.write("app.conf")
        result = self.invoke("resolve", "app.conf")
        self.assertEqual(result.output.strip(), expected)

    def test_resolve_as_url(self):
        expected = Path(self.write("app.conf")).as_uri()
        result = self.invoke("resolve", os.path.join(self.test_dir, "app.conf"), "--as", "url")
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.strip(), expected)

    def test_resolve_extra_directory(self):
        os.makedirs(os.path.join(self.test_dir, "conf"))
        expected = self.write("conf", "app.conf")
        result = self.invoke("resolve", "app.conf", "--resource-dir", os.path.join(self.test_dir, "conf"))
        self.assertEqual(result.output.strip(), expected)

    def test_resolve_divergent(self):
        os.makedirs(os.path.join(self.test_dir, "src", "main", "schema"))
        expected = self.write("src", "main", "schema", "api.xsd")
        result = self.invoke("resolve", "api.xsd", "-s", "main", "--divergent", "schema")
        self.assertEqual(result.output.strip(), expected)

    def test_resolve_divergent_requires_source_set(self):
        result = self.invoke("resolve", "api.xsd", "--divergent", "schema")
        self.assertEqual(result.exit_code, 2)

    def test_resolve_unresolved(self):
        result = self.invoke("resolve", "missing.conf")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Could not resolve 'missing.conf'.", result.output)

    def test_resolve_strict(self):
        result = self.invoke("resolve", "missing.conf", "--strict")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("missing.conf", result.output)

    def test_resolve_validation(self):
        self.write("app.conf")
        result = self.invoke("resolve", "app.conf", "--validation", "directory")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("directory", result.output)

    # -------- locate --------
    def test_locate_everywhere(self):
        self.write("src", "main", "resources", "app.conf")
        self.make_jar("a.jar", ["app.conf"])
        result = self.invoke("locate", "app.conf")
        self.assertEqual(result.exit_code, 0)
        lines = [line for line in result.output.splitlines() if line[:3] in ("1) ", "2) ")]
        self.assertEqual(len(lines), 2)
        self.assertIn("file:", lines[0])
        self.assertIn("source-set=main", lines[0])
        self.assertIn("jar:file:", lines[1])
        self.assertIn("a.jar!/app.conf", lines[1])
        self.assertIn("ambiguous", result.output)

    def test_locate_single_ambiguous(self):
        self.make_jar("a.jar", ["app.conf"])
        self.make_jar("b.jar", ["app.conf"])
        result = self.invoke("locate", "app.conf", "--configuration", "compile", "--single")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("app.conf", result.output)

    def test_locate_single(self):
        self.make_jar("a.jar", ["conf/app.conf"])
        result = self.invoke("locate", "/conf/app.conf", "-c", "compile", "--single")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("a.jar!/conf/app.conf", result.output)

    def test_locate_not_found(self):
        result = self.invoke("locate", "missing.conf")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Resource 'missing.conf' not found.", result.output)

    def test_locate_unknown_configuration(self):
        result = self.invoke("locate", "app.conf", "-c", "runtime")
        self.assertEqual(result.exit_code, 1)

    # -------- config / version --------
    def test_config_get(self):
        result = self.invoke("config", "get", "project.name")
        self.assertEqual(result.output.strip(), "demo")

    def test_log_list_without_log_directory(self):
        with patch("buildgrinder.commands.log.LOG_DIR", os.path.join(self.test_dir, "no-logs")):
            result = self.runner.invoke(cli, ["log", "--list"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Log directory does not exist.", result.output)

    def test_log_shows_file(self):
        log_dir = os.path.join(self.test_dir, "logs")
        os.makedirs(log_dir)
        with open(os.path.join(log_dir, "buildgrinder_1.log"), "w") as f:
            f.write("[10:00:00] [ERROR] broken\n")
        with patch("buildgrinder.commands.log.LOG_DIR", log_dir):
            result = self.runner.invoke(cli, ["log", "--filename", "buildgrinder_1.log"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("[ERROR] broken", result.output)

    @patch("importlib.metadata.version", return_value="0.1.0")
    def test_version(self, mock_version):
        result = self.runner.invoke(cli, ["version"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("buildgrinder version 0.1.0", result.output)
        mock_version.assert_called_once_with("buildgrinder")

if __name__ == "__main__":
    unittest.main()
