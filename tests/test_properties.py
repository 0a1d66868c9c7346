import unittest
from unittest.mock import MagicMock, patch

from buildgrinder.cli_logger import LogLevel
from buildgrinder.project import Project
from buildgrinder.properties import (
    get_project_properties,
    get_task_properties,
    get_task_property_key_prefix,
    log_hello,
    verify_task_property_keys,
)
from buildgrinder.utils.properties_formatter import PropertiesFormatter


class TestPropertiesFormatter(unittest.TestCase):

    def test_default_format(self):
        text = PropertiesFormatter().format({"b": 2, "aa": 1})
        self.assertEqual(text, "    1) aa = 1\n    2) b  = 2")

    def test_index_alignment(self):
        props = {f"k{i:02d}": i for i in range(10)}
        lines = PropertiesFormatter(line_prefix="").format(props).split("\n")
        self.assertEqual(lines[0], " 1) k00 = 0")
        self.assertEqual(lines[9], "10) k09 = 9")

    def test_options(self):
        formatter = PropertiesFormatter(line_prefix="", show_index=False, align_keys=False,
                                        key_value_separator=": ", sort_by_key=False)
        self.assertEqual(formatter.format({"zz": 1, "a": 2}), "zz: 1\na: 2")

    def test_empty(self):
        self.assertEqual(PropertiesFormatter().format({}), "")
        self.assertEqual(PropertiesFormatter().format(None), "")


class TestTaskProperties(unittest.TestCase):

    def setUp(self):
        self.logger = MagicMock()
        self.logger.is_enabled.return_value = True
        self.project = Project(
            "/tmp/proj",
            properties={"generate:schema": "api.xsd", "generate:out": "build", "version": "1.0", "other:x": 1},
            logger=self.logger,
        )

    def test_prefix(self):
        self.assertEqual(get_task_property_key_prefix("generate"), "generate:")

    def test_task_properties_strip_prefix(self):
        props = get_task_properties("generate", self.project)
        self.assertEqual(props, {"schema": "api.xsd", "out": "build"})
        messages = [call.args[1] for call in self.logger.log.call_args_list]
        self.assertTrue(any("prefix 'generate:'" in m for m in messages))

    @patch("buildgrinder.properties.default_logger")
    def test_task_properties_from_mapping(self, mock_logger):
        mock_logger.is_enabled.return_value = True
        props = get_task_properties("other", {"other:y": 2, "y": 3})
        self.assertEqual(props, {"y": 2})
        self.assertEqual(mock_logger.log.call_args.args[0], LogLevel.INFO)
        self.logger.log.assert_not_called()

    def test_project_properties_logged_at_debug(self):
        props = get_project_properties(self.project)
        self.assertEqual(props["version"], "1.0")
        self.logger.is_enabled.assert_called_with(LogLevel.DEBUG)
        self.assertEqual(self.logger.log.call_args.args[0], LogLevel.DEBUG)

    def test_project_properties_are_read_only(self):
        with self.assertRaises(TypeError):
            self.project.properties["version"] = "2.0"

    def test_verify_task_property_keys(self):
        verify_task_property_keys("generate", {"schema": 1}, {"schema", "out"})
        with self.assertRaises(ValueError) as cm:
            verify_task_property_keys("generate", {"schema": 1, "bogus": 2}, {"schema", "out"})
        self.assertIn("bogus", str(cm.exception))
        self.assertIn("generate", str(cm.exception))

    def test_log_hello(self):
        log_hello("generate", self.logger)
        self.logger.log.assert_called_once_with(LogLevel.INFO, "Hello, generate!")


if __name__ == "__main__":
    unittest.main()
