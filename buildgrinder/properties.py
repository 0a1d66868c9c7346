"""
Ad hoc project and task properties.

Task properties are project properties whose key carries the task name as
prefix, e.g. ``generate:schema = api.xsd`` is the property ``schema`` of
the task ``generate``.
"""

from collections.abc import Mapping

from .cli_logger import LogLevel, logger as default_logger
from .utils.properties_formatter import PropertiesFormatter


def get_project_properties(project):
    properties = project.properties
    log_project_properties(project, properties)
    return properties


def log_project_properties(project, properties, level=LogLevel.DEBUG):
    log_sink = project.logger
    if log_sink.is_enabled(level):
        formatted = PropertiesFormatter().format(properties)
        log_sink.log(level, f"Project properties are:\n{formatted}")


def get_task_property_key_prefix(task_name):
    return f"{task_name}:"


def get_task_properties(task_name, project_or_properties):
    """Return the properties of ``task_name`` with the task prefix stripped.

    Takes either a project, whose properties and logger are used, or a
    plain property mapping, logged through the default logger.
    """
    if isinstance(project_or_properties, Mapping):
        properties, log_sink = project_or_properties, default_logger
    else:
        properties = get_project_properties(project_or_properties)
        log_sink = project_or_properties.logger
    prefix = get_task_property_key_prefix(task_name)
    task_properties = {
        key[len(prefix):]: value
        for key, value in properties.items()
        if key.startswith(prefix)
    }
    log_task_properties(task_name, log_sink, task_properties)
    return task_properties


def log_task_properties(task_name, log_sink, task_properties):
    if log_sink.is_enabled(LogLevel.INFO):
        prefix = get_task_property_key_prefix(task_name)
        formatted = PropertiesFormatter().format(task_properties)
        log_sink.log(
            LogLevel.INFO,
            f"Task properties are (project properties with keys with prefix '{prefix}'):\n{formatted}",
        )


def log_hello(task_name, log_sink):
    """Announce that a task is running."""
    if log_sink.is_enabled(LogLevel.INFO):
        log_sink.log(LogLevel.INFO, f"Hello, {task_name}!")


def verify_task_property_keys(task_name, task_properties, valid_keys):
    """Raise ValueError if ``task_properties`` holds keys outside ``valid_keys``."""
    keys = list(task_properties)
    valid_keys = set(valid_keys)
    invalid_keys = [key for key in keys if key not in valid_keys]
    if invalid_keys:
        raise ValueError(
            f"Failure to recognize task property keys; task name is '{task_name}', "
            f"actual task property keys are {sorted(keys)}, valid task property keys are {sorted(valid_keys)}, "
            f"invalid task property keys are {invalid_keys}!"
        )
