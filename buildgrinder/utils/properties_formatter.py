DEFAULT_LINE_PREFIX = "    "
DEFAULT_SHOW_INDEX = True
DEFAULT_ALIGN_INDEXES = True
DEFAULT_INDEX_SEPARATOR = ") "
DEFAULT_ALIGN_KEYS = True
DEFAULT_KEY_VALUE_SEPARATOR = " = "
DEFAULT_SORT_BY_KEY = True


class PropertiesFormatter:
    """Render a key/value mapping as indexed, aligned text lines.

    With the defaults, ``{"b": 2, "aa": 1}`` becomes::

        1) aa = 1
        2) b  = 2
    """

    def __init__(self, line_prefix=DEFAULT_LINE_PREFIX, show_index=DEFAULT_SHOW_INDEX,
                 align_indexes=DEFAULT_ALIGN_INDEXES, index_separator=DEFAULT_INDEX_SEPARATOR,
                 align_keys=DEFAULT_ALIGN_KEYS, key_value_separator=DEFAULT_KEY_VALUE_SEPARATOR,
                 sort_by_key=DEFAULT_SORT_BY_KEY):
        self.line_prefix = line_prefix
        self.show_index = show_index
        self.align_indexes = align_indexes
        self.index_separator = index_separator
        self.align_keys = align_keys
        self.key_value_separator = key_value_separator
        self.sort_by_key = sort_by_key

    def format(self, properties):
        if not properties:
            return ""

        index_width = len(str(len(properties))) if self.align_indexes else 0
        key_width = max(len(str(key)) for key in properties) if self.align_keys else 0
        items = sorted(properties.items(), key=lambda item: str(item[0])) if self.sort_by_key else properties.items()

        lines = []
        for index, (key, value) in enumerate(items, start=1):
            prefix = str(index).rjust(index_width) + self.index_separator if self.show_index else ""
            lines.append(f"{self.line_prefix}{prefix}{str(key).ljust(key_width)}{self.key_value_separator}{value}")
        return "\n".join(lines)
