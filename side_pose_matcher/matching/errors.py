from typing import Optional


class EmptyTableError(ValueError):
    """Raised when a nearest-pose query is made against a table with no entries."""

    def __init__(self, table_name: Optional[str] = None):
        self.table_name = table_name
        label = f"'{table_name}' " if table_name else ""
        super().__init__(f"Cannot match against empty pose table {label}- no pose to return")
