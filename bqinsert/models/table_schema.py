"""BQInsert — Table Schema Container."""

from typing import Any, ClassVar, List, Optional, Tuple

from bqinsert.models.table_field_schema import TableFieldSchema
from bqinsert.models.wire import WireModel


class TableSchema(WireModel):
    """Ordered field list describing a table.

    ``fields`` is None when nothing was declared. Descriptors are stored as
    given; nothing here checks them against a live table.
    """

    omit_if_none: ClassVar[Tuple[str, ...]] = ("fields",)

    fields: Optional[List[TableFieldSchema]] = None

    def __init__(self, fields: Optional[List[TableFieldSchema]] = None, **data: Any):
        super().__init__(fields=fields, **data)

    @classmethod
    def new(cls, fields: List[TableFieldSchema]) -> "TableSchema":
        return cls(fields)

    def field_count(self) -> int:
        return len(self.fields) if self.fields is not None else 0
