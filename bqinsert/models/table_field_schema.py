"""BQInsert — Table Field Descriptors."""

from enum import Enum
from typing import ClassVar, List, Optional, Tuple

from pydantic import Field

from bqinsert.models.wire import WireModel


class FieldType(str, Enum):
    """Column types accepted by the warehouse (legacy and standard SQL names)."""

    STRING = "STRING"
    BYTES = "BYTES"
    INTEGER = "INTEGER"
    INT64 = "INT64"
    FLOAT = "FLOAT"
    FLOAT64 = "FLOAT64"
    NUMERIC = "NUMERIC"
    BIGNUMERIC = "BIGNUMERIC"
    BOOLEAN = "BOOLEAN"
    BOOL = "BOOL"
    TIMESTAMP = "TIMESTAMP"
    DATE = "DATE"
    TIME = "TIME"
    DATETIME = "DATETIME"
    GEOGRAPHY = "GEOGRAPHY"
    JSON = "JSON"
    INTERVAL = "INTERVAL"
    RECORD = "RECORD"  # Nested columns, see `fields`
    STRUCT = "STRUCT"  # Same as RECORD


class FieldMode(str, Enum):
    NULLABLE = "NULLABLE"
    REQUIRED = "REQUIRED"
    REPEATED = "REPEATED"


class TableFieldSchema(WireModel):
    """A single column of a table schema."""

    omit_if_none: ClassVar[Tuple[str, ...]] = ("mode", "description", "fields")

    name: str = Field(..., description="Column name")
    type: FieldType = Field(..., description="Column type")
    mode: Optional[FieldMode] = Field(default=None, description="Defaults to NULLABLE server-side")
    description: Optional[str] = None
    fields: Optional[List["TableFieldSchema"]] = Field(
        default=None, description="Sub-fields when type is RECORD/STRUCT"
    )

    @property
    def is_record(self) -> bool:
        return self.type in (FieldType.RECORD, FieldType.STRUCT)

    @property
    def is_repeated(self) -> bool:
        return self.mode == FieldMode.REPEATED

    # ── Constructors ──
    # These names shadow builtins inside the class body; keep them last.

    @classmethod
    def scalar(
        cls, name: str, field_type: FieldType, mode: Optional[FieldMode] = None
    ) -> "TableFieldSchema":
        return cls(name=name, type=field_type, mode=mode)

    @classmethod
    def string(cls, name: str, mode: Optional[FieldMode] = None) -> "TableFieldSchema":
        return cls.scalar(name, FieldType.STRING, mode)

    @classmethod
    def bytes(cls, name: str, mode: Optional[FieldMode] = None) -> "TableFieldSchema":
        return cls.scalar(name, FieldType.BYTES, mode)

    @classmethod
    def integer(cls, name: str, mode: Optional[FieldMode] = None) -> "TableFieldSchema":
        return cls.scalar(name, FieldType.INTEGER, mode)

    @classmethod
    def float(cls, name: str, mode: Optional[FieldMode] = None) -> "TableFieldSchema":
        return cls.scalar(name, FieldType.FLOAT, mode)

    @classmethod
    def numeric(cls, name: str, mode: Optional[FieldMode] = None) -> "TableFieldSchema":
        return cls.scalar(name, FieldType.NUMERIC, mode)

    @classmethod
    def bool(cls, name: str, mode: Optional[FieldMode] = None) -> "TableFieldSchema":
        return cls.scalar(name, FieldType.BOOLEAN, mode)

    @classmethod
    def timestamp(cls, name: str, mode: Optional[FieldMode] = None) -> "TableFieldSchema":
        return cls.scalar(name, FieldType.TIMESTAMP, mode)

    @classmethod
    def date(cls, name: str, mode: Optional[FieldMode] = None) -> "TableFieldSchema":
        return cls.scalar(name, FieldType.DATE, mode)

    @classmethod
    def time(cls, name: str, mode: Optional[FieldMode] = None) -> "TableFieldSchema":
        return cls.scalar(name, FieldType.TIME, mode)

    @classmethod
    def datetime(cls, name: str, mode: Optional[FieldMode] = None) -> "TableFieldSchema":
        return cls.scalar(name, FieldType.DATETIME, mode)

    @classmethod
    def geography(cls, name: str, mode: Optional[FieldMode] = None) -> "TableFieldSchema":
        return cls.scalar(name, FieldType.GEOGRAPHY, mode)

    @classmethod
    def json(cls, name: str, mode: Optional[FieldMode] = None) -> "TableFieldSchema":
        return cls.scalar(name, FieldType.JSON, mode)

    @classmethod
    def record(
        cls,
        name: str,
        fields: List["TableFieldSchema"],
        mode: Optional[FieldMode] = None,
    ) -> "TableFieldSchema":
        """Nested column built from ``fields``."""
        return cls(name=name, type=FieldType.RECORD, mode=mode, fields=fields)
