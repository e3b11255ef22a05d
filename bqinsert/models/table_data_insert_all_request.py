"""BQInsert — tabledata.insertAll Request Builder.

Accumulates rows for a streaming insert and renders the canonical JSON body:

  add_row / add_rows → to_body → to_json

Row order is wire order. Nothing here deduplicates or reorders rows;
``insert_id`` is forwarded to the service untouched.
"""

import json
from typing import Any, ClassVar, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import Field, ValidationError
from pydantic_core import to_jsonable_python

from bqinsert.core.errors import SerializationError
from bqinsert.core.logging import get_logger
from bqinsert.models.wire import WireModel

logger = get_logger("models.insert_all")

JSON_SEPARATORS = (",", ":")


def dump_json(value: Any) -> str:
    """Compact UTF-8 JSON text. NaN and Infinity are rejected."""
    return json.dumps(
        value,
        separators=JSON_SEPARATORS,
        ensure_ascii=False,
        allow_nan=False,
        default=to_jsonable_python,
    )


# ─────────────────────────────────────────────
# WIRE MODELS
# ─────────────────────────────────────────────


class TableDataInsertAllRequestRows(WireModel):
    """One row of an insertAll body."""

    omit_if_none: ClassVar[Tuple[str, ...]] = ("insert_id",)

    insert_id: Optional[str] = Field(
        default=None, description="Client-side deduplication id, sent verbatim"
    )
    payload: Any = Field(alias="json", description="Row contents as a JSON value")

    model_config = {"frozen": True}


class TableDataInsertAllRequestBody(WireModel):
    """Immutable snapshot of a request, in wire field order."""

    omit_if_none: ClassVar[Tuple[str, ...]] = ("kind", "template_suffix")

    ignore_unknown_values: bool = False
    kind: Optional[str] = None
    rows: List[TableDataInsertAllRequestRows] = Field(default_factory=list)
    skip_invalid_rows: bool = False
    template_suffix: Optional[str] = None

    model_config = {"frozen": True}


RowLike = Union[TableDataInsertAllRequestRows, Mapping[str, Any]]


# ─────────────────────────────────────────────
# BUILDER
# ─────────────────────────────────────────────


class TableDataInsertAllRequest:
    """Mutable insertAll request.

    Flag setters return ``self`` so calls can be chained::

        request = TableDataInsertAllRequest()
        request.skip_invalid_rows().template_suffix("_20240101")
        request.add_row("id-1", {"name": "a"})
    """

    def __init__(self) -> None:
        self._ignore_unknown_values = False
        self._kind: Optional[str] = None
        self._rows: List[TableDataInsertAllRequestRows] = []
        self._skip_invalid_rows = False
        self._template_suffix: Optional[str] = None

    # ── Flags ──

    def ignore_unknown_values(self) -> "TableDataInsertAllRequest":
        """Accept rows carrying values that are not in the table schema."""
        self._ignore_unknown_values = True
        return self

    def kind(self, kind: str) -> "TableDataInsertAllRequest":
        self._kind = kind
        return self

    def skip_invalid_rows(self) -> "TableDataInsertAllRequest":
        """Insert all valid rows even if some rows in the batch are invalid."""
        self._skip_invalid_rows = True
        return self

    def template_suffix(self, suffix: str) -> "TableDataInsertAllRequest":
        """Route rows into the instance table ``{destination}{suffix}``.

        The service creates the instance table from the base table's schema.
        """
        self._template_suffix = suffix
        return self

    # ── Rows ──

    def add_row(self, insert_id: Optional[str], obj: Any) -> None:
        """Convert ``obj`` to a JSON value and append it as a new row.

        Pydantic models, dataclasses, datetimes, enums and the usual
        containers are accepted. Raises SerializationError if ``obj`` has
        no JSON form (NaN, unknown types, non-scalar mapping keys); the row
        count is unchanged in that case.
        """
        try:
            value = json.loads(dump_json(obj))
        except (TypeError, ValueError, RecursionError) as e:
            logger.warning(
                f"Rejected row: {e}",
                extra={"insert_id": insert_id, "row_count": len(self._rows)},
            )
            raise SerializationError(f"Row is not JSON-serializable: {e}") from e
        self._rows.append(TableDataInsertAllRequestRows(insert_id=insert_id, payload=value))

    def add_rows(self, rows: Iterable[RowLike]) -> None:
        """Append pre-built rows verbatim, in order.

        Mappings are validated into rows first; if any of them is malformed
        nothing is appended.
        """
        try:
            validated = [
                row
                if isinstance(row, TableDataInsertAllRequestRows)
                else TableDataInsertAllRequestRows.model_validate(row)
                for row in rows
            ]
        except ValidationError as e:
            raise SerializationError(f"Invalid row: {e}") from e
        self._rows.extend(validated)

    @property
    def rows(self) -> Tuple[TableDataInsertAllRequestRows, ...]:
        return tuple(self._rows)

    def is_empty(self) -> bool:
        return not self._rows

    def __len__(self) -> int:
        return len(self._rows)

    def clear(self) -> None:
        """Drop all rows. Flags, kind and template suffix are kept."""
        self._rows.clear()

    # ── Encoding ──

    def to_body(self) -> TableDataInsertAllRequestBody:
        return TableDataInsertAllRequestBody(
            ignore_unknown_values=self._ignore_unknown_values,
            kind=self._kind,
            rows=list(self._rows),
            skip_invalid_rows=self._skip_invalid_rows,
            template_suffix=self._template_suffix,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Wire body as a dict with camelCase keys."""
        return self.to_body().model_dump(by_alias=True)

    def to_json(self) -> str:
        """Canonical JSON text sent as the HTTP body."""
        try:
            return dump_json(self.to_dict())
        except (TypeError, ValueError, RecursionError) as e:
            logger.error(
                f"Request is not JSON-serializable: {e}",
                extra={"row_count": len(self._rows)},
            )
            raise SerializationError(f"Request is not JSON-serializable: {e}") from e

    # ── Decoding ──

    @classmethod
    def from_body(cls, body: TableDataInsertAllRequestBody) -> "TableDataInsertAllRequest":
        request = cls()
        request._ignore_unknown_values = body.ignore_unknown_values
        request._kind = body.kind
        request._rows = list(body.rows)
        request._skip_invalid_rows = body.skip_invalid_rows
        request._template_suffix = body.template_suffix
        return request

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TableDataInsertAllRequest":
        try:
            body = TableDataInsertAllRequestBody.model_validate(data)
        except ValidationError as e:
            raise SerializationError(f"Invalid insertAll body: {e}") from e
        return cls.from_body(body)

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "TableDataInsertAllRequest":
        try:
            data = json.loads(text)
        except (ValueError, RecursionError) as e:
            raise SerializationError(f"Invalid insertAll JSON: {e}") from e
        return cls.from_dict(data)

    def __repr__(self) -> str:
        return (
            f"<TableDataInsertAllRequest rows={len(self._rows)} "
            f"ignore_unknown_values={self._ignore_unknown_values} "
            f"skip_invalid_rows={self._skip_invalid_rows} "
            f"kind={self._kind!r} template_suffix={self._template_suffix!r}>"
        )
