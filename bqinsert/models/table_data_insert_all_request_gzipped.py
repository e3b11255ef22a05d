"""BQInsert — Gzip-Compressed insertAll Body.

Only available while ``BQINSERT_GZIP_ENABLED`` is on. The transport layer
sends ``data`` as the HTTP body with ``Content-Encoding: gzip``.
"""

import zlib

from bqinsert.config import settings
from bqinsert.core.errors import CompressionError, FeatureDisabledError
from bqinsert.core.logging import get_logger
from bqinsert.models.table_data_insert_all_request import TableDataInsertAllRequest

logger = get_logger("models.insert_all_gzipped")

# wbits for a gzip container around the DEFLATE stream
GZIP_WBITS = 16 + zlib.MAX_WBITS


class TableDataInsertAllRequestGzipped:
    """Opaque gzip bytes of one serialized insertAll request."""

    content_encoding = "gzip"

    def __init__(self, data: bytes):
        self._data = bytes(data)

    @classmethod
    def try_from(cls, request: TableDataInsertAllRequest) -> "TableDataInsertAllRequestGzipped":
        """Serialize and compress ``request``, spending it.

        On success the request's rows are cleared, so the same rows are not
        sent twice by accident. On error the request is left as it was.

        Raises:
            FeatureDisabledError: gzip support is switched off.
            SerializationError: the request has no JSON form.
            CompressionError: the gzip stream could not be written or finished.
        """
        if not settings.gzip_enabled:
            raise FeatureDisabledError("gzip")

        raw = request.to_json().encode("utf-8")
        try:
            encoder = zlib.compressobj(settings.gzip_compression_level, zlib.DEFLATED, GZIP_WBITS)
            data = encoder.compress(raw) + encoder.flush()
        except (zlib.error, ValueError, MemoryError) as e:
            logger.error(
                f"Gzip encoding failed: {e}",
                extra={"row_count": len(request), "raw_bytes": len(raw)},
            )
            raise CompressionError(f"Failed to gzip insertAll body: {e}") from e

        logger.debug(
            f"Compressed insertAll body {len(raw)} → {len(data)} bytes",
            extra={
                "row_count": len(request),
                "raw_bytes": len(raw),
                "compressed_bytes": len(data),
            },
        )
        request.clear()
        return cls(data)

    @property
    def data(self) -> bytes:
        return self._data

    def __bytes__(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"<TableDataInsertAllRequestGzipped {len(self._data)} bytes>"
