"""
Document acquisition: read the uploaded byte stream and decode it.

The stream is a scoped resource. It is closed exactly once before
`read_document` returns or raises, whatever happens while reading.
"""

import codecs
from typing import BinaryIO, Optional

import structlog

from .exceptions import DocumentAcquisitionError

logger = structlog.get_logger(__name__)

DEFAULT_ENCODING = "utf-8"

# Longest marks first: the UTF-32 LE mark starts with the UTF-16 LE mark
BYTE_ORDER_MARKS: tuple[tuple[bytes, str], ...] = (
    (codecs.BOM_UTF32_LE, "utf-32-le"),
    (codecs.BOM_UTF32_BE, "utf-32-be"),
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
)


def detect_bom(raw: bytes) -> tuple[Optional[str], int]:
    """
    Detect a byte-order mark at the start of `raw`.

    Returns:
        (encoding, bom_length), or (None, 0) when there is no BOM
    """
    for bom, encoding in BYTE_ORDER_MARKS:
        if raw.startswith(bom):
            return encoding, len(bom)
    return None, 0


def decode_document(raw: bytes, file_name: Optional[str] = None) -> str:
    """
    Strip a BOM if present and decode strictly.

    Raises:
        DocumentAcquisitionError: Bytes are not valid in the detected encoding
    """
    encoding, bom_length = detect_bom(raw)
    if encoding is not None:
        logger.warning(
            "C-CDA file has a BOM, stripped before validation",
            bom_encoding=encoding,
            file_name=file_name,
        )
    else:
        encoding = DEFAULT_ENCODING

    try:
        return raw[bom_length:].decode(encoding)
    except UnicodeDecodeError as e:
        raise DocumentAcquisitionError(
            f"Error decoding C-CDA contents as {encoding}: {e.reason} at byte {e.start}",
            file_name=file_name,
            encoding=encoding,
        ) from e


def read_document(stream: BinaryIO, file_name: Optional[str] = None) -> str:
    """
    Read, release and decode the document stream.

    Args:
        stream: Binary file-like object (upload spool, open file, BytesIO)
        file_name: Original file name, for diagnostics

    Returns:
        Document text without BOM

    Raises:
        DocumentAcquisitionError: Reading, closing or decoding failed
    """
    try:
        try:
            raw = stream.read()
        finally:
            stream.close()
    except Exception as e:
        # Closed or detached spools raise ValueError rather than OSError
        raise DocumentAcquisitionError(
            f"Error getting C-CDA contents from provided file: {e}",
            file_name=file_name,
        ) from e

    if isinstance(raw, str):
        # Text-mode streams already decoded; only the BOM character remains to strip
        return raw.removeprefix("\ufeff")

    logger.debug("Read C-CDA document", file_name=file_name, size_bytes=len(raw))
    return decode_document(raw, file_name=file_name)
