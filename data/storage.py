# JSON snapshot storage for the inventory log

import logging
from pathlib import Path
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from data.errors import PersistenceFailure
from data.schemas import InventoryRecord

logger = logging.getLogger(__name__)

_records_adapter = TypeAdapter(Optional[List[InventoryRecord]])


def serialize_records(records) -> str:
    """
    Encodes the whole collection as an indented JSON array.
    """
    return _records_adapter.dump_json(list(records), indent=2, by_alias=True).decode("utf-8")


def deserialize_records(document) -> List[InventoryRecord]:
    """
    Decodes a JSON array of records. A ``null`` document decodes to an empty list.
    """
    try:
        records = _records_adapter.validate_json(document)
    except ValidationError as e:
        raise PersistenceFailure(f"Could not decode inventory document: {e.error_count()} error(s), "
                                 f"first: {e.errors()[0]['msg']}") from e
    return records or []


def save_records(path, records):
    document = serialize_records(records)
    try:
        Path(path).write_text(document, encoding="utf-8")
    except OSError as e:
        raise PersistenceFailure(f"Could not write '{path}': {e}") from e
    logger.debug("Wrote %d bytes to %s", len(document), path)


def load_records(path) -> List[InventoryRecord]:
    """
    Reads a previously saved collection. A missing file yields an empty list.
    """
    path = Path(path)
    if not path.exists():
        logger.info("File '%s' not found, starting with an empty collection", path)
        return []
    try:
        document = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PersistenceFailure(f"Could not read '{path}': {e}") from e
    return deserialize_records(document)
