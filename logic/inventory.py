# Inventory log with JSON snapshot persistence

import logging
from datetime import datetime

from data.errors import DuplicateKeyError, PersistenceFailure
from data.repository import KeyedRepository
from data.schemas import InventoryRecord
from data.storage import load_records, save_records

logger = logging.getLogger(__name__)


class InventoryLogger:
    """
    Keeps inventory records in memory and snapshots them to a JSON file.

    save_to_file and load_from_file never raise on I/O or decode problems.
    The failure is logged, returned as a report line and kept on
    ``last_error``; the in-memory records stay as they were.
    """

    def __init__(self, file_path):
        self.file_path = file_path
        self.last_error = None
        self._records = KeyedRepository()

    def add(self, record):
        return self._records.add(record)

    def get_all(self):
        return self._records.get_all()

    def save_to_file(self):
        records = self._records.get_all()
        try:
            save_records(self.file_path, records)
        except PersistenceFailure as e:
            return self._report_failure("Save", e)
        self.last_error = None
        return f"Saved {len(records)} items -> {self.file_path}"

    def load_from_file(self):
        try:
            loaded = self._index(load_records(self.file_path))
        except PersistenceFailure as e:
            return self._report_failure("Load", e)

        self._records = loaded
        self.last_error = None
        return f"Loaded {len(loaded)} items <- {self.file_path}"

    def _index(self, records):
        try:
            return KeyedRepository(records)
        except DuplicateKeyError as e:
            raise PersistenceFailure(f"'{self.file_path}' holds duplicate records: {e}") from e

    def _report_failure(self, action, error):
        logger.error("%s of %s failed: %s", action, self.file_path, error)
        self.last_error = error
        return f"[{action} Error] {error}"


class InventoryApp:
    def __init__(self, file_path):
        self.inventory = InventoryLogger(file_path)

    def seed_sample_data(self, now=None):
        now = now or datetime.now()
        self.inventory.add(InventoryRecord(id=1, name="USB-C Cable", quantity=40, date_added=now))
        self.inventory.add(InventoryRecord(id=2, name="HDMI Adapter", quantity=25, date_added=now))
        self.inventory.add(InventoryRecord(id=3, name="Notebook A5", quantity=100, date_added=now))
        self.inventory.add(InventoryRecord(id=4, name="Pen Blue", quantity=250, date_added=now))
        self.inventory.add(InventoryRecord(id=5, name="Stapler", quantity=15, date_added=now))

    def save_data(self):
        return self.inventory.save_to_file()

    def load_data(self):
        return self.inventory.load_from_file()

    def item_lines(self):
        return [str(record) for record in self.inventory.get_all()]
