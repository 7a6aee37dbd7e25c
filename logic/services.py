# Business services

import calendar
import logging
from datetime import date, timedelta

from data.errors import StockkeeperError
from data.models import ElectronicItem, GroceryItem, Patient, Prescription
from data.repository import KeyedRepository
from utils.helpers import group_by

logger = logging.getLogger(__name__)


def add_months(day, months):
    month_index = day.month - 1 + months
    year, month = day.year + month_index // 12, month_index % 12 + 1
    # Clamp to the last day of the target month, e.g. Jan 31 + 1 month -> Feb 28.
    last_day = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last_day))


class WarehouseManager:
    """
    Keeps one repository per item family and wraps stock adjustments
    in report lines for the console.
    """

    def __init__(self):
        self.electronics = KeyedRepository()
        self.groceries = KeyedRepository()

    def seed_data(self, today=None):
        today = today or date.today()
        self.electronics.add(ElectronicItem(1, "Laptop", 10, "Dell", 24))
        self.electronics.add(ElectronicItem(2, "Smartphone", 25, "Samsung", 12))
        self.electronics.add(ElectronicItem(3, "Router", 15, "TP-Link", 18))

        self.groceries.add(GroceryItem(101, "Rice 5kg", 50, add_months(today, 12)))
        self.groceries.add(GroceryItem(102, "Milk 1L", 80, today + timedelta(days=20)))
        self.groceries.add(GroceryItem(103, "Bread", 30, today + timedelta(days=3)))

    def increase_stock(self, repo, item_id, quantity):
        """
        Raises the stored quantity of ``item_id`` by ``quantity``.
        """
        try:
            current = repo.get_by_id(item_id)
            updated = repo.update_quantity(item_id, current.quantity + quantity)
        except StockkeeperError as e:
            logger.warning("Increase stock for #%s failed: %s", item_id, e)
            return f"[Error] IncreaseStock failed: {e}"
        return f"[OK] Increased stock for #{item_id} by {quantity}. New Qty={updated.quantity}"

    def remove_item_by_id(self, repo, item_id):
        try:
            repo.remove(item_id)
        except StockkeeperError as e:
            logger.warning("Remove of #%s failed: %s", item_id, e)
            return f"[Error] RemoveItem failed: {e}"
        return f"[OK] Removed item #{item_id}"


class HealthSystemApp:
    def __init__(self):
        self.patients = KeyedRepository()
        self.prescriptions = KeyedRepository()
        self._prescription_map = {}

    def seed_data(self, today=None):
        today = today or date.today()
        self.patients.add(Patient(1, "Alice Smith", 30, "F"))
        self.patients.add(Patient(2, "John Mensah", 45, "M"))
        self.patients.add(Patient(3, "Ama Owusu", 22, "F"))

        self.prescriptions.add(Prescription(101, 1, "Amoxicillin 500mg", today - timedelta(days=10)))
        self.prescriptions.add(Prescription(102, 1, "Ibuprofen 200mg", today - timedelta(days=5)))
        self.prescriptions.add(Prescription(103, 2, "Metformin 500mg", today - timedelta(days=2)))
        self.prescriptions.add(Prescription(104, 3, "Cetirizine 10mg", today - timedelta(days=1)))
        self.prescriptions.add(Prescription(105, 2, "Lisinopril 10mg", today))

    def build_prescription_map(self):
        """
        Groups the current prescriptions by patient id.
        Prescriptions added afterwards are not visible until the next rebuild.
        """
        self._prescription_map = group_by(self.prescriptions.get_all(), lambda rx: rx.patient_id)
        logger.debug("Prescription map built for %d patients", len(self._prescription_map))

    def get_prescriptions_by_patient_id(self, patient_id):
        return list(self._prescription_map.get(patient_id, []))
