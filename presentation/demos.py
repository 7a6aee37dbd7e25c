# Console demos, one per exercise

import logging
import os
from datetime import date

from data.errors import StockkeeperError
from data.models import GroceryItem
from logic.finance import FinanceApp
from logic.grading import read_students_from_file, write_demo_input, write_report
from logic.inventory import InventoryApp
from logic.services import HealthSystemApp, WarehouseManager, add_months
from presentation.formatting import describe_error, print_section, render_items

logger = logging.getLogger(__name__)


def run_finance_demo():
    for line in FinanceApp().run():
        print(line)


def run_healthcare_demo(patient_id=2):
    app = HealthSystemApp()
    app.seed_data()
    app.build_prescription_map()

    print_section("Patients", render_items(app.patients.get_all()))
    prescriptions = app.get_prescriptions_by_patient_id(patient_id)
    print_section(f"Prescriptions for Patient {patient_id}",
                  render_items(prescriptions) or ["No prescriptions."],
                  leading_blank=True)


def run_warehouse_demo():
    manager = WarehouseManager()
    manager.seed_data()

    print_section("Grocery Items", render_items(manager.groceries.get_all()))
    print_section("Electronic Items", render_items(manager.electronics.get_all()), leading_blank=True)

    print()
    print("== Exception Scenarios ==")
    try:
        manager.groceries.add(GroceryItem(101, "Duplicate Rice", 10, add_months(date.today(), 6)))
    except StockkeeperError as e:
        print(describe_error(e))

    print(manager.remove_item_by_id(manager.electronics, 999))

    try:
        manager.electronics.update_quantity(1, -5)
    except StockkeeperError as e:
        print(describe_error(e))
    return manager


def run_grading_demo(input_path, output_path, create_demo_input=False):
    """
    Reads the score sheet at ``input_path`` and writes the graded report.
    Returns 0 on success and 1 when the input could not be processed.
    """
    try:
        if create_demo_input and not os.path.exists(input_path):
            write_demo_input(input_path)
            print(f"[Demo] Created sample input at '{input_path}'.")
        students = read_students_from_file(input_path)
        write_report(students, output_path)
    except FileNotFoundError:
        print(f"Input file '{input_path}' not found.")
        return 1
    except StockkeeperError as e:
        print(describe_error(e))
        return 1
    except OSError as e:
        logger.exception("Grading I/O failed")
        print(f"Unexpected error: {e}")
        return 1
    print(f"Report written to '{output_path}'.")
    return 0


def run_inventory_demo(path):
    app = InventoryApp(path)
    app.seed_sample_data()
    print(app.save_data())
    if app.inventory.last_error:
        return 1

    new_session = InventoryApp(path)
    print(new_session.load_data())
    for line in new_session.item_lines():
        print(line)
    return 1 if new_session.inventory.last_error else 0
