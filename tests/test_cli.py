import unittest
from presentation.cli import handle_command, run_shell
from logic.services import WarehouseManager
from io import StringIO
import sys


class TestCLI(unittest.TestCase):
    def setUp(self):
        self.manager = WarehouseManager()
        self.manager.seed_data()

    def run_command(self, command):
        # Redirect stdout to capture print output
        captured_output = StringIO()
        original_stdout = sys.stdout
        sys.stdout = captured_output
        try:
            handle_command(self.manager, command)
        finally:
            sys.stdout = original_stdout  # Reset stdout
        return captured_output.getvalue().strip()

    def test_list_electronics(self):
        output = self.run_command("list electronics").splitlines()
        self.assertEqual(len(output), 3)
        self.assertEqual(output[0], "Electronics #1: Laptop (Dell), Qty=10, Warranty=24m")

    def test_add_stock_command(self):
        self.assertEqual(self.run_command("add_stock electronics 1 5"),
                         "[OK] Increased stock for #1 by 5. New Qty=15")

    def test_set_qty_negative(self):
        self.assertEqual(self.run_command("set_qty groceries 999 -1"),
                         "[Invalid argument] Quantity cannot be negative.")

    def test_remove_missing(self):
        self.assertEqual(self.run_command("remove electronics 999"),
                         "[Error] RemoveItem failed: Item with ID 999 not found.")

    def test_bad_arguments(self):
        self.assertEqual(self.run_command("remove electronics"), "Usage: remove <electronics|groceries> <id>")
        self.assertEqual(self.run_command("add_stock electronics one 5"), "Item ID and quantity must be integers.")
        self.assertIn("Unknown item family 'toys'", self.run_command("remove toys 1"))

    def test_unknown_command(self):
        self.assertEqual(self.run_command("unknown"), "Unknown command.")
        self.assertEqual(self.run_command("   "), "")

    def test_shell_stops_on_exit(self):
        commands = iter(["add_stock groceries 101 10", "exit", "remove groceries 101"])
        captured_output = StringIO()
        original_stdout = sys.stdout
        sys.stdout = captured_output
        try:
            run_shell(self.manager, read=lambda prompt: next(commands))
        finally:
            sys.stdout = original_stdout
        self.assertEqual(self.manager.groceries.get_by_id(101).quantity, 60)
        self.assertEqual(next(commands), "remove groceries 101")


if __name__ == "__main__":
    unittest.main()
