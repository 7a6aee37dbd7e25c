import unittest
from data.errors import DuplicateKeyError, ErrorKind, InvalidArgumentError, NotFoundError
from data.models import ElectronicItem
from data.repository import KeyedRepository


class TestRepository(unittest.TestCase):
    def setUp(self):
        self.repo = KeyedRepository()
        self.laptop = ElectronicItem(1, "Laptop", 10, "Dell", 24)
        self.repo.add(self.laptop)

    def test_add_and_get_item(self):
        retrieved_item = self.repo.get_by_id(1)
        self.assertEqual(retrieved_item.name, "Laptop")
        self.assertEqual(len(self.repo), 1)
        self.assertIn(1, self.repo)

    def test_get_non_existent_item(self):
        with self.assertRaises(NotFoundError) as ctx:
            self.repo.get_by_id(99)
        self.assertEqual(ctx.exception.kind, ErrorKind.NOT_FOUND)
        self.assertEqual(str(ctx.exception), "Item with ID 99 not found.")
        self.assertEqual(len(self.repo), 1)

    def test_add_duplicate_item(self):
        item2 = ElectronicItem(1, "Duplicate Item", 3, "HP", 6)
        with self.assertRaises(DuplicateKeyError):
            self.repo.add(item2)
        self.assertIs(self.repo.get_by_id(1), self.laptop)
        self.assertEqual(self.repo.get_by_id(1).brand, "Dell")
        self.assertEqual(len(self.repo), 1)

    def test_duplicate_is_still_a_value_error(self):
        with self.assertRaises(ValueError):
            self.repo.add(ElectronicItem(1, "Other", 1, "Acer", 1))

    def test_remove_item(self):
        self.repo.remove(1)
        self.assertNotIn(1, self.repo)
        with self.assertRaises(NotFoundError):
            self.repo.get_by_id(1)

    def test_remove_non_existent_item(self):
        with self.assertRaises(NotFoundError):
            self.repo.remove(999)
        self.assertEqual(len(self.repo), 1)

    def test_update_quantity(self):
        self.repo.update_quantity(1, 15)
        stored = self.repo.get_by_id(1)
        self.assertEqual(stored.quantity, 15)
        self.assertEqual(stored.name, "Laptop")
        self.assertEqual(stored.warranty_months, 24)

    def test_update_quantity_to_zero(self):
        self.repo.update_quantity(1, 0)
        self.assertEqual(self.repo.get_by_id(1).quantity, 0)

    def test_update_quantity_unknown_id(self):
        with self.assertRaises(NotFoundError):
            self.repo.update_quantity(999, 5)

    def test_negative_quantity_checked_before_lookup(self):
        for item_id in (1, 999):
            with self.assertRaises(InvalidArgumentError) as ctx:
                self.repo.update_quantity(item_id, -5)
            self.assertEqual(ctx.exception.kind, ErrorKind.INVALID_ARGUMENT)
        self.assertEqual(self.repo.get_by_id(1).quantity, 10)

    def test_get_all_returns_snapshot(self):
        snapshot = self.repo.get_all()
        snapshot.append(ElectronicItem(2, "Phone", 1, "Nokia", 12))
        snapshot[0].quantity = 500
        self.assertEqual(len(self.repo), 1)
        self.assertEqual(self.repo.get_by_id(1).quantity, 10)

    def test_snapshot_unaffected_by_later_mutations(self):
        snapshot = self.repo.get_all()
        self.repo.add(ElectronicItem(2, "Phone", 1, "Nokia", 12))
        self.repo.update_quantity(1, 42)
        self.repo.remove(2)
        self.repo.remove(1)
        self.assertEqual([item.id for item in snapshot], [1])
        self.assertEqual(snapshot[0].quantity, 10)

    def test_seeded_constructor_and_clear(self):
        repo = KeyedRepository([ElectronicItem(5, "Mouse", 3, "Logitech", 12),
                                ElectronicItem(6, "Keyboard", 4, "Logitech", 12)])
        self.assertEqual(sorted(item.id for item in repo.get_all()), [5, 6])
        repo.clear()
        self.assertEqual(repo.get_all(), [])


if __name__ == "__main__":
    unittest.main()
