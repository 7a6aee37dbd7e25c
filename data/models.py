# Data models

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


class InventoryItem:
    """
    Base for stock-keeping items. Only ``quantity`` changes after construction.
    """
    def __init__(self, id, name, quantity):
        self.id = id
        self.name = name
        self.quantity = quantity


class ElectronicItem(InventoryItem):
    def __init__(self, id, name, quantity, brand, warranty_months):
        super().__init__(id, name, quantity)
        self.brand = brand
        self.warranty_months = warranty_months

    def __repr__(self):
        return (f"ElectronicItem(id={self.id}, name='{self.name}', quantity={self.quantity}, "
                f"brand='{self.brand}', warranty_months={self.warranty_months})")

    def __str__(self):
        return (f"Electronics #{self.id}: {self.name} ({self.brand}), "
                f"Qty={self.quantity}, Warranty={self.warranty_months}m")


class GroceryItem(InventoryItem):
    def __init__(self, id, name, quantity, expiry_date: date):
        super().__init__(id, name, quantity)
        self.expiry_date = expiry_date

    def __repr__(self):
        return (f"GroceryItem(id={self.id}, name='{self.name}', quantity={self.quantity}, "
                f"expiry_date={self.expiry_date!r})")

    def __str__(self):
        return f"Grocery #{self.id}: {self.name}, Qty={self.quantity}, Expires={self.expiry_date:%Y-%m-%d}"


class Patient:
    def __init__(self, id, name, age, gender):
        self.id = id
        self.name = name
        self.age = age
        self.gender = gender

    def __repr__(self):
        return f"Patient(id={self.id}, name='{self.name}', age={self.age}, gender='{self.gender}')"

    def __str__(self):
        return f"Patient #{self.id}: {self.name}, {self.age}, {self.gender}"


class Prescription:
    def __init__(self, id, patient_id, medication_name, date_issued: date):
        self.id = id
        self.patient_id = patient_id
        self.medication_name = medication_name
        self.date_issued = date_issued

    def __repr__(self):
        return (f"Prescription(id={self.id}, patient_id={self.patient_id}, "
                f"medication_name='{self.medication_name}', date_issued={self.date_issued!r})")

    def __str__(self):
        return (f"Rx #{self.id} for Patient {self.patient_id}: "
                f"{self.medication_name} on {self.date_issued:%Y-%m-%d}")


def grade_for(score):
    """
    Maps a score to a letter grade. Each threshold is inclusive.
    """
    if score >= 80:
        return "A"
    if score >= 70:
        return "B"
    if score >= 60:
        return "C"
    if score >= 50:
        return "D"
    return "F"


class Student:
    def __init__(self, id, full_name, score):
        self.id = id
        self.full_name = full_name
        self.score = score

    @property
    def grade(self):
        return grade_for(self.score)

    def __repr__(self):
        return f"Student(id={self.id}, full_name='{self.full_name}', score={self.score})"

    def __str__(self):
        return f"{self.full_name} (ID: {self.id}): Score = {self.score}, Grade = {self.grade}"


@dataclass(frozen=True)
class Transaction:
    id: int
    date: date
    amount: Decimal
    category: str
