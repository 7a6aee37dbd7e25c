# Utility functions

from decimal import Decimal


def group_by(records, key):
    """
    Partitions records into a dict of lists keyed by ``key(record)``.
    Records keep their input order within each group.
    """
    groups = {}
    for record in records:
        groups.setdefault(key(record), []).append(record)
    return groups


def format_money(amount):
    """
    Formats an amount as dollars with two decimals, e.g. ``$1,200.00``.
    Negative amounts render as ``-$5.00``.
    """
    amount = Decimal(amount)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"
