# Persisted record schemas

from datetime import datetime

from pydantic import BaseModel, ConfigDict, NonNegativeInt
from pydantic.alias_generators import to_pascal


class InventoryRecord(BaseModel):
    """
    One entry of the persisted inventory log.

    Serialized with PascalCase keys (``Id``, ``Name``, ``Quantity``,
    ``DateAdded``); snake_case keys are accepted on input as well.
    """
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    id: NonNegativeInt
    name: str
    quantity: NonNegativeInt
    date_added: datetime

    def __str__(self):
        return f"{self.id}: {self.name} | Qty={self.quantity} | Added={self.date_added:%Y-%m-%d %H:%M}"
