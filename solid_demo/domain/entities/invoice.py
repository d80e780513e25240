"""Invoice domain entities."""
from dataclasses import dataclass, field
from typing import List


@dataclass
class Item:
    """Domain entity representing a priced invoice line."""
    
    name: str
    price: float


@dataclass
class Invoice:
    """Domain entity representing an invoice.
    
    Items keep insertion order and may repeat. Nothing is validated:
    negative prices or a tax rate outside [0, 1] are accepted as given.
    """
    
    id: int
    items: List[Item] = field(default_factory=list)
    tax_rate: float = 0.0
    
    def add_item(self, item: Item) -> None:
        """Append a line to the invoice."""
        self.items.append(item)
