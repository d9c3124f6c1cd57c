from __future__ import annotations
from datetime import date
from pydantic import BaseModel, Field

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# --- Producto ---
class Product(BaseModel):
    id: int = Field(ge=INT32_MIN, le=INT32_MAX)  # se escribe como int32
    name: str
    price: float
    category: str
    manufacture_date: date

    def to_dict(self) -> dict:
        return self.model_dump()

    def __str__(self) -> str:
        return (
            f"{self.id:<5} | {self.name:<25} | {self.category:<15} | "
            f"{self.price:>10.2f} | {self.manufacture_date:%d.%m.%Y}"
        )
