from __future__ import annotations

import logging
import random
from datetime import date, datetime
from typing import Callable

from product_catalog.core.constants import ID_MAX, ID_MIN
from product_catalog.core.models import Product
from product_catalog.data.record_store import RecordStore

logger = logging.getLogger(__name__)


def random_id() -> int:
    """Id aleatorio en [ID_MIN, ID_MAX). Puede repetirse."""
    return random.randrange(ID_MIN, ID_MAX)


def _fold(ch: str) -> str:
    # mapeo simple 1 a 1: si upper() cambia la longitud ("ß" -> "SS") se deja igual
    up = ch.upper()
    return up if len(up) == 1 else ch


def _same_category(a: str, b: str) -> bool:
    # comparación ordinal sin distinguir mayúsculas (sin collation de locale)
    if len(a) != len(b):
        return False
    return all(x == y or _fold(x) == _fold(y) for x, y in zip(a, b))


class CatalogService:
    """
    Cada operación: carga completa -> transformación en memoria -> (si muta) guardado completo.
    Los errores del store (CorruptDataError, StorageError) se propagan tal cual.
    """

    def __init__(self, store: RecordStore, id_factory: Callable[[], int] = random_id):
        self._store = store
        self._id_factory = id_factory

    # -----------------------------
    # Mutaciones
    # -----------------------------
    def add(self, product: Product) -> None:
        products = self._store.read_all()
        products.append(product)
        self._store.write_all(products)
        logger.info("Producto agregado: id=%s name=%r", product.id, product.name)

    def create(self, name: str, price: float, category: str, manufacture_date: date) -> Product:
        product = Product(
            id=self._id_factory(),
            name=name,
            price=price,
            category=category,
            manufacture_date=manufacture_date,
        )
        self.add(product)
        return product

    def remove_by_id(self, product_id: int) -> bool:
        """Elimina TODOS los registros con ese id. Solo reescribe si hubo cambios."""
        products = self._store.read_all()
        kept = [p for p in products if p.id != product_id]
        removed = len(products) - len(kept)
        if not removed:
            return False
        self._store.write_all(kept)
        logger.info("Eliminados %d productos con id=%s", removed, product_id)
        return True

    # -----------------------------
    # Consultas
    # -----------------------------
    def get_all(self) -> list[Product]:
        return self._store.read_all()

    def get_by_category(self, category: str) -> list[Product]:
        matches = [p for p in self._store.read_all() if _same_category(p.category, category)]
        # sorted() es estable: empates de precio mantienen el orden del archivo
        return sorted(matches, key=lambda p: p.price)

    def get_more_expensive_than(self, price: float) -> list[Product]:
        matches = [p for p in self._store.read_all() if p.price > price]
        # reverse=True también conserva el orden del archivo entre empates
        return sorted(matches, key=lambda p: p.price, reverse=True)

    def get_average_price(self) -> float:
        prices = [p.price for p in self._store.read_all()]
        if not prices:
            return 0.0
        return sum(prices) / len(prices)

    def count_manufactured_after(self, after: date) -> int:
        if isinstance(after, datetime):
            after = after.date()
        return sum(1 for p in self._store.read_all() if p.manufacture_date > after)
