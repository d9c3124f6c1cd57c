from __future__ import annotations

import logging
import struct
from datetime import date, timedelta
from pathlib import Path
from typing import Iterable

from product_catalog.core.constants import TICKS_EPOCH, TICKS_PER_DAY
from product_catalog.core.errors import CorruptDataError, StorageError
from product_catalog.core.models import Product

logger = logging.getLogger(__name__)

# Todo en little-endian
_INT32 = struct.Struct("<i")
_INT64 = struct.Struct("<q")
_FLOAT64 = struct.Struct("<d")

# Un int32 en varint de 7 bits ocupa como máximo 5 bytes
_MAX_VARINT_BYTES = 5


def date_to_ticks(d: date) -> int:
    return (d - TICKS_EPOCH).days * TICKS_PER_DAY


def ticks_to_date(ticks: int) -> date:
    """La parte de hora (si la hay) se descarta."""
    if ticks < 0:
        raise CorruptDataError(f"Ticks negativos: {ticks}")
    try:
        return TICKS_EPOCH + timedelta(days=ticks // TICKS_PER_DAY)
    except OverflowError as e:
        raise CorruptDataError(f"Ticks fuera de rango: {ticks}") from e


def _encode_varint(value: int) -> bytes:
    out = bytearray()
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)
    return bytes(out)


def _encode_string(text: str) -> bytes:
    raw = text.encode("utf-8")
    return _encode_varint(len(raw)) + raw


class _Reader:
    """Cursor sobre el contenido completo del archivo."""

    def __init__(self, data: bytes):
        self.data = data
        self.pos = 0

    def remaining(self) -> int:
        return len(self.data) - self.pos

    def take(self, n: int, what: str) -> bytes:
        if self.remaining() < n:
            raise CorruptDataError(
                f"Fin de datos inesperado leyendo {what} (offset {self.pos}, faltan {n - self.remaining()} bytes)"
            )
        chunk = self.data[self.pos:self.pos + n]
        self.pos += n
        return chunk

    def unpack(self, fmt: struct.Struct, what: str):
        return fmt.unpack(self.take(fmt.size, what))[0]

    def varint(self, what: str) -> int:
        value = 0
        for i in range(_MAX_VARINT_BYTES):
            b = self.take(1, what)[0]
            value |= (b & 0x7F) << (7 * i)
            if not b & 0x80:
                break
        else:
            raise CorruptDataError(f"Prefijo de longitud inválido en {what} (offset {self.pos})")
        if value > 0x7FFFFFFF:
            raise CorruptDataError(f"Prefijo de longitud fuera de rango en {what}: {value}")
        return value

    def string(self, what: str) -> str:
        length = self.varint(what)
        raw = self.take(length, what)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise CorruptDataError(f"UTF-8 inválido en {what}: {e}") from e


def encode_products(products: Iterable[Product]) -> bytes:
    items = list(products)
    parts = [_INT32.pack(len(items))]
    for p in items:
        try:
            parts.append(_INT32.pack(p.id))
        except struct.error as e:
            raise ValueError(f"Id fuera de rango int32: {p.id}") from e
        parts.append(_encode_string(p.name))
        parts.append(_FLOAT64.pack(p.price))
        parts.append(_encode_string(p.category))
        parts.append(_INT64.pack(date_to_ticks(p.manufacture_date)))
    return b"".join(parts)


def decode_products(data: bytes) -> list[Product]:
    r = _Reader(data)
    count = r.unpack(_INT32, "cantidad de registros")
    if count < 0:
        raise CorruptDataError(f"Cantidad de registros negativa: {count}")

    products: list[Product] = []
    for i in range(count):
        what = f"registro {i}"
        products.append(Product(
            id=r.unpack(_INT32, f"{what}.id"),
            name=r.string(f"{what}.name"),
            price=r.unpack(_FLOAT64, f"{what}.price"),
            category=r.string(f"{what}.category"),
            manufacture_date=ticks_to_date(r.unpack(_INT64, f"{what}.manufacture_date")),
        ))

    if r.remaining():
        logger.warning("Se ignoran %d bytes al final del archivo", r.remaining())
    return products


class RecordStore:
    """
    Lectura/escritura del catálogo completo en un único archivo binario.
    Sin caché: cada llamada hace I/O completo. Sin locks: un solo escritor.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def read_all(self) -> list[Product]:
        if not self.path.exists():
            logger.debug("Archivo %s no existe, catálogo vacío", self.path)
            return []
        try:
            with self.path.open("rb") as f:
                data = f.read()
        except OSError as e:
            raise StorageError(f"No se pudo leer {self.path}: {e}") from e

        products = decode_products(data)
        logger.debug("Leídos %d productos de %s", len(products), self.path)
        return products

    def write_all(self, products: Iterable[Product]) -> None:
        # se codifica antes de abrir: un error de datos no trunca el archivo
        payload = encode_products(products)
        try:
            with self.path.open("wb") as f:
                f.write(payload)
        except OSError as e:
            raise StorageError(f"No se pudo escribir {self.path}: {e}") from e
        logger.debug("Escritos %d bytes en %s", len(payload), self.path)
