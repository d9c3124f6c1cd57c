import struct
from datetime import date

import pytest

from product_catalog.core.constants import TICKS_PER_DAY
from product_catalog.core.errors import CorruptDataError, StorageError
from product_catalog.core.models import Product
from product_catalog.data.record_store import (
    RecordStore, date_to_ticks, decode_products, encode_products, ticks_to_date,
)


def _p(id=1, name="Widget", price=10.0, category="Tools", d=date(2020, 1, 1)):
    return Product(id=id, name=name, price=price, category=category, manufacture_date=d)


def test_read_all_missing_file_returns_empty(tmp_path):
    store = RecordStore(tmp_path / "nope.bin")
    assert store.read_all() == []
    assert not (tmp_path / "nope.bin").exists()


def test_write_then_read_keeps_order_and_values(tmp_path):
    products = [
        _p(id=42, name="Café ñandú", price=0.1, category="Bebidas"),
        _p(id=42, name="Duplicado", price=99.99, category="bebidas", d=date(1999, 12, 31)),
        _p(id=-7, name="x" * 300, price=0.0, category="", d=date(1, 1, 1)),
    ]
    store = RecordStore(tmp_path / "products.bin")
    store.write_all(products)
    assert store.read_all() == products


def test_write_empty_list(tmp_path):
    store = RecordStore(tmp_path / "products.bin")
    store.write_all([])
    assert (tmp_path / "products.bin").read_bytes() == b"\x00\x00\x00\x00"
    assert store.read_all() == []


def test_binary_layout_is_little_endian():
    data = encode_products([_p(id=1, name="A", price=10.0, category="B", d=date(1, 1, 2))])
    expected = (
        struct.pack("<i", 1)
        + struct.pack("<i", 1)
        + b"\x01A"
        + struct.pack("<d", 10.0)
        + b"\x01B"
        + struct.pack("<q", TICKS_PER_DAY)
    )
    assert data == expected


def test_long_string_uses_multibyte_length_prefix():
    data = encode_products([_p(name="n" * 200)])
    # 4 (count) + 4 (id), luego varint 200 = 0xC8 0x01
    assert data[8:10] == b"\xc8\x01"
    assert decode_products(data)[0].name == "n" * 200


def test_ticks_match_dotnet_values():
    assert date_to_ticks(date(1, 1, 1)) == 0
    assert date_to_ticks(date(2020, 1, 1)) == 637134336000000000
    assert ticks_to_date(637134336000000000) == date(2020, 1, 1)


def test_time_of_day_ticks_are_truncated():
    assert ticks_to_date(TICKS_PER_DAY * 10 + 5) == date(1, 1, 11)


def test_truncated_file_is_corrupt(tmp_path):
    path = tmp_path / "products.bin"
    RecordStore(path).write_all([_p(), _p(id=2)])
    path.write_bytes(path.read_bytes()[:-1])
    with pytest.raises(CorruptDataError):
        RecordStore(path).read_all()


def test_count_larger_than_records_is_corrupt():
    data = struct.pack("<i", 2) + encode_products([_p()])[4:]
    with pytest.raises(CorruptDataError):
        decode_products(data)


@pytest.mark.parametrize("data", [
    b"",
    b"\x01\x00",
    struct.pack("<i", -1),
    struct.pack("<i", 1) + struct.pack("<i", 5) + b"\xff\xff\xff\xff\xff",
    struct.pack("<i", 1) + struct.pack("<i", 5) + b"\x01\xff",
])
def test_undecodable_data_is_corrupt(data):
    with pytest.raises(CorruptDataError):
        decode_products(data)


def test_negative_ticks_are_corrupt():
    data = encode_products([_p()])[:-8] + struct.pack("<q", -1)
    with pytest.raises(CorruptDataError):
        decode_products(data)


def test_trailing_bytes_are_ignored():
    data = encode_products([_p()]) + b"\x00\x01"
    assert decode_products(data) == [_p()]


def test_encoding_error_leaves_file_untouched(tmp_path):
    path = tmp_path / "products.bin"
    store = RecordStore(path)
    store.write_all([_p()])
    before = path.read_bytes()

    bad = _p().model_copy(update={"id": 2**40})
    with pytest.raises(ValueError):
        store.write_all([bad])
    assert path.read_bytes() == before


def test_io_failure_is_storage_error(tmp_path):
    # un directorio en lugar de archivo
    store = RecordStore(tmp_path)
    with pytest.raises(StorageError):
        store.read_all()
    with pytest.raises(StorageError):
        store.write_all([])
