from __future__ import annotations
import pandas as pd
from product_catalog.core.models import Product

COLUMNS = ["id", "name", "category", "price", "manufacture_date"]

def products_to_frame(products: list[Product]) -> pd.DataFrame:
    df = pd.DataFrame([p.to_dict() for p in products], columns=COLUMNS)
    df["manufacture_date"] = pd.to_datetime(df["manufacture_date"])
    return df

def export_to_excel(products: list[Product], path: str) -> None:
    with pd.ExcelWriter(path, engine="xlsxwriter") as writer:
        products_to_frame(products).to_excel(writer, index=False, sheet_name="products")

def export_to_csv(products: list[Product], path: str) -> None:
    products_to_frame(products).to_csv(path, index=False, encoding="utf-8", date_format="%Y-%m-%d")
