from __future__ import annotations

import logging
from typing import Iterable

from product_catalog.core.errors import CatalogError
from product_catalog.core.models import Product
from product_catalog.data.export import export_to_csv, export_to_excel
from product_catalog.engine.catalog_service import CatalogService
from product_catalog.ui.prompts import InputFn, OutputFn, ask_date, ask_float, ask_int, ask_text

logger = logging.getLogger(__name__)

MENU = """
   Catálogo de productos
1) Ver todos los productos
2) Agregar producto
3) Eliminar producto
4) Productos por categoría
5) Productos más caros que un precio
6) Precio promedio
7) Cantidad de productos posteriores a una fecha
8) Exportar catálogo (CSV / Excel)
0) Salir"""

NOTHING_FOUND = "No se encontró nada"


class ConsoleApp:
    def __init__(self, service: CatalogService, input_fn: InputFn = input, out: OutputFn = print):
        self.service = service
        self.input = input_fn
        self.out = out

        self._actions = {
            "1": self.show_all,
            "2": self.add_product,
            "3": self.remove_product,
            "4": self.show_by_category,
            "5": self.show_more_expensive,
            "6": self.show_average,
            "7": self.show_count_after,
            "8": self.export,
        }

    def run(self) -> None:
        while True:
            self.out(MENU)
            try:
                choice = self.input("Elija una opción: ").strip()
                if choice == "0":
                    return
                if not self.handle(choice):
                    self.out("Opción de menú inválida")
            except EOFError:
                # stdin cerrado, también a mitad de una acción
                return

    def handle(self, choice: str) -> bool:
        action = self._actions.get(choice)
        if action is None:
            return False
        try:
            action()
        except CatalogError as e:
            logger.exception("Falló la opción %s", choice)
            self.out(f"Error: {e}")
        return True

    # -----------------------------
    # Acciones
    # -----------------------------
    def _print_products(self, products: Iterable[Product]) -> None:
        products = list(products)
        if not products:
            self.out(NOTHING_FOUND)
            return
        for p in products:
            self.out(str(p))

    def show_all(self) -> None:
        self._print_products(self.service.get_all())

    def add_product(self) -> None:
        name = ask_text("Nombre: ", self.input, self.out)
        price = ask_float("Precio: ", minimum=0, input_fn=self.input, out=self.out)
        category = ask_text("Categoría: ", self.input, self.out)
        manufacture_date = ask_date("Fecha de fabricación (dd/mm/aaaa): ", self.input, self.out)
        product = self.service.create(name, price, category, manufacture_date)
        self.out("Producto agregado")
        self.out(str(product))

    def remove_product(self) -> None:
        product_id = ask_int("Id a eliminar: ", self.input, self.out)
        if self.service.remove_by_id(product_id):
            self.out("Eliminado")
        else:
            self.out("No existe un producto con ese id.")

    def show_by_category(self) -> None:
        category = ask_text("Categoría: ", self.input, self.out)
        self._print_products(self.service.get_by_category(category))

    def show_more_expensive(self) -> None:
        price = ask_float("Precio mínimo: ", input_fn=self.input, out=self.out)
        self._print_products(self.service.get_more_expensive_than(price))

    def show_average(self) -> None:
        self.out(f"Precio promedio: {self.service.get_average_price():.2f}")

    def show_count_after(self) -> None:
        after = ask_date("Fecha (dd/mm/aaaa): ", self.input, self.out)
        self.out(f"Cantidad: {self.service.count_manufactured_after(after)}")

    def export(self) -> None:
        path = ask_text("Archivo de salida (.csv o .xlsx): ", self.input, self.out)
        products = self.service.get_all()
        try:
            if path.lower().endswith(".xlsx"):
                export_to_excel(products, path)
            else:
                export_to_csv(products, path)
        except OSError as e:
            logger.exception("No se pudo exportar a %s", path)
            self.out(f"Error: no se pudo exportar a {path}: {e}")
            return
        self.out(f"Exportados {len(products)} productos a {path}")
