from __future__ import annotations


class CatalogError(Exception):
    """Base de los errores del catálogo."""


class CorruptDataError(CatalogError):
    """El archivo existe pero no se puede decodificar."""


class StorageError(CatalogError):
    """El archivo no se puede leer o escribir (permisos, disco lleno, ...)."""
