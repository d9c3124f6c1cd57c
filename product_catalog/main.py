from __future__ import annotations
from dotenv import load_dotenv
load_dotenv()

from product_catalog.core.config import load_settings
from product_catalog.core.logging_config import setup_logging
from product_catalog.data.record_store import RecordStore
from product_catalog.engine.catalog_service import CatalogService
from product_catalog.ui.console import ConsoleApp

def main():
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_file)
    service = CatalogService(RecordStore(settings.catalog_path))
    ConsoleApp(service).run()

if __name__ == "__main__":
    main()
