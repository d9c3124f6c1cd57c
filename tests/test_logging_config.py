import logging

from product_catalog.core.logging_config import setup_logging


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "catalog.log"
    setup_logging("debug", str(log_file))
    logging.getLogger("product_catalog.test").debug("hola")
    for h in logging.root.handlers:
        h.flush()
    assert "[DEBUG] product_catalog.test: hola" in log_file.read_text(encoding="utf-8")
    setup_logging("WARNING")
    assert logging.root.level == logging.WARNING
