from datetime import date

# Rango de ids aleatorios para productos nuevos: [ID_MIN, ID_MAX)
ID_MIN = 1000
ID_MAX = 9999

DEFAULT_CATALOG_PATH = "products.bin"

# Ticks = intervalos de 100 ns desde 0001-01-01 00:00:00
TICKS_EPOCH = date(1, 1, 1)
TICKS_PER_DAY = 864_000_000_000
