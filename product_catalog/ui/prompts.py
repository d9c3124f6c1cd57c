from __future__ import annotations

import re
from datetime import date
from typing import Callable, Optional

from dateutil import parser

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

# dd/mm/aaaa (también acepta . o - como separador)
_DATE_RE = re.compile(r"^\s*\d{1,2}[/.-]\d{1,2}[/.-]\d{4}\s*$")


def parse_number(text: str) -> Optional[float]:
    """
    Acepta coma o punto decimal. Rechaza ceros a la izquierda ("012", "-01"),
    salvo "0" y "0,x" / "-0,x".
    """
    s = text.strip().replace(",", ".")
    if not s:
        return None
    digits = s[1:] if s[0] in "+-" else s
    if len(digits) > 1 and digits[0] == "0" and digits[1] != ".":
        return None
    if s in ("-0", "+0"):
        return None
    try:
        value = float(s)
    except ValueError:
        return None
    if value != value or value in (float("inf"), float("-inf")):
        return None
    return value


def parse_date(text: str) -> Optional[date]:
    if not _DATE_RE.match(text):
        return None
    normalized = re.sub(r"[.-]", "/", text.strip())
    day, month, _ = (int(x) for x in normalized.split("/"))
    try:
        parsed = parser.parse(normalized, dayfirst=True).date()
    except (ValueError, OverflowError):
        return None
    # dayfirst es solo una pista: si el mes es > 12 dateutil invierte los campos
    if (parsed.day, parsed.month) != (day, month):
        return None
    return parsed


def ask_text(prompt: str, input_fn: InputFn = input, out: OutputFn = print) -> str:
    while True:
        value = input_fn(prompt).strip()
        if value:
            return value
        out("Entrada vacía. Intente de nuevo.")


def ask_float(
    prompt: str,
    minimum: Optional[float] = None,
    input_fn: InputFn = input,
    out: OutputFn = print,
) -> float:
    while True:
        raw = input_fn(prompt)
        if not raw.strip():
            out("Entrada vacía. Intente de nuevo.")
            continue
        value = parse_number(raw)
        if value is None:
            out("Número inválido. Ejemplo: 12,50")
            continue
        if minimum is not None and value < minimum:
            out(f"El valor no puede ser menor que {minimum:g}.")
            continue
        return value


def ask_int(prompt: str, input_fn: InputFn = input, out: OutputFn = print) -> int:
    while True:
        value = ask_float(prompt, input_fn=input_fn, out=out)
        if value.is_integer():
            return int(value)
        out("Ingrese un número ENTERO.")


def ask_date(prompt: str, input_fn: InputFn = input, out: OutputFn = print) -> date:
    while True:
        raw = ask_text(prompt, input_fn=input_fn, out=out)
        value = parse_date(raw)
        if value is not None:
            return value
        out("Formato de fecha inválido. Ejemplo: 05/09/2023")
