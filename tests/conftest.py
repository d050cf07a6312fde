from __future__ import annotations

import pytest

from pricing.data.schemas import CanonicalRow
from pricing.data.store import DataStore


def raw_record(**overrides) -> dict:
    """A raw survey record keyed by the export's Spanish labels (trailing spaces included)."""
    record = {
        "ID ": 1,
        "País": "PORTUGAL",
        "Competidor": "ADT",
        "Segmento": "Hogares",
        "Tamaño del Kit": None,
        "PRECIO RECURRENTE - BASE ": 0,
        "PRECIO RECURRENTE - PROMOCIONAL": 0,
        "MONTO DE LA PROMO": None,
        "PORCENTAJE DE PROMOCION RECURRENTE": None,
        "PRECIO RECURRENTE - EFECTIVO": 0,
        "PRECIO ALTA - BASE": 0,
        "PRECIO ALTA - PROMOCIONAL": 0,
        "PORCENTAJE DE PROMOCION DE ALTA": None,
        "PRECIO DE ALTA - EFECTIVO": 0,
        "PRESENCIA DE PROMOCIONES ": "No",
        "Duración promos": "",
    }
    record.update(overrides)
    return record


def make_row(**overrides) -> CanonicalRow:
    """A canonical row with zero prices; EUR and local twins start equal."""
    fields = {
        "id": 1,
        "country": "PORTUGAL",
        "competitor": "ADT",
        "segment": "Hogares",
        "kit_size": None,
        "promo_presence": "No",
    }
    for col in ("recurring_base", "recurring_promo", "recurring_effective",
                "alta_base", "alta_promo", "alta_effective"):
        fields[col] = 0.0
        fields[f"{col}_local"] = 0.0
    fields.update(overrides)
    return CanonicalRow(**fields)


@pytest.fixture
def raw_records() -> list[dict]:
    # Argentine prices are multiples of the 1676 ARS/EUR rate, Chilean of 1081 CLP/EUR
    return [
        raw_record(**{
            "ID ": 1, "País": "ARGENTINA", "Competidor": "ADT", "Segmento": "Hogares",
            "Tamaño del Kit": "Kit Estándar",
            "PRECIO RECURRENTE - BASE ": 33520, "PRECIO RECURRENTE - PROMOCIONAL": 25140,
            "MONTO DE LA PROMO": 8380, "PORCENTAJE DE PROMOCION RECURRENTE": -0.25,
            "PRESENCIA DE PROMOCIONES ": "Sí", "Duración promos": "3 meses",
        }),
        raw_record(**{
            "ID ": 2, "País": "AR", "Competidor": "Verisure", "Segmento": "HOGAR",
            "Tamaño del Kit": "Kit Avanzado",
            "PRECIO RECURRENTE - BASE ": 50280, "PRECIO RECURRENTE - PROMOCIONAL": 50280,
            "PRECIO ALTA - BASE": 167600, "PRECIO ALTA - PROMOCIONAL": 83800,
            "PORCENTAJE DE PROMOCION DE ALTA": -0.5,
        }),
        raw_record(**{
            "ID ": 3, "País": "argentina ", "Competidor": "ADT", "Segmento": "Negocios",
            "PRECIO RECURRENTE - BASE ": 67040, "PRECIO RECURRENTE - PROMOCIONAL": 50280,
            "MONTO DE LA PROMO": 16760, "PORCENTAJE DE PROMOCION RECURRENTE": -0.25,
            "PRESENCIA DE PROMOCIONES ": "si",
        }),
        raw_record(**{
            "ID ": 4, "País": "PT", "Competidor": "Securitas", "Segmento": "negocios",
            "Tamaño del Kit": "Premium",
            "PRECIO RECURRENTE - BASE ": 50, "PRECIO RECURRENTE - PROMOCIONAL": 40,
            "MONTO DE LA PROMO": 10, "PORCENTAJE DE PROMOCION RECURRENTE": -0.2,
            "PRECIO ALTA - BASE": 200, "PRECIO ALTA - PROMOCIONAL": 100,
            "PORCENTAJE DE PROMOCION DE ALTA": -0.5,
            "PRESENCIA DE PROMOCIONES ": "yes",
        }),
        raw_record(**{
            "ID ": 5, "País": "CHILE", "Competidor": "Prosegur", "Segmento": "Hogares",
            "Tamaño del Kit": "Kit Estándar",
            "PRECIO RECURRENTE - BASE ": 21620, "PRECIO RECURRENTE - PROMOCIONAL": 21620,
        }),
    ]


@pytest.fixture
def store(raw_records) -> DataStore:
    return DataStore().load_records(raw_records)


@pytest.fixture
def rows(store) -> tuple[CanonicalRow, ...]:
    return store.rows
