"""Normalização de parâmetros de ordenação."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

SortInput = Mapping[str, int] | Iterable[Mapping[str, Any] | tuple[str, int]] | None


def get_sort_fields(sort: SortInput) -> list[dict[str, Any]]:
    """Converte ordenação em lista de pares {field, direction}.

    A ordem dos pares segue a ordem de iteração da entrada.

    Args:
        sort: Mapeamento campo -> direção (ex: {"age": -1}), lista de
            pares (campo, direção), lista de mapeamentos de uma chave,
            lista já normalizada ou None

    Returns:
        Lista ordenada de {"field": ..., "direction": ...}. Vazia se
        sort for None ou vazio.

    Exemplo:
        >>> get_sort_fields({"a": 1, "b": -1})
        [{'field': 'a', 'direction': 1}, {'field': 'b', 'direction': -1}]
    """
    if not sort:
        return []

    if isinstance(sort, Mapping):
        return [{"field": field, "direction": direction} for field, direction in sort.items()]

    sort_fields: list[dict[str, Any]] = []
    for item in sort:
        if isinstance(item, tuple):
            field, direction = item
            sort_fields.append({"field": field, "direction": direction})
            continue
        if "field" in item:
            sort_fields.append({"field": item["field"], "direction": item.get("direction")})
            continue
        sort_fields.extend(
            {"field": field, "direction": direction} for field, direction in item.items()
        )
    return sort_fields
