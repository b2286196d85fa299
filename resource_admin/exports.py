"""
CSV export — colunas exportadas por um resource.

O builder só descreve colunas e extrai valores; a escrita do arquivo
fica com quem consome (view, task, etc).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import inflection


def content_columns(entity: type) -> list[Any]:
    """
    Colunas de conteúdo: exclui PK e foreign keys.

    Entidade sem ``__table__`` não tem colunas introspectáveis.
    """
    table = getattr(entity, "__table__", None)
    if table is None:
        return []
    return [
        col for col in table.columns
        if not col.primary_key and not getattr(col, "foreign_keys", None)
    ]


def primary_key_name(entity: type) -> str:
    try:
        pk_cols = [col.name for col in entity.__table__.primary_key.columns]
    except AttributeError:
        return "id"
    return pk_cols[0] if pk_cols else "id"


@dataclass(frozen=True)
class CSVColumn:
    name: str
    data: str | Callable[[Any], Any]

    @property
    def header(self) -> str:
        return inflection.humanize(self.name)

    def value(self, record: Any) -> Any:
        if callable(self.data):
            return self.data(record)
        return getattr(record, self.data)


class CSVBuilder:
    """
    Lista ordenada de colunas exportadas.

    Exemplo:
        builder = CSVBuilder()
        builder.column("id")
        builder.column("title", lambda post: post.title.upper())
    """

    def __init__(self) -> None:
        self.columns: list[CSVColumn] = []

    def column(self, name: str, data: str | Callable[[Any], Any] | None = None) -> CSVColumn:
        col = CSVColumn(name=name, data=data if data is not None else name)
        self.columns.append(col)
        return col

    def header(self) -> list[str]:
        return [col.header for col in self.columns]

    def row(self, record: Any) -> list[Any]:
        return [col.value(record) for col in self.columns]

    @classmethod
    def default_for_resource(cls, entity: type) -> "CSVBuilder":
        """PK + colunas de conteúdo da entidade, nessa ordem."""
        builder = cls()
        builder.column(primary_key_name(entity))
        for col in content_columns(entity):
            builder.column(col.name)
        return builder

    def __repr__(self) -> str:
        return f"<CSVBuilder columns={[c.name for c in self.columns]}>"
