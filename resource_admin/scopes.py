"""
Scopes — filtros nomeados e selecionáveis de um resource.

A ordem de inserção é a ordem de exibição e de avaliação.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

import inflection


@dataclass(frozen=True)
class Scope:
    """
    Filtro nomeado.

    ``filter`` recebe a chain e retorna a chain filtrada. Sem ``filter``,
    o id é usado como nome de método/atributo da chain.
    """

    id: str
    name: str
    filter: Callable[[Any], Any] | None = None
    default: bool = False

    def apply(self, chain: Any) -> Any:
        if self.filter is not None:
            return self.filter(chain)
        target = getattr(chain, self.id)
        return target() if callable(target) else target


class ScopeRegistry:
    """Coleção ordenada de Scope, ids únicos."""

    def __init__(self) -> None:
        self._scopes: list[Scope] = []

    def add(
        self,
        identifier: str,
        name: str | None = None,
        filter: Callable[[Any], Any] | None = None,
        default: bool = False,
    ) -> Scope:
        identifier = str(identifier)
        scope = Scope(
            id=identifier,
            name=name or inflection.titleize(identifier),
            filter=filter,
            default=default,
        )
        for index, existing in enumerate(self._scopes):
            if existing.id == identifier:
                # Redeclarar o mesmo id substitui no lugar
                self._scopes[index] = scope
                return scope
        self._scopes.append(scope)
        return scope

    def get(self, identifier: str) -> Scope | None:
        identifier = str(identifier)
        for scope in self._scopes:
            if scope.id == identifier:
                return scope
        return None

    @property
    def default(self) -> Scope | None:
        return next((s for s in self._scopes if s.default), None)

    def __iter__(self) -> Iterator[Scope]:
        return iter(self._scopes)

    def __len__(self) -> int:
        return len(self._scopes)
