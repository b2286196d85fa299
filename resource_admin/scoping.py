"""
Scope chain — como o controller restringe a query base.

``scope_to`` aceita um callable ou um nome de método do controller.
O valor é convertido em uma estratégia no registro; a estratégia roda a
cada request, com o controller daquele request.

Variantes:
    NoScopeChain       sem restrição (coleção padrão da entidade)
    CallableScopeChain o retorno do callable é a raiz da chain
    MethodScopeChain   controller.<método>() -> owner; owner.<association>
    InvalidScopeChain  qualquer outro valor; falha só no request
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, TYPE_CHECKING

from resource_admin.exceptions import ScopeToError

if TYPE_CHECKING:
    from resource_admin.controller import ResourceController


class ScopeChain:
    """Estratégia base: nenhum escopo."""

    def __init__(self, association_method: str | None = None) -> None:
        self.association_method = association_method

    def begin(self, controller: "ResourceController") -> Any:
        return None

    def end(self, controller: "ResourceController") -> Any:
        return controller.default_collection()

    def method_for_association_chain(self, default: str) -> str:
        return self.association_method or default


class NoScopeChain(ScopeChain):
    pass


class CallableScopeChain(ScopeChain):
    """
    O callable recebe o controller quando aceita um argumento posicional.
    Sem argumentos, é chamado direto.
    """

    def __init__(self, func: Callable[..., Any], association_method: str | None = None) -> None:
        self.func = func
        super().__init__(association_method)
        self._takes_controller = _accepts_positional(func)

    def begin(self, controller: "ResourceController") -> Any:
        if self._takes_controller:
            return self.func(controller)
        return self.func()

    def end(self, controller: "ResourceController") -> Any:
        return self.begin(controller)


class MethodScopeChain(ScopeChain):
    """
    Chama ``method_name`` no controller para obter o owner e depois o
    accessor de associação no owner.
    """

    def __init__(self, method_name: str, association_method: str | None = None) -> None:
        self.method_name = method_name
        super().__init__(association_method)

        # Nome fixado no registro; o método é buscado no controller de cada request
        def _owner(controller: "ResourceController") -> Any:
            return getattr(controller, method_name)()

        self._owner = _owner

    def begin(self, controller: "ResourceController") -> Any:
        return self._owner(controller)

    def end(self, controller: "ResourceController") -> Any:
        owner = self.begin(controller)
        accessor = getattr(owner, controller.method_for_association_chain())
        return accessor() if callable(accessor) else accessor


class InvalidScopeChain(ScopeChain):
    def __init__(self, value: Any, association_method: str | None = None) -> None:
        self.value = value
        super().__init__(association_method)

    def begin(self, controller: "ResourceController") -> Any:
        raise ScopeToError(self.value, controller.resource_config.resource_name)

    def end(self, controller: "ResourceController") -> Any:
        return self.begin(controller)


def build_scope_chain(value: Any = None, association_method: str | None = None) -> ScopeChain:
    """Converte o valor de ``scope_to`` em estratégia. Nunca levanta."""
    if value is None:
        return NoScopeChain(association_method)
    if isinstance(value, str) and value.isidentifier():
        return MethodScopeChain(value, association_method)
    if callable(value):
        return CallableScopeChain(value, association_method)
    return InvalidScopeChain(value, association_method)


def _accepts_positional(func: Callable[..., Any]) -> bool:
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        return False
    return any(
        p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD, p.VAR_POSITIONAL)
        for p in params
    )
