"""
Controller gerado por resource.

Uma instância por request. O scope chain é avaliado a cada chamada,
nunca memoizado, porque depende do request (usuário, sessão).
"""

from __future__ import annotations

from typing import Any, ClassVar, TYPE_CHECKING

from sqlalchemy import select

if TYPE_CHECKING:
    from starlette.requests import Request
    from resource_admin.resource import Resource


class ResourceController:
    """
    Base dos controllers gerados. ``resource_config`` é ligado na subclasse.

    Exemplo:
        controller = resource.controller(request)
        chain = controller.end_of_association_chain()
    """

    resource_config: ClassVar["Resource"]

    def __init__(self, request: "Request | None" = None) -> None:
        self.request = request

    def current_user(self) -> Any | None:
        """
        Usuário do request.

        1. request.user (AuthenticationMiddleware), se autenticado
        2. request.state.user
        """
        if self.request is None:
            return None
        user = getattr(self.request, "user", None) if "user" in self.request.scope else None
        if user is not None and getattr(user, "is_authenticated", False):
            return user
        return getattr(self.request.state, "user", None)

    def default_collection(self) -> Any:
        """Coleção sem escopo: ``select(entity)``."""
        return select(self.resource_config.entity_class)

    def begin_of_association_chain(self) -> Any:
        return self.resource_config.scope_chain.begin(self)

    def method_for_association_chain(self) -> str:
        return self.resource_config.scope_chain.method_for_association_chain(
            self.resource_config.plural_underscored_resource_name
        )

    def end_of_association_chain(self) -> Any:
        return self.resource_config.scope_chain.end(self)

    def apply_scope(self, chain: Any, scope_id: str | None = None) -> Any:
        """Aplica o scope pedido (ou o default). Id desconhecido: chain intacta."""
        scope = (
            self.resource_config.get_scope_by_id(scope_id)
            if scope_id is not None
            else self.resource_config.default_scope
        )
        if scope is None:
            return chain
        return scope.apply(chain)

    def collection(self, scope_id: str | None = None) -> Any:
        return self.apply_scope(self.end_of_association_chain(), scope_id)

    def __repr__(self) -> str:
        return f"<{self.resource_config.controller_name}>"
