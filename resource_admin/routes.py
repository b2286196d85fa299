"""
Nomes de rota de um resource.

Só calcula nomes; quem registra rotas é o router da aplicação.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from resource_admin.namespace import Namespace
    from resource_admin.naming import ResourceNaming


class RouteConfig:
    """
    Nomes de controller e helpers de rota.

    Exemplo (namespace ``admin``, entidade ``Category``):
        controller_name         "Admin::CategoriesController"
        route_prefix            "admin"
        route_collection_path   "admin_categories_path"
        route_instance_path     "admin_category_path"
    """

    def __init__(
        self,
        namespace: Callable[[], "Namespace"],
        naming: "ResourceNaming",
        namespaced: bool = True,
    ) -> None:
        self._get_namespace = namespace
        self._naming = naming
        # False quando registrado com namespace=False
        self._namespaced = namespaced

    @property
    def controller_name(self) -> str:
        name = f"{self._naming.plural_camelized_resource_name}Controller"
        module = self._get_namespace().module_name if self._namespaced else None
        return f"{module}::{name}" if module else name

    @property
    def route_prefix(self) -> str | None:
        namespace = self._get_namespace()
        if not self._namespaced or namespace.is_root():
            return None
        return str(namespace.name)

    def _path(self, *segments: str) -> str:
        parts = [s for s in segments if s]
        parts.append("path")
        return "_".join(parts)

    @property
    def route_collection_path(self) -> str:
        return self._path(self.route_prefix, self._naming.plural_underscored_resource_name)

    @property
    def route_instance_path(self) -> str:
        return self._path(self.route_prefix, self._naming.underscored_resource_name)

    def route_action_path(self, action: str, member: bool = True) -> str:
        """``publish_admin_category_path`` (member) / ``publish_admin_categories_path``."""
        name = (
            self._naming.underscored_resource_name
            if member
            else self._naming.plural_underscored_resource_name
        )
        return self._path(action, self.route_prefix, name)
