"""
Namespace — partição do admin (``admin``, ``root``, ...).

Dono da coleção canônica de resources. Resources guardam só uma
referência fraca de volta.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any, TYPE_CHECKING

import inflection

from resource_admin.exceptions import AdminRegistrationError
from resource_admin.menu import Menu, MenuItem
from resource_admin.options import ResourceOptions
from resource_admin.resource import Resource, ResourceDSL

if TYPE_CHECKING:
    from resource_admin.application import Application
    from resource_admin.config import Settings

logger = logging.getLogger("resource_admin")

ROOT_NAMES = ("root", "")


class Namespace:
    """
    Exemplo:
        namespace = Namespace(application, "admin")
        posts = namespace.register(Post, lambda c: c.menu(priority=1))
    """

    def __init__(self, application: "Application", name: str | None) -> None:
        self.application = application
        self.name = name
        self._resources: dict[type, Resource] = {}

    @property
    def settings(self) -> "Settings":
        return self.application.settings

    @property
    def default_sort_order(self) -> str:
        return self.application.default_sort_order

    def is_root(self) -> bool:
        return self.name is None or str(self.name) in ROOT_NAMES

    @property
    def module_name(self) -> str | None:
        if self.is_root():
            return None
        return inflection.camelize(str(self.name))

    # -- Registro --

    def register(
        self,
        entity: type,
        setup: Callable[[ResourceDSL], Any] | None = None,
        **options: Any,
    ) -> Resource:
        """
        Registra uma entidade e aplica ``setup`` com um ResourceDSL.

        Mesma entidade registrada de novo: o novo registro substitui o
        anterior. Entidade diferente com o mesmo nome derivado:
        AdminRegistrationError.

        Raises:
            AdminRegistrationError: Opções inválidas ou colisão de nomes
            AdminConfigurationError: Entidade sem nome resolvível
        """
        model_name = getattr(entity, "__name__", repr(entity))
        resource_options = ResourceOptions.build(options, model_name)
        target = resource_options.namespace
        if isinstance(target, str) and target != self.name and not (
            self.is_root() and target in ROOT_NAMES
        ):
            raise AdminRegistrationError(
                f"{model_name} registered in namespace {self.name!r} "
                f"with namespace={target!r}",
                model_name=model_name,
            )
        resource = Resource(self, entity, resource_options)

        for other_entity, other in self._resources.items():
            if other_entity is entity:
                continue
            if other.underscored_resource_name == resource.underscored_resource_name:
                raise AdminRegistrationError(
                    f"{model_name} derives the name "
                    f"{resource.underscored_resource_name!r}, already used by "
                    f"{other_entity.__name__} in namespace {self.name!r}",
                    model_name=model_name,
                )

        if setup is not None:
            setup(ResourceDSL(resource))

        if entity in self._resources:
            logger.warning(
                "%s re-registered in namespace %r (overriding previous registration)",
                model_name, self.name,
            )
        self._resources[entity] = resource
        logger.debug("Registered %s as %s", model_name, resource.controller_name)
        return resource

    def unregister(self, entity: type) -> None:
        if self._resources.pop(entity, None) is not None:
            logger.debug("Unregistered %s from namespace %r", entity.__name__, self.name)

    def resource_for(self, entity: type) -> Resource | None:
        return self._resources.get(entity)

    def resource_by_name(self, name: str) -> Resource | None:
        """Busca pelo underscored name (singular ou plural)."""
        for resource in self._resources.values():
            if name in (
                resource.underscored_resource_name,
                resource.plural_underscored_resource_name,
            ):
                return resource
        return None

    @property
    def resources(self) -> dict[type, Resource]:
        return dict(self._resources)

    def __iter__(self) -> Iterator[Resource]:
        return iter(list(self._resources.values()))

    def __len__(self) -> int:
        return len(self._resources)

    # -- Menu --

    def build_menu(self) -> Menu:
        """Árvore de navegação com os resources visíveis no menu."""
        menu = Menu()
        for resource in self:
            if not resource.include_in_menu():
                continue
            parent: MenuItem = menu
            if resource.parent_menu_item_name:
                parent = menu.find_or_create(resource.parent_menu_item_name)
            parent.add(MenuItem(
                label=resource.menu_item_name,
                url=resource.route_collection_path,
                priority=resource.menu_item_priority,
                display_if=resource.menu_item_display_if,
            ))
        logger.debug("Built menu for namespace %r (%d top-level items)", self.name, len(menu.children))
        return menu

    def __repr__(self) -> str:
        return f"<Namespace {self.name!r} ({len(self)} resources)>"
