"""
Resource — configuração de uma entidade no admin.

Agrega naming, rotas, menu, scope chain, scopes, CSV e page configs.
É o único objeto com que o Namespace e o controller gerado conversam.

Exemplo:
    def setup(config: ResourceDSL) -> None:
        config.menu(parent="Blog", priority=2)
        config.scope_to("current_user")
        config.scope("published")

    categories = namespace.register(Category, setup, as_="Blog Categories")
"""

from __future__ import annotations

import logging
import weakref
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from resource_admin.controller import ResourceController
from resource_admin.exceptions import AdminConfigurationError
from resource_admin.exports import CSVBuilder
from resource_admin.menu import DisplayPredicate, MenuConfig
from resource_admin.naming import ResourceNaming
from resource_admin.options import ResourceOptions
from resource_admin.routes import RouteConfig
from resource_admin.scopes import Scope, ScopeRegistry
from resource_admin.scoping import ScopeChain, build_scope_chain

if TYPE_CHECKING:
    from resource_admin.namespace import Namespace

logger = logging.getLogger("resource_admin")


@dataclass(frozen=True)
class BelongsTo:
    """
    Relação com um resource pai no mesmo namespace.

    ``target`` é resolvido sob demanda pelo nome, sem guardar referência.
    """

    owner: "Resource"
    target_name: str
    optional: bool = False

    @property
    def target(self) -> "Resource":
        resource = self.owner.namespace.resource_by_name(self.target_name)
        if resource is None:
            raise AdminConfigurationError(
                f"{self.owner.resource_name} belongs_to {self.target_name!r}, "
                f"which is not registered in namespace {self.owner.namespace.name!r}"
            )
        return resource


@dataclass(frozen=True)
class ControllerAction:
    name: str
    method: str = "GET"
    member: bool = True


class Resource:
    """
    Configuração de uma entidade registrada.

    Args:
        namespace: Namespace dono (referência fraca)
        entity_class: Model SQLAlchemy
        options: Overrides de registro (``as_``, ``sort_order``, ``namespace``)
    """

    def __init__(
        self,
        namespace: "Namespace",
        entity_class: type,
        options: dict[str, Any] | ResourceOptions | None = None,
    ) -> None:
        self._namespace_ref = weakref.ref(namespace)
        self.entity_class = entity_class
        self.options = ResourceOptions.build(options, getattr(entity_class, "__name__", repr(entity_class)))

        self.naming = ResourceNaming(
            entity_class,
            self.options.as_,
            database_url=namespace.settings.database_url,
        )
        self.routes = RouteConfig(
            lambda: self.namespace,
            self.naming,
            namespaced=self.options.namespace is not False,
        )
        self.menu_config = MenuConfig(lambda: self.plural_resource_name)
        self.scope_chain: ScopeChain = build_scope_chain()
        self._scopes = ScopeRegistry()
        self.page_configs: dict[str, Any] = {}
        self.belongs_to_config: BelongsTo | None = None
        self._actions: dict[tuple[bool, str], ControllerAction] = {}
        self._csv_builder: CSVBuilder | None = None
        self._controller: type[ResourceController] | None = None

    @property
    def namespace(self) -> "Namespace":
        namespace = self._namespace_ref()
        if namespace is None:
            raise AdminConfigurationError(
                f"Namespace of {self.resource_name} no longer exists"
            )
        return namespace

    # -- Naming --

    @property
    def underscored_resource_name(self) -> str:
        return self.naming.underscored_resource_name

    @property
    def camelized_resource_name(self) -> str:
        return self.naming.camelized_resource_name

    @property
    def plural_underscored_resource_name(self) -> str:
        return self.naming.plural_underscored_resource_name

    @property
    def resource_name(self) -> str:
        return self.naming.resource_name

    @property
    def plural_resource_name(self) -> str:
        return self.naming.plural_resource_name

    @property
    def resource_table_name(self) -> str:
        return self.naming.resource_table_name

    # -- Rotas --

    @property
    def controller_name(self) -> str:
        return self.routes.controller_name

    @property
    def route_prefix(self) -> str | None:
        return self.routes.route_prefix

    @property
    def route_collection_path(self) -> str:
        return self.routes.route_collection_path

    @property
    def route_instance_path(self) -> str:
        return self.routes.route_instance_path

    def route_action_path(self, action: str | ControllerAction) -> str:
        if isinstance(action, ControllerAction):
            return self.routes.route_action_path(action.name, member=action.member)
        return self.routes.route_action_path(action)

    # -- Menu --

    def menu(self, enabled: bool | None = None, /, **options: Any) -> None:
        """``menu(False)`` suprime; ``menu(label=..., parent=..., priority=..., if_=...)``."""
        self.menu_config.menu(enabled, **options)

    @property
    def menu_item_name(self) -> str:
        return self.menu_config.menu_item_name

    @property
    def parent_menu_item_name(self) -> str | None:
        return self.menu_config.parent_menu_item_name

    @property
    def menu_item_priority(self) -> int:
        return self.menu_config.menu_item_priority

    @property
    def menu_item_display_if(self) -> DisplayPredicate:
        return self.menu_config.menu_item_display_if

    def include_in_menu(self) -> bool:
        if self.belongs_to_config is not None and not self.belongs_to_config.optional:
            return False
        return self.menu_config.options.display

    # -- Relações --

    def belongs_to(self, target: str, optional: bool = False) -> BelongsTo:
        self.belongs_to_config = BelongsTo(self, str(target), optional)
        return self.belongs_to_config

    def is_belongs_to(self) -> bool:
        return self.belongs_to_config is not None

    # -- Scope chain --

    def scope_to(self, value: Any = None, association_method: str | None = None) -> None:
        """
        Restringe a association chain.

        ``value`` pode ser um callable (retorno = raiz da chain) ou o nome
        de um método do controller. Outros valores são aceitos aqui e
        falham com ScopeToError no primeiro request.
        """
        self.scope_chain = build_scope_chain(value, association_method)
        logger.debug(
            "scope_to for %s resolved to %s", self.resource_name, type(self.scope_chain).__name__,
        )

    # -- Scopes --

    def scope(
        self,
        identifier: str,
        name: str | None = None,
        filter: Callable[[Any], Any] | None = None,
        default: bool = False,
    ) -> Scope:
        return self._scopes.add(identifier, name=name, filter=filter, default=default)

    @property
    def scopes(self) -> list[Scope]:
        return list(self._scopes)

    def get_scope_by_id(self, identifier: str) -> Scope | None:
        return self._scopes.get(identifier)

    @property
    def default_scope(self) -> Scope | None:
        return self._scopes.default

    # -- Actions --

    def member_action(self, name: str, method: str = "GET") -> ControllerAction:
        return self._add_action(ControllerAction(name, method.upper(), member=True))

    def collection_action(self, name: str, method: str = "GET") -> ControllerAction:
        return self._add_action(ControllerAction(name, method.upper(), member=False))

    def _add_action(self, action: ControllerAction) -> ControllerAction:
        self._actions[(action.member, action.name)] = action
        return action

    @property
    def member_actions(self) -> list[ControllerAction]:
        return [a for a in self._actions.values() if a.member]

    @property
    def collection_actions(self) -> list[ControllerAction]:
        return [a for a in self._actions.values() if not a.member]

    # -- Sort order / CSV --

    @property
    def sort_order(self) -> str:
        return self.options.sort_order or self.namespace.default_sort_order

    @property
    def csv_builder(self) -> CSVBuilder:
        if self._csv_builder is None:
            self._csv_builder = CSVBuilder.default_for_resource(self.entity_class)
        return self._csv_builder

    @csv_builder.setter
    def csv_builder(self, builder: CSVBuilder) -> None:
        self._csv_builder = builder

    # -- Controller --

    @property
    def controller(self) -> type[ResourceController]:
        """Subclasse de ResourceController ligada a este resource."""
        if self._controller is None:
            class_name = self.controller_name.rsplit("::", 1)[-1]
            self._controller = type(
                class_name,
                (ResourceController,),
                {
                    "resource_config": self,
                    "__qualname__": self.controller_name.replace("::", "."),
                    "__module__": __name__,
                },
            )
        return self._controller

    def __repr__(self) -> str:
        return f"<Resource {self.controller_name}>"


class ResourceDSL:
    """
    Builder passado para a função de setup do registro.

    Cada verbo é uma chamada explícita sobre o resource em configuração.
    """

    def __init__(self, resource: Resource) -> None:
        self.resource = resource

    def menu(self, enabled: bool | None = None, /, **options: Any) -> None:
        self.resource.menu(enabled, **options)

    def scope_to(self, value: Any = None, association_method: str | None = None) -> None:
        self.resource.scope_to(value, association_method=association_method)

    def scope(
        self,
        identifier: str,
        name: str | None = None,
        filter: Callable[[Any], Any] | None = None,
        default: bool = False,
    ) -> Scope:
        return self.resource.scope(identifier, name=name, filter=filter, default=default)

    def belongs_to(self, target: str, optional: bool = False) -> BelongsTo:
        return self.resource.belongs_to(target, optional=optional)

    def member_action(self, name: str, method: str = "GET") -> ControllerAction:
        return self.resource.member_action(name, method)

    def collection_action(self, name: str, method: str = "GET") -> ControllerAction:
        return self.resource.collection_action(name, method)

    def csv(self, build: Callable[[CSVBuilder], None]) -> CSVBuilder:
        """Substitui o builder padrão pelo que ``build`` montar."""
        builder = CSVBuilder()
        build(builder)
        self.resource.csv_builder = builder
        return builder

    def page_config(self, page: str, value: Any) -> None:
        self.resource.page_configs[page] = value
