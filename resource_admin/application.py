"""
Application — dona dos namespaces e dos defaults globais.

Uso:
    app = Application()
    app.register(Category)                          # namespace "admin"
    app.register(Page, namespace=False)             # namespace raiz
    app.register(Report, namespace="reports")
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from resource_admin.config import Settings, get_settings
from resource_admin.namespace import Namespace
from resource_admin.resource import Resource, ResourceDSL

logger = logging.getLogger("resource_admin")

ROOT_NAMESPACE = "root"


class Application:
    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.namespaces: dict[str, Namespace] = {}

    @property
    def default_namespace(self) -> str:
        return self.settings.default_namespace

    @property
    def default_sort_order(self) -> str:
        return self.settings.default_sort_order

    def namespace(self, name: str) -> Namespace | None:
        return self.namespaces.get(name)

    def find_or_create_namespace(self, name: str | None) -> Namespace:
        key = ROOT_NAMESPACE if name in (None, "", ROOT_NAMESPACE) else str(name)
        if key not in self.namespaces:
            self.namespaces[key] = Namespace(self, key)
            logger.debug("Created namespace %r", key)
        return self.namespaces[key]

    def register(
        self,
        entity: type,
        setup: Callable[[ResourceDSL], Any] | None = None,
        **options: Any,
    ) -> Resource:
        """
        Registra no namespace indicado por ``namespace=``.

        ``namespace=False`` registra no namespace raiz; omitido, usa
        ``default_namespace``.
        """
        target = options.get("namespace")
        if target is False:
            namespace = self.find_or_create_namespace(ROOT_NAMESPACE)
        elif target is None or target is True:
            namespace = self.find_or_create_namespace(self.default_namespace)
        else:
            namespace = self.find_or_create_namespace(str(target))
        return namespace.register(entity, setup, **options)

    def __repr__(self) -> str:
        return f"<Application namespaces={sorted(self.namespaces)}>"
