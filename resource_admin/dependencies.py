"""
Integração com FastAPI Depends.

Uso:
    @router.get("/categories")
    async def list_categories(
        controller: ResourceController = Depends(controller_dependency(categories)),
    ):
        stmt = controller.collection(scope_id="published")
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from fastapi import Request

from resource_admin.controller import ResourceController

if TYPE_CHECKING:
    from resource_admin.resource import Resource


def controller_dependency(resource: "Resource") -> Callable[[Request], ResourceController]:
    """Dependency que instancia o controller do resource para o request atual."""

    def _controller(request: Request) -> ResourceController:
        return resource.controller(request)

    _controller.__name__ = f"{resource.underscored_resource_name}_controller"
    return _controller
