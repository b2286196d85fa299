"""
Resource Admin — metadados de resources para um admin gerado.

A partir de uma entidade registrada (model SQLAlchemy) deriva nomes,
rotas, menu, scope chain, scopes, ordenação e colunas de CSV.

Uso:
    from resource_admin import Application

    app = Application()

    def setup(config):
        config.menu(parent="Blog")
        config.scope_to("current_user")
        config.scope("published")

    categories = app.register(Category, setup)
    categories.controller_name          # "Admin::CategoriesController"
    categories.route_collection_path    # "admin_categories_path"

API pública:
    - Application, Namespace, Resource, ResourceDSL
    - ResourceController, controller_dependency
    - CSVBuilder, Scope, Menu, MenuItem
    - Settings, configure, get_settings
"""

from resource_admin.application import Application
from resource_admin.config import Settings, configure, configure_logging, get_settings, reset_settings
from resource_admin.controller import ResourceController
from resource_admin.dependencies import controller_dependency
from resource_admin.exceptions import (
    AdminConfigurationError,
    AdminRegistrationError,
    ScopeToError,
)
from resource_admin.exports import CSVBuilder, CSVColumn
from resource_admin.menu import Menu, MenuItem, always_display
from resource_admin.namespace import Namespace
from resource_admin.options import ResourceOptions
from resource_admin.resource import BelongsTo, ControllerAction, Resource, ResourceDSL
from resource_admin.scopes import Scope

__version__ = "0.1.0"

__all__ = [
    "Application",
    "Namespace",
    "Resource",
    "ResourceDSL",
    "ResourceOptions",
    "BelongsTo",
    "ControllerAction",
    "ResourceController",
    "controller_dependency",
    "CSVBuilder",
    "CSVColumn",
    "Scope",
    "Menu",
    "MenuItem",
    "always_display",
    # Config
    "Settings",
    "configure",
    "configure_logging",
    "get_settings",
    "reset_settings",
    # Exceptions
    "AdminConfigurationError",
    "AdminRegistrationError",
    "ScopeToError",
]
