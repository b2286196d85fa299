"""
Configurações de teste compartilhadas.
"""

import pytest

from resource_admin.application import Application
from resource_admin.config import Settings
from resource_admin.resource import Resource
from tests.models import Category


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def application(settings):
    return Application(settings)


@pytest.fixture
def namespace(application):
    return application.find_or_create_namespace("admin")


@pytest.fixture
def root_namespace(application):
    return application.find_or_create_namespace("root")


@pytest.fixture
def config(namespace):
    """Resource de Category no namespace admin, sem opções."""
    return Resource(namespace, Category)
