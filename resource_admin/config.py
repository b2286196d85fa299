"""
Configurações do resource admin.

Carregadas de variáveis de ambiente (prefixo ``RESOURCE_ADMIN_``) e do
``.env``, com defaults na classe Settings.

Uso:
    from resource_admin.config import configure

    configure(default_sort_order="created_at_desc")

Ou via .env:
    RESOURCE_ADMIN_DEFAULT_NAMESPACE=backoffice
    RESOURCE_ADMIN_DATABASE_URL=postgresql+psycopg2://localhost/app
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Literal

from pydantic import Field as PydanticField
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("resource_admin.config")


class Settings(BaseSettings):
    """Defaults globais herdados por todos os namespaces e resources."""

    model_config = SettingsConfigDict(
        env_prefix="RESOURCE_ADMIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    default_namespace: str = PydanticField(
        default="admin",
        description="Namespace usado quando register() não informa um",
    )
    default_sort_order: str = PydanticField(
        default="id_desc",
        description="Ordenação herdada por resources sem sort_order",
    )
    database_url: str | None = PydanticField(
        default=None,
        description=(
            "URL do banco. Define o dialeto SQLAlchemy usado para quotar "
            "nomes de tabela. None usa o dialeto padrão."
        ),
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = PydanticField(
        default="INFO",
        description="Nível de log do logger resource_admin",
    )


_settings: Settings | None = None
_on_settings_loaded: list[Callable[[Settings], Any]] = []


def get_settings() -> Settings:
    """Retorna o singleton de Settings, criando na primeira chamada."""
    global _settings
    if _settings is None:
        _settings = Settings()
        for callback in _on_settings_loaded:
            callback(_settings)
    return _settings


def configure(**overrides: Any) -> Settings:
    """
    Configura antes de criar a Application.

    Raises:
        ValueError: Se alguma chave não existir em Settings
    """
    global _settings
    unknown = set(overrides) - set(Settings.model_fields)
    if unknown:
        raise ValueError(f"Unknown settings keys: {', '.join(sorted(unknown))}")

    _settings = Settings(**overrides)
    for callback in _on_settings_loaded:
        callback(_settings)
    return _settings


def reset_settings() -> None:
    """Reseta configurações. Útil para testes."""
    global _settings
    _settings = None


def on_settings_loaded(callback: Callable[[Settings], Any]) -> Callable[[Settings], Any]:
    """Registra callback executado após Settings ser carregado."""
    _on_settings_loaded.append(callback)
    return callback


def configure_logging(settings: Settings | None = None) -> None:
    """Aplica ``log_level`` ao logger do pacote. Não instala handlers."""
    settings = settings or get_settings()
    logging.getLogger("resource_admin").setLevel(settings.log_level)
    logger.debug("resource_admin log level set to %s", settings.log_level)
