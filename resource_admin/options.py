"""
Opções de registro de um resource.

Validadas com Pydantic no momento do registro. Imutáveis depois disso.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from resource_admin.exceptions import AdminRegistrationError


class ResourceOptions(BaseModel):
    """
    Overrides passados em ``register()``.

    Attributes:
        as_: Nome de exibição (``"as"`` quando vem de um dict)
        sort_order: Ordenação padrão (ex: ``"name_desc"``)
        namespace: ``False`` registra no namespace raiz
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    as_: str | None = Field(default=None, alias="as")
    sort_order: str | None = None
    namespace: str | bool | None = None

    @field_validator("as_")
    @classmethod
    def _check_label(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if not re.search(r"[^\W_]", value):
            raise ValueError("as must contain at least one letter or digit")
        return value

    @classmethod
    def build(cls, options: dict[str, Any] | None, model_name: str) -> "ResourceOptions":
        """Valida ``options`` e converte erros em AdminRegistrationError."""
        if isinstance(options, ResourceOptions):
            return options
        try:
            return cls.model_validate(options or {})
        except ValidationError as e:
            raise AdminRegistrationError(
                f"Invalid options for {model_name}: {e}",
                model_name=model_name,
                available_fields=["as_", "sort_order", "namespace"],
            ) from e
