"""
Exceções do resource admin.

Três níveis de erro, nenhum silencioso:

1. AdminConfigurationError -- Erro de setup, impede o boot.
2. AdminRegistrationError -- Registro inválido (opções, colisão de nomes).
3. ScopeToError -- ``scope_to`` inválido, adiado até o primeiro request.
"""

from __future__ import annotations


class AdminConfigurationError(Exception):
    """
    Erro fatal de configuração do admin.

    Impede o boot. Nunca é recuperado.

    Exemplos:
        - Entidade sem nome resolvível
        - Entidade sem tabela
        - belongs_to apontando para resource não registrado
    """
    pass


class AdminRegistrationError(AdminConfigurationError):
    """
    Erro de registro de um resource.

    Exemplos:
        - Opção desconhecida em register()
        - Duas entidades derivando o mesmo nome no mesmo namespace
    """

    def __init__(
        self,
        message: str,
        model_name: str | None = None,
        available_fields: list[str] | None = None,
    ) -> None:
        self.model_name = model_name
        self.available_fields = available_fields

        detail_parts = [message]
        if available_fields:
            detail_parts.append(f"Available options: {', '.join(available_fields)}")

        super().__init__("\n".join(detail_parts))


class ScopeToError(TypeError):
    """
    Valor de ``scope_to`` que não é callable nem nome de método.

    Aceito no registro; levantado quando o controller calcula a
    association chain.
    """

    def __init__(self, value: object, resource_name: str | None = None) -> None:
        self.value = value
        self.resource_name = resource_name
        target = f" for {resource_name}" if resource_name else ""
        super().__init__(
            f"scope_to{target} expects a callable or a method name, "
            f"got {type(value).__name__}: {value!r}"
        )
