"""
Naming — derivação de nomes de um resource.

Todos os nomes (underscored, camelized, display, plural, tabela) saem
daqui, a partir da classe da entidade ou de um override ``as_``.
Funções puras: mesmas entradas, mesmas saídas.

Exemplo:
    naming = ResourceNaming(Category)
    naming.underscored_resource_name   # "category"
    naming.plural_resource_name        # "Categories"

    ResourceNaming(Category, "Blog Categories").camelized_resource_name
    # "BlogCategory"
"""

from __future__ import annotations

import re
from functools import cached_property

import inflection
from sqlalchemy.engine import default, make_url

from resource_admin.exceptions import AdminConfigurationError


def entity_path(entity: type) -> list[str]:
    """
    Retorna o caminho de nomes da entidade (classes envolventes + classe).

    ``Mock.Resource`` -> ["Mock", "Resource"]. Segmentos ``<locals>``
    (classes definidas dentro de funções) descartam tudo antes deles.
    """
    qualname = getattr(entity, "__qualname__", None) or getattr(entity, "__name__", None)
    if not isinstance(qualname, str) or not qualname:
        raise AdminConfigurationError(
            f"Cannot resolve a name for {entity!r}: it has no __qualname__/__name__"
        )
    parts = qualname.split(".")
    if "<locals>" in parts:
        parts = parts[len(parts) - parts[::-1].index("<locals>"):]
    parts = [p for p in parts if p]
    if not parts or not all(p.isidentifier() for p in parts):
        raise AdminConfigurationError(f"Invalid entity name {qualname!r} for {entity!r}")
    return parts


def underscore_words(text: str) -> str:
    """'Blog Categories' -> 'blog_categories'; 'BlogPost' -> 'blog_post'."""
    return inflection.underscore(re.sub(r"\s+", "_", text.strip()))


def singularize_last(underscored: str) -> str:
    """Singulariza apenas o último token de um nome underscored."""
    head, sep, tail = underscored.rpartition("_")
    return f"{head}{sep}{inflection.singularize(tail)}"


def pluralize_last(underscored: str) -> str:
    head, sep, tail = underscored.rpartition("_")
    return f"{head}{sep}{inflection.pluralize(tail)}"


def quote_identifier(name: str, database_url: str | None = None) -> str:
    """Quota um identificador segundo o dialeto SQLAlchemy configurado."""
    if database_url:
        dialect = make_url(database_url).get_dialect()()
    else:
        dialect = default.DefaultDialect()
    return dialect.identifier_preparer.quote_identifier(name)


def table_name_for(entity: type) -> str:
    """Nome da tabela da entidade: ``__table__.name`` ou ``__tablename__``."""
    table = getattr(entity, "__table__", None)
    name = getattr(table, "name", None) or getattr(entity, "__tablename__", None)
    if not name:
        raise AdminConfigurationError(
            f"{getattr(entity, '__name__', entity)!r} has no __table__ or __tablename__"
        )
    return name


class ResourceNaming:
    """
    Nomes derivados de uma entidade.

    ``label`` é o override de exibição (opção ``as_``). O nome da tabela
    sempre segue a entidade real, nunca o override.
    """

    def __init__(
        self,
        entity: type,
        label: str | None = None,
        database_url: str | None = None,
    ) -> None:
        self.entity = entity
        self.label = label
        self.database_url = database_url
        # Nome inválido é erro de programação: falha já no registro
        self._path = entity_path(entity)

    @cached_property
    def underscored_resource_name(self) -> str:
        if self.label:
            return singularize_last(underscore_words(self.label))
        *modules, name = self._path
        tokens = [inflection.underscore(m) for m in modules]
        tokens.append(singularize_last(inflection.underscore(name)))
        return "_".join(tokens)

    @cached_property
    def camelized_resource_name(self) -> str:
        return inflection.camelize(self.underscored_resource_name)

    @cached_property
    def plural_underscored_resource_name(self) -> str:
        return pluralize_last(self.underscored_resource_name)

    @cached_property
    def plural_camelized_resource_name(self) -> str:
        return inflection.camelize(self.plural_underscored_resource_name)

    @cached_property
    def resource_name(self) -> str:
        if self.label:
            return self.label
        return inflection.titleize(self._path[-1])

    @cached_property
    def plural_resource_name(self) -> str:
        words = self.resource_name.rsplit(" ", 1)
        words[-1] = inflection.pluralize(words[-1])
        return " ".join(words)

    @property
    def resource_table_name(self) -> str:
        table = getattr(self.entity, "__table__", None)
        name = quote_identifier(table_name_for(self.entity), self.database_url)
        schema = getattr(table, "schema", None)
        if isinstance(schema, str) and schema:
            return f"{quote_identifier(schema, self.database_url)}.{name}"
        return name

    def __repr__(self) -> str:
        return f"<ResourceNaming {self.underscored_resource_name}>"
