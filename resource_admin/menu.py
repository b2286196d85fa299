"""
Menu — posição de cada resource na navegação.

``MenuConfig`` resolve label, parent, prioridade e o predicado de
exibição. ``Menu``/``MenuItem`` são a árvore entregue ao renderer.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Protocol


DEFAULT_MENU_PRIORITY = 10


class DisplayPredicate(Protocol):
    """Predicado sem argumentos que decide se o item aparece."""

    def __call__(self) -> bool: ...


def always_display() -> bool:
    """Predicado padrão: o item sempre aparece."""
    return True


@dataclass
class MenuOptions:
    label: str | None = None
    parent: str | None = None
    priority: int = DEFAULT_MENU_PRIORITY
    display_if: DisplayPredicate = always_display
    display: bool = True


class MenuConfig:
    """
    Configuração de menu de um resource.

    ``menu(False)`` suprime o resource do menu. Qualquer outra chamada
    faz merge das opções (última escrita vence).
    """

    _KEYS = {"label", "parent", "priority", "if", "if_"}

    def __init__(self, default_label: Callable[[], str]) -> None:
        self._default_label = default_label
        self.options = MenuOptions()

    def menu(self, enabled: bool | None = None, /, **options: Any) -> None:
        if enabled is False:
            self.options.display = False
            return
        if enabled is True:
            self.options.display = True

        unknown = set(options) - self._KEYS
        if unknown:
            raise TypeError(f"Unknown menu options: {', '.join(sorted(unknown))}")

        if "label" in options:
            self.options.label = options["label"]
        if "parent" in options:
            self.options.parent = options["parent"]
        if "priority" in options:
            priority = options["priority"]
            if isinstance(priority, bool) or not isinstance(priority, int):
                raise TypeError(f"menu priority must be an int, got {priority!r}")
            self.options.priority = priority
        predicate = options.get("if_", options.get("if"))
        if predicate is not None:
            if not callable(predicate):
                raise TypeError(f"menu if_ must be callable, got {predicate!r}")
            self.options.display_if = predicate

    @property
    def menu_item_name(self) -> str:
        return self.options.label or self._default_label()

    @property
    def parent_menu_item_name(self) -> str | None:
        return self.options.parent

    @property
    def menu_item_priority(self) -> int:
        return self.options.priority

    @property
    def menu_item_display_if(self) -> DisplayPredicate:
        return self.options.display_if


@dataclass
class MenuItem:
    label: str
    url: str | None = None
    priority: int = DEFAULT_MENU_PRIORITY
    display_if: DisplayPredicate = always_display
    children: list["MenuItem"] = field(default_factory=list)

    def add(self, item: "MenuItem") -> "MenuItem":
        self.children.append(item)
        self.children.sort(key=lambda i: (i.priority, i.label))
        return item

    def find(self, label: str) -> "MenuItem | None":
        for child in self.children:
            if child.label == label:
                return child
        return None

    def find_or_create(self, label: str) -> "MenuItem":
        return self.find(label) or self.add(MenuItem(label=label))

    def is_displayed(self) -> bool:
        return bool(self.display_if())

    def __iter__(self) -> Iterator["MenuItem"]:
        return iter(self.children)


class Menu(MenuItem):
    """Raiz da árvore de navegação de um namespace."""

    def __init__(self) -> None:
        super().__init__(label="")

    def to_dict(self) -> list[dict[str, Any]]:
        """Serializa itens visíveis (usado por renderers e APIs)."""

        def _dump(item: MenuItem) -> dict[str, Any]:
            return {
                "label": item.label,
                "url": item.url,
                "priority": item.priority,
                "children": [_dump(c) for c in item.children if c.is_displayed()],
            }

        return [_dump(item) for item in self.children if item.is_displayed()]
