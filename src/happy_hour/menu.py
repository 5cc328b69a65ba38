"""Fixed happy hour menu and its console rendering."""

from __future__ import annotations

from decimal import Decimal
from typing import Callable, List

import structlog

from .formatting import MenuSection, format_menu
from .models import MenuCategory, MenuItem

LOGGER = structlog.get_logger(__name__)

DRINKS: tuple[MenuItem, ...] = (
    MenuItem(name="Craft Beer", price=Decimal("5.00")),
    MenuItem(name="House Wine", price=Decimal("6.00")),
    MenuItem(name="Signature Cocktail", price=Decimal("8.50")),
    MenuItem(name="Soft Drink", price=Decimal("2.50")),
)

FOOD: tuple[MenuItem, ...] = (
    MenuItem(name="Loaded Nachos", price=Decimal("7.50")),
    MenuItem(name="Chicken Wings", price=Decimal("9.00")),
    MenuItem(name="Sliders", price=Decimal("8.00")),
    MenuItem(name="Truffle Fries", price=Decimal("5.50")),
)


def menu_sections(category: "str | MenuCategory | None" = MenuCategory.ALL) -> List[MenuSection]:
    """Return the catalog sections selected by ``category``.

    Raises ``InvalidArgumentError`` for names outside All/Drinks/Food.
    """
    selected = MenuCategory.parse(category)
    sections: List[MenuSection] = []
    if selected in (MenuCategory.ALL, MenuCategory.DRINKS):
        sections.append((MenuCategory.DRINKS.value, DRINKS))
    if selected in (MenuCategory.ALL, MenuCategory.FOOD):
        sections.append((MenuCategory.FOOD.value, FOOD))
    return sections


def show_menu(
    category: "str | MenuCategory | None" = MenuCategory.ALL,
    include_prices: bool = False,
    *,
    currency_symbol: str = "$",
    echo: Callable[[str], None] = print,
) -> None:
    """Print the menu for the requested category."""
    sections = menu_sections(category)
    LOGGER.debug(
        "menu.render",
        sections=[title for title, _ in sections],
        include_prices=include_prices,
    )
    echo(format_menu(sections, include_prices=include_prices, currency_symbol=currency_symbol))
