"""Plain-text cost report and display formatting."""

import decimal
import re
from typing import List, Tuple

from babel.numbers import format_currency, format_decimal

from models import Recipe

RULE = "=" * 20
THIN_RULE = "-" * 20
UNNAMED = "Unnamed Ingredient"

# Babel quantizes in the current decimal context; 28 digits is too few for
# large floats (the largest finite float has 309 integer digits).
FORMAT_PRECISION = 400


def format_money(x: float, currency: str = "INR", locale: str = "en_IN") -> str:
    with decimal.localcontext() as ctx:
        ctx.prec = FORMAT_PRECISION
        return format_currency(x, currency, locale=locale)


def format_number(x: float, locale: str = "en_IN") -> str:
    """Format a quantity without trailing zeros (20, 2.5)."""
    with decimal.localcontext() as ctx:
        ctx.prec = FORMAT_PRECISION
        return format_decimal(x, locale=locale)


def build_report(recipe: Recipe, currency: str = "INR", locale: str = "en_IN") -> str:
    def money(x):
        return format_money(x or 0.0, currency, locale)

    lines = [
        "Baking Cost Report",
        RULE,
        "",
        f"Recipe Name: {recipe.name}",
        f"Total Units Produced: {format_number(recipe.total_units, locale)}",
        "",
        "Ingredient Costs:",
        THIN_RULE,
    ]
    for ing in recipe.ingredients:
        lines.append(f"{ing.name or UNNAMED}: {money(ing.cost)}")
    lines += [
        "",
        RULE,
        f"Total Batch Cost: {money(recipe.total_cost)}",
        f"Cost Per Unit: {money(recipe.cost_per_unit)}",
    ]
    return "\n".join(lines) + "\n"


def report_filename(name: str) -> str:
    slug = re.sub(r"\s+", "_", name.lower())
    return f"{slug}_cost_report.txt"


def cost_breakdown(recipe: Recipe) -> List[Tuple[str, float]]:
    """Label/cost pairs for ingredients with a positive cost, in recipe order."""
    return [(ing.name or UNNAMED, ing.cost) for ing in recipe.ingredients if ing.cost > 0]
