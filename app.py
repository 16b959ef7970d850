# app.py
# =============================================================================
# Baking Cost Calculator — recipe form + cost summary + downloadable report
# =============================================================================

import logging
from dataclasses import replace

import matplotlib.pyplot as plt  # pie chart of the cost breakdown
import streamlit as st

from calc import ingredient_cost
from config import configure_logging, load_settings
from models import (
    DETAILED,
    DIRECT,
    UNIT_OPTIONS,
    DetailedEntry,
    DirectEntry,
    Ingredient,
    Recipe,
    add_ingredient,
    as_number,
    can_generate_report,
    remove_ingredient,
    replace_ingredient,
    with_entry_mode,
    with_purchase_unit,
)
from report import build_report, cost_breakdown, format_money, format_number, report_filename
from session import CalculatorSession
from storage import JsonStore, RecipeStorage

# -----------------------------------------------------------------------------
# CONFIG
# -----------------------------------------------------------------------------
st.set_page_config(page_title="Baking Cost Calculator", layout="wide")

settings = load_settings()
configure_logging(settings.log_level)
logger = logging.getLogger("app")

# largest value any number input accepts
MAX_INPUT = 1e12


def money(x) -> str:
    return format_money(x, settings.currency, settings.locale)


def get_session() -> CalculatorSession:
    """Load the stored recipe once per browser session."""
    if "calculator" not in st.session_state:
        storage = RecipeStorage(JsonStore(settings.data_dir))
        st.session_state.calculator = CalculatorSession.start(storage)
    return st.session_state.calculator


def seed(key: str, value) -> str:
    """Give a widget its starting value without fighting its session state."""
    if key not in st.session_state:
        st.session_state[key] = value
    return key


def unit_choice(unit: str) -> str:
    return unit if unit in UNIT_OPTIONS else UNIT_OPTIONS[1]


def clamp(x: float) -> float:
    return min(max(as_number(x), 0.0), MAX_INPUT)

# -----------------------------------------------------------------------------
# FORM
# -----------------------------------------------------------------------------
def recipe_details(recipe: Recipe) -> Recipe:
    st.subheader("Recipe Details")
    name = st.text_input(
        "Recipe Name",
        placeholder="E.g., Chocolate Chip Cookies",
        key=seed(f"{recipe.id}_name", recipe.name),
    )
    units = st.number_input(
        "Total Units Produced",
        min_value=0.0, max_value=MAX_INPUT,
        step=1.0,
        key=seed(f"{recipe.id}_units", clamp(recipe.total_units)),
    )
    return replace(recipe, name=name, total_units=as_number(units))


def detailed_fields(entry: DetailedEntry, key: str) -> DetailedEntry:
    st.markdown("**Purchase Details**")
    c1, c2, c3 = st.columns([2, 2, 1])
    price = c1.number_input("Price", min_value=0.0, max_value=MAX_INPUT, step=1.0,
                            key=seed(f"{key}_price", clamp(entry.purchase_price)))
    qty = c2.number_input("Qty", min_value=0.0, max_value=MAX_INPUT, step=1.0,
                          key=seed(f"{key}_qty", clamp(entry.purchase_quantity)))
    purchase_unit = c3.selectbox("Unit", UNIT_OPTIONS,
                                 key=seed(f"{key}_purchase_unit", unit_choice(entry.purchase_unit)))

    # used unit follows the purchase unit while the two agree
    followed = with_purchase_unit(entry, purchase_unit)
    if followed.used_unit != entry.used_unit:
        st.session_state[f"{key}_used_unit"] = unit_choice(followed.used_unit)

    st.markdown("**Recipe Usage**")
    u1, u2 = st.columns([4, 1])
    used_qty = u1.number_input("Used Qty", min_value=0.0, max_value=MAX_INPUT, step=1.0,
                               key=seed(f"{key}_used_qty", clamp(entry.used_quantity)))
    used_unit = u2.selectbox("Unit", UNIT_OPTIONS,
                             key=seed(f"{key}_used_unit", unit_choice(followed.used_unit)))
    return DetailedEntry(
        purchase_price=as_number(price),
        purchase_quantity=as_number(qty),
        purchase_unit=purchase_unit,
        used_quantity=as_number(used_qty),
        used_unit=used_unit,
    )


def ingredient_row(ing: Ingredient, key: str) -> Ingredient | None:
    """Render one ingredient; returns None when the user removes it."""
    with st.container(border=True):
        c1, c2 = st.columns(2)
        name = c1.text_input("Ingredient Name", placeholder="E.g., Flour",
                             key=seed(f"{key}_name", ing.name))
        direct = c2.toggle("Direct Cost Entry",
                           key=seed(f"{key}_direct", ing.entry_mode == DIRECT))
        ing = with_entry_mode(replace(ing, name=name), DIRECT if direct else DETAILED)

        if isinstance(ing.entry, DirectEntry):
            cost = st.number_input("Direct Cost for this Ingredient", min_value=0.0,
                                   max_value=MAX_INPUT, step=1.0,
                                   key=seed(f"{key}_direct_cost", clamp(ing.entry.direct_cost)))
            ing = replace(ing, entry=DirectEntry(direct_cost=as_number(cost)))
        else:
            ing = replace(ing, entry=detailed_fields(ing.entry, key))

        m, b = st.columns([4, 1])
        m.metric("Cost in Recipe", money(ingredient_cost(ing)))
        if b.button("Remove", key=f"{key}_remove"):
            logger.debug("Removed ingredient %s", ing.id)
            return None
    return ing


def recipe_form(recipe: Recipe) -> tuple[Recipe, bool]:
    """Read every input; the flag tells whether rows were added or removed."""
    recipe = recipe_details(recipe)

    head, add = st.columns([4, 1])
    head.subheader("Ingredients")
    add_clicked = add.button("Add Ingredient", key="add_ingredient")

    if not recipe.ingredients and not add_clicked:
        st.info("No ingredients added yet.")

    changed = False
    for ing in recipe.ingredients:
        row = ingredient_row(ing, f"{recipe.id}_{ing.id}")
        if row is None:
            recipe = remove_ingredient(recipe, ing.id)
            changed = True
        else:
            recipe = replace_ingredient(recipe, row)

    if add_clicked:
        recipe = add_ingredient(recipe)
        logger.debug("Added ingredient %s", recipe.ingredients[-1].id)
        changed = True
    return recipe, changed


def actions(session: CalculatorSession) -> None:
    left, right = st.columns(2)
    if left.button("New Calculation", key="new_calculation"):
        st.session_state.confirm_reset = True
    if right.button("Generate Report", key="generate_report", type="primary",
                    disabled=not can_generate_report(session.recipe)):
        session.generate_report()

    if st.session_state.get("confirm_reset"):
        st.warning("Are you sure you want to start a new calculation? "
                   "This will clear all current data.")
        yes, no = st.columns(2)
        if yes.button("Yes, clear everything", key="confirm_reset_yes"):
            st.session_state.confirm_reset = False
            session.reset()
            st.rerun()
        if no.button("Cancel", key="confirm_reset_no"):
            st.session_state.confirm_reset = False
            st.rerun()

# -----------------------------------------------------------------------------
# RESULTS
# -----------------------------------------------------------------------------
def cost_summary(recipe: Recipe) -> None:
    if not recipe.show_results or not can_generate_report(recipe):
        st.subheader("Cost Summary")
        if not recipe.show_results:
            st.info("Click 'Generate Report' to see cost calculations.")
        else:
            st.info("Enter recipe details to see cost calculations.")
        return

    st.subheader(f"Cost Summary: {recipe.name}")
    st.markdown("#### Ingredient Costs")
    st.table([
        {"Ingredient": ing.name or "Unnamed ingredient", "Cost": money(ing.cost)}
        for ing in recipe.ingredients
    ])

    m1, m2 = st.columns(2)
    m1.metric("Total Batch Cost", money(recipe.total_cost))
    m2.metric("Cost Per Unit", money(recipe.cost_per_unit))
    m2.caption(f"For {format_number(recipe.total_units, settings.locale)} units")

    breakdown = cost_breakdown(recipe)
    if breakdown:
        labels = [lbl for lbl, _ in breakdown]
        vals = [val for _, val in breakdown]
        fig, ax = plt.subplots()
        ax.pie(vals, labels=labels, autopct='%1.1f%%', startangle=90)
        ax.axis('equal')
        st.pyplot(fig)
        plt.close(fig)
        st.caption("Share of the batch cost per ingredient")

    st.download_button(
        "Download Report",
        data=build_report(recipe, settings.currency, settings.locale),
        file_name=report_filename(recipe.name),
        mime="text/plain",
        key="download_report",
    )

# -----------------------------------------------------------------------------
# PAGE
# -----------------------------------------------------------------------------
st.title("Baking Cost Calculator")
st.caption("Calculate exactly how much your delicious creations cost to make")

calculator = get_session()
form_col, results_col = st.columns(2)

with form_col:
    edited, structure_changed = recipe_form(calculator.recipe)
    calculator.apply(edited)
    if structure_changed:
        st.rerun()
    actions(calculator)

with results_col:
    cost_summary(calculator.recipe)

st.caption('Enter your recipe details on the left, then click "Generate Report" '
           "to see your cost analysis on the right.")
