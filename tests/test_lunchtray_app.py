"""
Pilot-driven tests for the Textual ordering flow.

Each test drives the app with key presses and checks the shared OrderState.
"""

import asyncio
from decimal import Decimal

from lunchtray.checkout_modal import CheckoutModal
from lunchtray.lunchtray_app import CHECKOUT, START, LunchTrayApp
from lunchtray.order_state import OrderState


def _run(scenario):
    order = OrderState()
    app = LunchTrayApp(order)

    async def runner():
        async with app.run_test() as pilot:
            await scenario(app, pilot)

    asyncio.run(runner())
    return app, order


def test_full_order_submit_resets_state():
    async def scenario(app, pilot):
        assert app.step == START
        await pilot.press("enter")
        assert app.step == "entree"

        await pilot.press("j", "enter")
        assert app.order.entree.name == "Three Bean Chili"

        await pilot.press("n", "enter")
        assert app.order.side.name == "Summer Salad"

        await pilot.press("n", "j", "enter")
        assert app.order.accompaniment.name == "Mixed Berries"
        assert app.order.total == Decimal("8.10")

        await pilot.press("n")
        await pilot.pause()
        assert app.step == CHECKOUT
        assert isinstance(app.screen, CheckoutModal)

        await pilot.press("s")
        await pilot.pause()
        assert app.step == START
        assert app.system_status == "Order submitted: $8.10"

    _, order = _run(scenario)
    assert order.entree is None
    assert order.side is None
    assert order.accompaniment is None
    assert order.total == 0


def test_changing_entree_replaces_price():
    async def scenario(app, pilot):
        await pilot.press("enter", "enter")
        assert app.order.subtotal == Decimal("7.00")

        await pilot.press("j", "enter")
        assert app.order.subtotal == Decimal("4.00")

        await pilot.press("enter")
        assert app.order.subtotal == Decimal("4.00")

    _run(scenario)


def test_back_from_checkout_keeps_order():
    async def scenario(app, pilot):
        await pilot.press("enter", "enter", "n", "n", "n")
        await pilot.pause()
        assert isinstance(app.screen, CheckoutModal)

        await pilot.press("b")
        await pilot.pause()
        assert app.step == "accompaniment"
        assert app.order.entree.name == "Cauliflower"

        await pilot.press("b")
        assert app.step == "side"

    _run(scenario)


def test_cancel_from_checkout_resets_order():
    async def scenario(app, pilot):
        await pilot.press("enter", "enter", "n", "n", "n")
        await pilot.pause()

        await pilot.press("c")
        await pilot.pause()
        assert app.step == START
        assert app.system_status == "Order cancelled"
        assert app.order.subtotal == 0

    _run(scenario)


def test_cancel_action_mid_order():
    async def scenario(app, pilot):
        await pilot.press("enter", "enter", "n", "enter")
        assert app.order.subtotal == Decimal("9.50")

        app.action_cancel_order()
        await pilot.pause()
        assert app.step == START
        assert app.order.entree is None

    _run(scenario)


def test_revisiting_course_lands_on_selection():
    async def scenario(app, pilot):
        await pilot.press("enter", "j", "j", "enter", "n")
        assert app.cursor_index == 0

        await pilot.press("b")
        assert app.step == "entree"
        assert app.cursor_index == 2

    _run(scenario)


def test_enter_submits_from_checkout():
    async def scenario(app, pilot):
        await pilot.press("enter", "enter", "n", "n", "n")
        await pilot.pause()
        assert isinstance(app.screen, CheckoutModal)

        await pilot.press("enter")
        await pilot.pause()
        assert app.step == START
        assert app.system_status == "Order submitted: $7.56"

    _, order = _run(scenario)
    assert order.entree is None
    assert order.total == 0


def test_escape_returns_from_checkout():
    async def scenario(app, pilot):
        await pilot.press("enter", "enter", "n", "n", "n")
        await pilot.pause()

        await pilot.press("escape")
        await pilot.pause()
        assert app.step == "accompaniment"
        assert not isinstance(app.screen, CheckoutModal)
        assert app.order.total == Decimal("7.56")

    _run(scenario)
