import pytest

from webui_suites.ui_testing.framework import interaction_driver
from webui_suites.ui_testing.framework.errors import (
    ConfigurationError,
    ElementActionError,
    ElementNotFoundError,
    ElementNotReadyError,
)
from webui_suites.ui_testing.framework.interaction_driver import (
    CLEAR_VALUE_SCRIPT,
    SET_VALUE_SCRIPT,
    InteractionDriver,
)
from webui_suites.ui_testing.framework.selector_type import SelectorType


# =============================================================================
# Readiness polling
# =============================================================================

@pytest.mark.asyncio
async def test_ready_element_passes_on_first_cycle(driver, fake_page, clock):
    fake_page.add(css="#ok")

    assert await driver.wait_until_element_visible_and_enabled(SelectorType.CSS, "#ok") is True
    assert clock.now_ms < 500
    assert fake_page.delays == []


@pytest.mark.asyncio
async def test_visible_and_enabled_are_both_queried_each_cycle(driver, fake_page):
    fake_page.add(text="Save")

    await driver.wait_until_element_visible_and_enabled(SelectorType.TEXT, "Save")

    assert ("is_visible", "Save") in fake_page.calls
    assert ("is_enabled", "Save") in fake_page.calls


@pytest.mark.asyncio
async def test_text_element_shown_after_800ms_is_ready_within_one_extra_interval(
    driver, fake_page, clock
):
    fake_page.add(text="Submit", visible_after_ms=800)

    await driver.wait_until_element_visible_and_enabled(
        SelectorType.TEXT, "Submit", timeout=2000, polling_interval=500
    )

    assert 1000 <= clock.now_ms <= 1500


@pytest.mark.asyncio
async def test_disabled_element_times_out_as_not_ready(driver, fake_page, clock):
    fake_page.add(css="#save", enabled=False)

    with pytest.raises(ElementNotReadyError) as exc_info:
        await driver.wait_until_element_visible_and_enabled(
            SelectorType.CSS, "#save", timeout=2000, polling_interval=500
        )

    assert "Element not visible and enabled within 2000 ms" in str(exc_info.value)
    assert exc_info.value.locator == "#save"
    assert clock.now_ms == 2000


@pytest.mark.asyncio
async def test_structural_resolution_inside_poll_is_capped_by_remaining_time(
    driver, fake_page, clock
):
    with pytest.raises(ElementNotReadyError):
        await driver.wait_until_element_visible_and_enabled(
            SelectorType.CSS, "#missing", timeout=3000, polling_interval=500
        )

    assert clock.now_ms == 3000
    assert fake_page.selector_waits[0] == ("#missing", "attached", 3000)


@pytest.mark.asyncio
async def test_transiently_missing_element_does_not_abort_polling(
    driver, fake_page, clock, log_messages
):
    fake_page.add(placeholder="Search", attached_after_ms=1000)

    assert await driver.wait_until_element_visible_and_enabled(
        SelectorType.PLACEHOLDER, "Search", timeout=5000, polling_interval=500
    )
    assert clock.now_ms == 1000
    assert any("Attempt 1" in message for message in log_messages)


@pytest.mark.asyncio
async def test_readiness_with_unsupported_type_is_a_configuration_error(driver, clock):
    with pytest.raises(ConfigurationError):
        await driver.wait_until_element_visible_and_enabled("css", "#x", timeout=2000)
    assert clock.now_ms == 0


# =============================================================================
# Dynamic bounded wait
# =============================================================================

@pytest.mark.asyncio
async def test_dynamic_wait_exits_once_visible(driver, fake_page):
    fake_page.add(title="Results", visible_after_ms=1200)

    assert await driver.dynamic_wait_for_element(SelectorType.TITLE, "Results", 5000, 500) is True
    assert fake_page.delays == [500, 500, 500]


@pytest.mark.asyncio
async def test_dynamic_wait_exhausts_budget_silently(driver, fake_page):
    fake_page.add(title="Results", hidden=True)

    assert await driver.dynamic_wait_for_element(SelectorType.TITLE, "Results", 2000, 500) is False
    assert fake_page.delays == [500, 500, 500, 500]


# =============================================================================
# Actions
# =============================================================================

@pytest.mark.asyncio
async def test_click_dispatches_one_native_click(driver, fake_page):
    button = fake_page.add(css="#go")

    await driver.click(SelectorType.CSS, "#go")

    assert button.clicks == ["native"]


@pytest.mark.asyncio
async def test_click_reports_readiness_failure_with_operation_name(fake_page, settings, clock):
    settings.readiness_timeout_ms = 1000
    driver = InteractionDriver(fake_page, settings=settings, clock=clock)
    fake_page.add(css="#go", hidden=True)

    with pytest.raises(ElementNotReadyError) as exc_info:
        await driver.click(SelectorType.CSS, "#go")

    message = str(exc_info.value)
    assert message.startswith("Error clicking element: Element not visible and enabled within 1000 ms")
    assert "[CSS: '#go']" in message


@pytest.mark.asyncio
async def test_intercepted_native_click_is_an_action_error(driver, fake_page):
    fake_page.add(css="#go", obscured=True)

    with pytest.raises(ElementActionError, match="intercepts pointer events") as exc_info:
        await driver.click(SelectorType.CSS, "#go")

    assert exc_info.value.__cause__ is not None


@pytest.mark.asyncio
async def test_click_via_script_can_skip_readiness(driver, fake_page, clock):
    button = fake_page.add(label="Close", enabled=False)

    await driver.click_via_script(SelectorType.LABEL, "Close", wait_until_ready=False)

    assert button.clicks == ["script"]
    assert clock.now_ms == 0


@pytest.mark.asyncio
async def test_send_keys_clears_and_fills(driver, fake_page):
    field = fake_page.add(placeholder="Email", value="old@example.com")

    element = await driver.send_keys(SelectorType.PLACEHOLDER, "Email", "new@example.com")

    assert field.value == "new@example.com"
    assert element.value == "Email"


@pytest.mark.asyncio
async def test_send_keys_without_clear_still_overwrites_via_fill(driver, fake_page):
    field = fake_page.add(placeholder="Email", value="old")

    await driver.send_keys(SelectorType.PLACEHOLDER, "Email", "new", clear=False)

    assert field.value == "new"


@pytest.mark.asyncio
async def test_send_keys_via_script_settles_between_steps(driver, fake_page):
    field = fake_page.add(test_id="query", value="stale")

    await driver.send_keys_via_script(SelectorType.TEST_ID, "query", "it's fresh")

    assert field.value == "it's fresh"
    assert fake_page.delays == [200, 200]
    assert [script for script, _ in fake_page.evaluations] == [CLEAR_VALUE_SCRIPT, SET_VALUE_SCRIPT]
    assert fake_page.evaluations[1][1] == "it's fresh"


def test_keystroke_pause_is_shorter_far_from_the_end():
    pauses = [InteractionDriver.keystroke_pause(i, 10) for i in range(10)]
    assert pauses == [25, 25, 25, 25, 25, 25, 75, 75, 75, 0]


@pytest.mark.asyncio
async def test_slow_type_presses_one_key_per_character(driver, fake_page, monkeypatch):
    monkeypatch.setattr(interaction_driver.random, "randint", lambda low, high: 7)
    field = fake_page.add(css="#search", value="previous")

    await driver.slow_type(SelectorType.CSS, "#search", "playwright")

    assert field.presses == list("playwright")
    assert field.value == "playwright"

    expected = [2000]
    for index in range(10):
        pause = InteractionDriver.keystroke_pause(index, 10)
        if pause:
            expected.append(pause)
        expected.append(7)
    assert fake_page.delays == expected


@pytest.mark.asyncio
async def test_slow_type_on_missing_element_raises(driver):
    with pytest.raises(ElementNotFoundError, match="Error typing text slowly"):
        await driver.slow_type(SelectorType.CSS, "#nowhere", "abc")


@pytest.mark.asyncio
async def test_random_delay_stays_within_bounds(driver, fake_page):
    for _ in range(20):
        await driver.random_delay(50)

    assert all(1 <= ms <= 50 for ms in fake_page.delays)


@pytest.mark.asyncio
@pytest.mark.parametrize("max_delay", [0, -5])
async def test_random_delay_with_non_positive_bound_waits_one_ms(driver, fake_page, max_delay):
    await driver.random_delay(max_delay)

    assert fake_page.delays == [1]


@pytest.mark.asyncio
async def test_dynamic_wait_with_zero_interval_is_a_configuration_error(driver, fake_page):
    fake_page.add(title="Results", hidden=True)

    with pytest.raises(ConfigurationError):
        await driver.dynamic_wait_for_element(SelectorType.TITLE, "Results", 2000, 0)

    assert fake_page.delays == []


@pytest.mark.asyncio
async def test_reads_and_hover(driver, fake_page):
    element = fake_page.add(css="a.docs", text="Docs", attributes={"href": "/docs"})

    assert await driver.get_text(SelectorType.CSS, "a.docs") == "Docs"
    assert await driver.get_attribute_value(SelectorType.CSS, "a.docs", "href") == "/docs"
    assert await driver.get_attribute_value(SelectorType.CSS, "a.docs", "target") is None

    await driver.hover(SelectorType.CSS, "a.docs")
    await driver.scroll_into_view(SelectorType.CSS, "a.docs")
    assert element.hovered == 1
    assert element.scrolled == 1


@pytest.mark.asyncio
async def test_get_text_on_missing_element_keeps_not_found_class(driver):
    with pytest.raises(ElementNotFoundError, match="Error getting inner text of element"):
        await driver.get_text(SelectorType.CSS, "#nothing")


@pytest.mark.asyncio
async def test_is_element_visible_raises_when_never_ready(driver, fake_page):
    fake_page.add(css="#hidden", hidden=True)

    with pytest.raises(ElementNotReadyError, match="Error checking element visibility"):
        await driver.is_element_visible(SelectorType.CSS, "#hidden", timeout=1000)


# =============================================================================
# Page-level operations
# =============================================================================

@pytest.mark.asyncio
async def test_navigate_uses_sixty_second_cap(driver, fake_page):
    await driver.navigate("https://app.example.com/search")

    assert fake_page.calls[-1] == ("goto", ("https://app.example.com/search", 60000))
    assert await driver.get_current_url() == "https://app.example.com/search"

    await driver.navigate_back()
    assert fake_page.url == "https://app.example.com/home"


@pytest.mark.asyncio
async def test_navigation_failure_names_the_url(driver, fake_page):
    fake_page.goto_fails = True

    with pytest.raises(ElementActionError, match="Error navigating to https://down.example.com"):
        await driver.navigate("https://down.example.com")


@pytest.mark.asyncio
async def test_current_url_waits_for_body(driver, fake_page):
    await driver.get_current_url()

    assert ("body", "attached", 60000) in fake_page.selector_waits
    assert ("body", "visible", 60000) in fake_page.selector_waits


@pytest.mark.asyncio
async def test_execute_script_argument_forms(driver, fake_page):
    fake_page.script_results["() => document.title"] = "Home"

    assert await driver.execute_script("() => document.title") == "Home"
    await driver.execute_script("(x) => x", 1)
    await driver.execute_script("([a, b]) => a + b", 1, 2)

    assert fake_page.evaluations[1:] == [("(x) => x", 1), ("([a, b]) => a + b", [1, 2])]


@pytest.mark.asyncio
async def test_keyboard_mouse_and_refresh(driver, fake_page):
    await driver.press_key("Enter")
    await driver.scroll_page(0, 100)
    await driver.refresh()

    assert fake_page.keyboard.pressed == ["Enter"]
    assert fake_page.mouse.wheel_events == [(0, 100)]
    assert fake_page.reloads == 1
