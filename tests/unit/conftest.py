from unittest.mock import MagicMock

import pytest


@pytest.fixture
def fake_page():
    """
    用 MagicMock 模拟 playwright Page：
    同一个 selector 始终返回同一个 locator mock，可通过 fake_page.locators[selector] 设置行为
    """
    page = MagicMock(name="page")
    page.locators = {}
    page.locator.side_effect = lambda selector: page.locators.setdefault(selector, MagicMock(name=selector))
    return page
