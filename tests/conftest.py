import pytest

from pages.cart_page import CartPage
from pages.check_out_page import CheckOutPage
from pages.inventory_page import InventoryPage
from pages.login_page import LoginPage


# 每个测试方法一套新的 page object，共用同一个 page
@pytest.fixture(scope="function")
def login_page(page):
    return LoginPage(page)


@pytest.fixture(scope="function")
def inventory_page(page):
    return InventoryPage(page)


@pytest.fixture(scope="function")
def cart_page(page):
    return CartPage(page)


@pytest.fixture(scope="function")
def check_out_page(page):
    return CheckOutPage(page)


@pytest.fixture(scope="function")
def logged_in(login_page):
    """通过登录页面登录 standard_user，停在商品列表页"""
    login_page.navigate()
    login_page.login_as_standard_user()
    login_page.verify_login_success()
    return login_page


@pytest.fixture(scope="function")
def opened_inventory(inventory_page):
    """直接打开商品列表页（需配合 need_login）"""
    inventory_page.open_inventory()
    return inventory_page
