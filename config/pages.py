import os

"""站点地址、页面路径、页面标题"""

ENV = os.getenv("TEST_ENV", "prod")

BASE_URLS = {
    "prod": "https://www.saucedemo.com",
}

PATHS = {
    "login": "/",
    "inventory": "/inventory.html",
    "cart": "/cart.html",
    "checkout_step_one": "/checkout-step-one.html",
    "checkout_step_two": "/checkout-step-two.html",
    "checkout_complete": "/checkout-complete.html",
}

# BASE_URL 环境变量优先，便于指向镜像站点
BASE_URL = os.getenv("BASE_URL", BASE_URLS.get(ENV, BASE_URLS["prod"])).rstrip("/")

URLS = {
    env: {name: base + path for name, path in PATHS.items()}
    for env, base in {**BASE_URLS, ENV: BASE_URL}.items()
}

PAGE_TITLES = {
    "login": "Swag Labs",
    "inventory": "Products",
    "cart": "Your Cart",
    "checkout_information": "Checkout: Your Information",
    "checkout_overview": "Checkout: Overview",
    "checkout_complete": "Checkout: Complete!",
}

# wait_url 使用的正则片段
URL_PATTERNS = {
    "login": r"/$",
    "inventory": r"/inventory\.html",
    "cart": r"/cart\.html",
    "checkout_step_one": r"/checkout-step-one\.html",
    "checkout_step_two": r"/checkout-step-two\.html",
    "checkout_complete": r"/checkout-complete\.html",
}
