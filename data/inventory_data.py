"""inventory功能测试数据：商品目录、价格、排序方式"""
from data.models import Product

PRODUCTS = {
    "backpack": "Sauce Labs Backpack",
    "bike_light": "Sauce Labs Bike Light",
    "bolt_tshirt": "Sauce Labs Bolt T-Shirt",
    "fleece_jacket": "Sauce Labs Fleece Jacket",
    "onesie": "Sauce Labs Onesie",
    "red_tshirt": "Test.allTheThings() T-Shirt (Red)",
}

PRODUCT_PRICES = {
    PRODUCTS["backpack"]: "$29.99",
    PRODUCTS["bike_light"]: "$9.99",
    PRODUCTS["bolt_tshirt"]: "$15.99",
    PRODUCTS["fleece_jacket"]: "$49.99",
    PRODUCTS["onesie"]: "$7.99",
    PRODUCTS["red_tshirt"]: "$15.99",
}

CATALOG = [Product(name, price) for name, price in PRODUCT_PRICES.items()]

PRODUCT_COUNT = len(CATALOG)

# 下拉框 option value
SORT_OPTIONS = {
    "name_asc": "az",
    "name_desc": "za",
    "price_asc": "lohi",
    "price_desc": "hilo",
}
