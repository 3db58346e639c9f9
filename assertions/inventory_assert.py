import re
from decimal import Decimal


class InventoryAssert:

    @staticmethod
    def product_count(actual_count: int, expect_count: int):
        assert actual_count == expect_count, f"期望商品数量：{expect_count}，实际商品数量：{actual_count}"

    @staticmethod
    def column_not_empty(names: list):
        assert names, "商品信息list为空"
        for name in names:
            assert name.strip(), "存在商品信息为空"

    @staticmethod
    def product_price_format(prices: list[str]):
        assert prices, "商品价格list为空"
        for price in prices:
            assert re.match(r"^\$\d+(\.\d{2})$", price), f"商品价格格式错误：{price}"

    @staticmethod
    def product_price_is_decimal(prices: list[Decimal]):
        for price in prices:
            assert isinstance(price, Decimal), f"价格不是 Decimal: {price}"
            assert price > 0, f"价格必须大于 0: {price}"

    @staticmethod
    def catalog_match(actual: dict, expect: dict):
        """页面商品名称->价格 与 固定目录一致"""
        assert actual == expect, f"商品目录与预期不一致：{actual}!={expect}"

    @staticmethod
    def in_cart(product_name: str, in_cart: bool, expect: bool = True):
        state = "Remove" if expect else "Add to cart"
        assert in_cart == expect, f"商品{product_name}按钮状态应为{state}"

    @staticmethod
    def sort_asc(values: list):
        assert values == sorted(values), f"字段名称-{[values[0]]}未正序排列：{values}"

    @staticmethod
    def sort_desc(values: list):
        assert values == sorted(values, reverse=True), f"字段名称-{[values[0]]}未倒序排列：{values}"
