from decimal import Decimal
import re


class CheckOutAssert:

    @staticmethod
    def tips_message(actual_msg: str, expect_msg: str):
        """收件人为空，点击continue按钮后的错误提示"""
        assert actual_msg == expect_msg, f"预期提示信息：{expect_msg}，实际提示信息：{actual_msg}"

    @staticmethod
    def contains(actual_msg: str, expect_part: str):
        assert expect_part in actual_msg, f"预期文案：{expect_part}，不存在于{actual_msg}"

    @staticmethod
    def not_empty(column: str):
        assert column.strip() != "", f"{column}为空！"

    @staticmethod
    def price_format(price: str):
        """只关心price格式，不关心具体 label 文案
           UI 改文案测试不炸"""
        assert re.match(r"^[A-Za-z ]+: \$\d+(\.\d{2})$", price), f"价格格式错误：{price}"

    @staticmethod
    def price_equal(expect: Decimal, actual: Decimal):
        assert expect == actual, f"预期价格：{expect}!={actual}"

    @staticmethod
    def order_price(item_price: Decimal, tax: Decimal, order_price: Decimal):
        """商品总价 + 税 = 订单总价"""
        expect = item_price + tax
        assert order_price == expect, f"实际总金额{order_price}!=预期总金额{expect}"

    @staticmethod
    def calculations_correct(correct: bool, expect_totals, displayed: tuple):
        assert correct, f"订单金额计算错误：预期{expect_totals}，页面显示{displayed}"

    @staticmethod
    def product_count(added_products: list, checkout_products: list):
        """加购商品=结算页商品？"""
        assert len(
            added_products) == len(
            checkout_products), f"已加购商品数量{len(added_products)} !=结算页面商品数量 {len(checkout_products)}"

    @staticmethod
    def product_names_match(added_names: list, checkout_names: list):
        """加购商品名称与结算页商品名称一致性对比"""
        for added in added_names:
            assert added in checkout_names, f"inventory加购的商品{added}，在结算页面不存在"

        for name in checkout_names:
            assert name in added_names, f"结算页面的商品{name}，不在inventory加购商品列表中"
