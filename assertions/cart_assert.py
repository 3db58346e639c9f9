class CartAssert:

    @staticmethod
    def cart_badge_count(actual: int, expect: int):
        """购物车图标显示数字"""
        assert actual == expect, f"购物车角标显示的加购商品数量错误：{actual}!={expect}"

    @staticmethod
    def remove_count(actual: int, expect: int):
        """Remove按钮数量"""
        assert actual == expect, f"页面可Remove的商品不符合预期：{actual}!={expect}"

    @staticmethod
    def cart_empty(is_empty: bool):
        assert is_empty, "购物车应为空"

    @staticmethod
    def names_match(added_names: list, cart_names: list):
        """加购商品名称=购物车页商品名称？（忽略顺序）"""
        assert len(added_names) == len(cart_names), \
            f"已加购商品数量{len(added_names)} !=购物车页面商品数量 {len(cart_names)}"
        assert sorted(added_names) == sorted(cart_names), f"加购商品{added_names}与购物车商品{cart_names}不一致"

