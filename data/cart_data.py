"""cart功能测试数据：加购/删除商品数量"""

ADD_PRODUCT_COUNT = 3  # inventory页面加购商品数量
DELETE_PRODUCT_COUNT = 2  # 删除商品数量
FIRST_PRODUCT_COUNT = 1  # 第一次加购数量
SECOND_PRODUCT_COUNT = 2  # 继续购物后第二次加购数量

MULTIPLE_PRODUCT_INDICES = [0, 2, 4]  # 按列表下标加购多个商品
