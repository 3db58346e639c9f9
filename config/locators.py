BASE_LOCATORS = {
    "menu_button": "#react-burger-menu-btn",  # 左上角菜单按钮
    "logout_link": "#logout_sidebar_link",  # 菜单中的Logout
    "shopping_cart_badge": "[data-test='shopping-cart-badge']",  # 购物车显示商品数量
    "shopping_cart_link": "[data-test='shopping-cart-link']",  # 购物车icon
    "page_title": "[data-test='title']",  # 页面标题 Products / Your Cart / Checkout: ...
}

LOGIN_LOCATORS = {
    "username_input": "[data-test='username']",  # 用户名
    "password_input": "[data-test='password']",  # 用户密码
    "login_button": "[data-test='login-button']",  # 登录按钮
    "error_msg": "[data-test='error']",  # 登录错误提示信息
    "login_logo": ".login_logo",  # Swag Labs logo
    "login_credentials": "#login_credentials",  # 页面下方可用用户名提示
}

INVENTORY_LOCATORS = {
    "item_product": "[data-test='inventory-item']",  # 商品列表
    "item_product_name": "[data-test='inventory-item-name']",  # 单商品名称
    "item_product_price": "[data-test='inventory-item-price']",  # 单商品价格
    "item_product_desc": "[data-test='inventory-item-desc']",  # 单商品描述
    "item_product_img": ".inventory_item_img img",  # 单商品图片
    "product_sort_type": "[data-test='product-sort-container']",  # 商品排序方式
    "add_product_button": "[data-test^='add-to-cart']",  # 商品添加按钮
    "remove_product_button": "[data-test^='remove']",  # 已添加商品按钮变为“Remove”
}

CART_LOCATORS = {
    "cart_list": "[data-test='cart-list']",  # 购物车列表容器
    "cart_item": ".cart_item",  # 购物车单行商品
    "item_product_name": "[data-test='inventory-item-name']",  # 单商品名称
    "item_product_price": "[data-test='inventory-item-price']",  # 单商品价格
    "item_quantity": "[data-test='item-quantity']",  # 单商品数量
    "remove_product_button": "[data-test^='remove']",  # remove按钮
    "continue": "[data-test='continue-shopping']",  # 继续购物按钮
    "checkout_button": "[data-test='checkout']",  # 结算按钮
}

CHECKOUT_LOCATORS = {
    # --------checkout-step-one.html---------
    "firstName_input": "[data-test='firstName']",  # firstName输入框
    "lastName_input": "[data-test='lastName']",  # lastName输入框
    "postalCode_input": "[data-test='postalCode']",  # postalCode输入框
    "container_error_msg": "[data-test='error']",  # 未填写收货人信息提交错误提示msg Error: First Name is required
    "step_one_cancel_button": "[data-test='cancel']",  # 取消按钮
    "continue_button": "[data-test='continue']",  # 继续按钮

    # --------checkout-step-two.html---------
    # 商品信息
    "item_list": ".cart_item",  # 订单确认页面商品列表
    "item_product_name": "[data-test='inventory-item-name']",  # 单商品名称
    "item_product_price": "[data-test='inventory-item-price']",  # 单商品价格
    "item_quantity": "[data-test='item-quantity']",  # 单商品数量
    # 订单价格
    "payment_information": "[data-test='payment-info-value']",  # 支付信息value
    "shipping_information": "[data-test='shipping-info-value']",  # 运费信息value
    "products_price": "[data-test='subtotal-label']",  # 商品价格
    "tax_price": "[data-test='tax-label']",  # 税费
    "order_price": "[data-test='total-label']",  # 订单价格
    # 操作步骤
    "step_two_cancel_button": "[data-test='cancel']",  # 取消按钮
    "finish_button": "[data-test='finish']",  # 完成按钮

    # --------checkout-complete.html---------
    "finish_page_message": "[data-test='complete-header']",  # 完成页面提示信息
    "finish_page_text": "[data-test='complete-text']",  # 完成页面描述
    "back_home_button": "[data-test='back-to-products']",  # 返回商品列表
}
