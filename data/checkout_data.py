"""checkout功能测试数据：收货人信息、校验错误提示、税率、完成页文案"""
from decimal import Decimal

from data.models import CheckoutInformation

CHECKOUT_INFORMATION = {
    "valid": CheckoutInformation("John", "Doe", "12345"),
    "incomplete": CheckoutInformation("Jane", "", "67890"),
    "empty": CheckoutInformation("", "", ""),
}

CHECKOUT_ERROR_MESSAGES = {
    "first_name": "Error: First Name is required",
    "last_name": "Error: Last Name is required",
    "postal_code": "Error: Postal Code is required",
}

TAX_RATE = Decimal("0.08")

ADD_PRODUCT_NUM = 2

FINISH_PAGE_MESSAGE = "Thank you for your order!"
