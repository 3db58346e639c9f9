"""login功能测试用例：测试数据、登录错误提示信息
测试正常登录流程
锁定用户
用户名错误
密码错误
用户名和密码都为空
用户名为空
密码为空
"""
from data.models import UserCredential

USERS = {
    "standard": UserCredential("standard_user", "secret_sauce"),
    "locked_out": UserCredential("locked_out_user", "secret_sauce"),
    "problem": UserCredential("problem_user", "secret_sauce"),
    "performance_glitch": UserCredential("performance_glitch_user", "secret_sauce"),
    "invalid": UserCredential("invalid_user", "wrong_password"),
}

LOGIN_ERROR_MESSAGES = {
    "locked_out_user": "Epic sadface: Sorry, this user has been locked out.",
    "missing_username": "Epic sadface: Username is required",
    "missing_password": "Epic sadface: Password is required",
    "invalid_credentials": "Epic sadface: Username and password do not match any user in this service",
}

# 参数化失败场景：用户名、密码、期望错误提示（校验顺序 username > password）
LOGIN_FAIL_CASES = {
    "locked_out_user": {"username": "locked_out_user", "password": "secret_sauce",
                        "error_msg": LOGIN_ERROR_MESSAGES["locked_out_user"]},
    "wrong_username": {"username": "HAHAHA", "password": "secret_sauce",
                       "error_msg": LOGIN_ERROR_MESSAGES["invalid_credentials"]},
    "wrong_password": {"username": "standard_user", "password": "12345",
                       "error_msg": LOGIN_ERROR_MESSAGES["invalid_credentials"]},
    "empty_username_password": {"username": "", "password": "",
                                "error_msg": LOGIN_ERROR_MESSAGES["missing_username"]},
    "empty_username": {"username": "", "password": "secret_sauce",
                       "error_msg": LOGIN_ERROR_MESSAGES["missing_username"]},
    "empty_password": {"username": "standard_user", "password": "",
                       "error_msg": LOGIN_ERROR_MESSAGES["missing_password"]},
}

# 登录页面提示的全部可用用户名
ACCEPTED_USERNAMES = [
    "standard_user",
    "locked_out_user",
    "problem_user",
    "performance_glitch_user",
    "error_user",
    "visual_user",
]

# 登录+商品列表加载的可接受耗时（秒）
LOGIN_LOAD_BUDGET_SECONDS = 10
