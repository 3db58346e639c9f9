class LoginAssert:

    @staticmethod
    def error_message(actual_msg: str, expect_msg: str):
        assert actual_msg == expect_msg, f"登录错误期望提示信息：{expect_msg}，登录错误实际提示信息：{actual_msg}"

    @staticmethod
    def error_displayed(displayed: bool):
        assert displayed, "登录失败后未显示错误提示"

    @staticmethod
    def stay_on_login_page(login_page_displayed: bool, current_url: str):
        """校验失败后仍停留在登录页"""
        assert login_page_displayed, f"登录按钮不可见，已离开登录页：{current_url}"
        assert "inventory" not in current_url, f"登录失败却跳转到了商品列表：{current_url}"

    @staticmethod
    def usernames_listed(actual: list[str], expect: list[str]):
        for username in expect:
            assert username in actual, f"登录页未提示用户名{username}：{actual}"
