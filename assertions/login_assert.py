class LoginAssert:

    @staticmethod
    def error_message(actual_msg: str, expect_msg: str):
        """错误提示必须与预期逐字一致"""
        assert actual_msg == expect_msg, f"登录错误期望提示信息：{expect_msg}，登录错误实际提示信息：{actual_msg}"

    @staticmethod
    def stays_on_login(on_login_page: bool):
        assert on_login_page, "登录失败后应停留在登录页"

    @staticmethod
    def error_hidden(displayed: bool):
        assert not displayed, "关闭后错误提示仍然显示"

    @staticmethod
    def elements_visible(elements: dict):
        """{元素名称: 是否可见}"""
        hidden = [name for name, visible in elements.items() if not visible]
        assert not hidden, f"登录页元素不可见：{hidden}"
