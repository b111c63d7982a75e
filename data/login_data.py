"""login功能测试用例：登录错误提示信息（必须与页面逐字一致）
测试正常登录流程
用户被锁定
用户名/密码错误
用户名为空、密码为空、都为空
"""

LOGIN_ERROR_MESSAGES = {
    "locked_out": "Epic sadface: Sorry, this user has been locked out.",
    "invalid_credentials": "Epic sadface: Username and password do not match any user in this service",
    "username_required": "Epic sadface: Username is required",
    "password_required": "Epic sadface: Password is required",
}

# 失败场景：测试数据 key -> 预期错误提示
LOGIN_FAIL_CASES = {
    "lockedOut": LOGIN_ERROR_MESSAGES["locked_out"],
    "invalidCredentials": LOGIN_ERROR_MESSAGES["invalid_credentials"],
    "wrongPassword": LOGIN_ERROR_MESSAGES["invalid_credentials"],
    "emptyUsername": LOGIN_ERROR_MESSAGES["username_required"],
    "emptyPassword": LOGIN_ERROR_MESSAGES["password_required"],
    "emptyBoth": LOGIN_ERROR_MESSAGES["username_required"],
}

# 登录成功后应看到的页面标题
LOGIN_SUCCESS_TITLE = "Products"

# 访问受保护页面被拦截时的提示（页面路径会拼到提示中）
PROTECTED_PAGE_ERROR = "Epic sadface: You can only access '{path}' when you are logged in."


def expected_login_error(username: str, password: str):
    """
    空字段校验顺序（被测系统的行为）：username 优先于 password
    两个都填写时返回 None，由服务端判断账号密码
    """
    if not username:
        return LOGIN_ERROR_MESSAGES["username_required"]
    if not password:
        return LOGIN_ERROR_MESSAGES["password_required"]
    return None
