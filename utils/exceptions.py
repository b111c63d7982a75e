class WaitTimeoutError(Exception):
    """
    元素/页面在等待时间内没有达到预期状态
    和 AssertionError 区分开：前者是“页面太慢/没响应”，后者是“页面行为不符合预期”
    """

    def __init__(self, message: str, timeout=None):
        super().__init__(message)
        self.timeout = timeout


class FixtureLookupError(LookupError):
    """测试数据中找不到对应的 key，直接终止当前用例"""

    def __init__(self, key: str, partitions):
        self.key = key
        self.partitions = tuple(partitions)
        super().__init__(f"'{key}' not found in test data partitions: {', '.join(self.partitions)}")


class InvalidTransitionError(ValueError):
    """checkout 流程中不存在的跳转"""
