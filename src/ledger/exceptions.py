"""账本客户端异常定义"""


class LedgerError(Exception):
    """账本客户端错误基类"""


class LedgerConnectionError(LedgerError):
    """建立节点连接失败"""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"无法连接到 {url}: {reason}")


class LedgerQueryError(LedgerError):
    """查询失败（网络错误、非预期状态码或响应格式错误）"""
