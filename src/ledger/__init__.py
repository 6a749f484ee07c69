"""
账本客户端

引擎把这里的客户端当作不透明的异步能力：connect(url) 加查询操作。
"""

from functools import partial
from typing import Optional

from .base import DEFAULT_TIMEOUT, LedgerHttpClient
from .bns import BnsClient
from .exceptions import LedgerConnectionError, LedgerError, LedgerQueryError
from .lisk import LiskClient, RiseClient
from .models import Account, Amount, ChainAddress, Username


def create_connectors(timeout: Optional[float] = None):
    """
    创建各客户端类型的连接函数

    Args:
        timeout: 请求超时，None 使用默认值

    Returns:
        ClientKind -> connect(url) 映射
    """
    from src.engine.connection_cache import ClientKind

    if timeout is None:
        timeout = DEFAULT_TIMEOUT

    return {
        ClientKind.BNS: partial(BnsClient.connect, timeout=timeout),
        ClientKind.LISK: partial(LiskClient.connect, timeout=timeout),
        ClientKind.RISE: partial(RiseClient.connect, timeout=timeout),
    }


__all__ = [
    "Account",
    "Amount",
    "BnsClient",
    "ChainAddress",
    "LedgerConnectionError",
    "LedgerError",
    "LedgerHttpClient",
    "LedgerQueryError",
    "LiskClient",
    "RiseClient",
    "Username",
    "create_connectors",
]
