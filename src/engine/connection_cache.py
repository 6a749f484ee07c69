"""
连接缓存

按 (客户端类型, URL) 去重并记忆异步连接建立过程。

- 首次请求某个键时立即创建连接任务并写入缓存（在任何 await 之前），
  并发请求同一个键的调用方等待的是同一个任务，只会发生一次连接尝试
- 成功或失败都永久缓存：失败的连接在进程生命周期内不会自动重试
- 条目只增不减，不做淘汰

缓存是显式构造的服务对象，测试可以注入独立实例；
进程级默认实例通过 default_connection_cache() 惰性创建。
"""

import asyncio
import logging
from collections import Counter
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


class ClientKind(Enum):
    """客户端类型；不同链族的连接句柄互不兼容，即使 URL 相同也分开缓存"""

    BNS = "bns"
    LISK = "lisk"
    RISE = "rise"


Connector = Callable[[str], Awaitable[Any]]
CacheKey = Tuple[ClientKind, str]


class ConnectionCache:
    """连接缓存"""

    def __init__(self, connectors: Mapping[ClientKind, Connector]):
        """
        初始化连接缓存

        Args:
            connectors: 客户端类型 -> connect(url) 异步函数
        """
        self._connectors: Dict[ClientKind, Connector] = dict(connectors)
        self._connections: Dict[CacheKey, "asyncio.Future[Any]"] = {}
        self.connect_attempts: Counter = Counter()

    def __len__(self) -> int:
        return len(self._connections)

    def __contains__(self, key: object) -> bool:
        return key in self._connections

    def get_or_connect(self, client_kind: ClientKind, url: str) -> "asyncio.Future[Any]":
        """
        获取（或发起）某个端点的连接

        检查与写入在同一个同步步骤内完成，中间没有挂起点。
        必须在运行中的事件循环里调用。

        Args:
            client_kind: 客户端类型
            url: 端点地址

        Returns:
            连接任务，await 得到连接句柄或连接失败的异常
        """
        key = (client_kind, url)
        pending = self._connections.get(key)
        if pending is not None:
            return pending

        connector = self._connectors.get(client_kind)
        if connector is None:
            raise KeyError(f"未注册的客户端类型: {client_kind}")

        logger.debug(f"创建连接 {client_kind.value} {url}")
        pending = asyncio.ensure_future(connector(url))
        pending.add_done_callback(lambda task: self._log_outcome(key, task))
        self._connections[key] = pending
        self.connect_attempts[key] += 1
        return pending

    async def connect(self, client_kind: ClientKind, url: str) -> Any:
        """
        等待连接句柄

        用 shield 包裹，调用方被取消时不会连带取消共享的连接任务。
        """
        return await asyncio.shield(self.get_or_connect(client_kind, url))

    @staticmethod
    def _log_outcome(key: CacheKey, task: "asyncio.Future[Any]") -> None:
        client_kind, url = key
        if task.cancelled():
            logger.warning(f"连接 {client_kind.value} {url} 被取消")
            return
        error = task.exception()
        if error is not None:
            logger.error(f"连接 {client_kind.value} {url} 失败（不会重试）: {error}")
        else:
            logger.info(f"连接 {client_kind.value} {url} 已建立")


_DEFAULT_CACHE: Optional[ConnectionCache] = None


def default_connection_cache() -> ConnectionCache:
    """进程级默认连接缓存，首次调用时创建"""
    global _DEFAULT_CACHE
    if _DEFAULT_CACHE is None:
        from src.config.settings import get_config
        from src.ledger import create_connectors

        _DEFAULT_CACHE = ConnectionCache(create_connectors(get_config().http_timeout))
    return _DEFAULT_CACHE
