"""
HTTP 账本客户端基类

封装 requests.Session 的请求逻辑。阻塞请求通过 asyncio.to_thread
放到工作线程执行，对外提供 async 接口。
"""

import asyncio
import logging
from typing import Any, Dict, Optional, Type, TypeVar

import requests

from .exceptions import LedgerConnectionError, LedgerQueryError

logger = logging.getLogger(__name__)

ClientT = TypeVar("ClientT", bound="LedgerHttpClient")

DEFAULT_TIMEOUT = 15.0


class LedgerHttpClient:
    """HTTP 账本客户端基类"""

    # 连接探测端点，子类覆盖
    STATUS_ENDPOINT = "status"

    def __init__(self, url: str, timeout: float = DEFAULT_TIMEOUT):
        """
        初始化客户端

        Args:
            url: 节点地址
            timeout: 单次请求超时（秒）
        """
        self.base_url = url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"accept": "application/json"})

    @classmethod
    async def connect(
        cls: Type[ClientT], url: str, timeout: float = DEFAULT_TIMEOUT
    ) -> ClientT:
        """
        建立连接：创建客户端并探测节点状态

        Raises:
            LedgerConnectionError: 节点不可达或状态异常
        """
        client = cls(url, timeout=timeout)
        logger.info(f"正在连接 {client.base_url} ...")
        try:
            status = await asyncio.to_thread(client._make_request, cls.STATUS_ENDPOINT)
        except LedgerQueryError as e:
            client.close()
            raise LedgerConnectionError(url, str(e)) from e
        if status is None:
            client.close()
            raise LedgerConnectionError(url, f"状态端点 {cls.STATUS_ENDPOINT} 不存在")
        logger.info(f"已连接 {client.base_url}")
        return client

    def close(self) -> None:
        self.session.close()

    def _make_request(self, endpoint: str, params: Optional[Dict] = None) -> Any:
        """
        发送 GET 请求的通用方法

        Args:
            endpoint: API 端点
            params: 请求参数

        Returns:
            解析后的 JSON 数据；404 返回 None 表示未找到

        Raises:
            LedgerQueryError: 请求失败或响应不是 JSON
        """
        url = f"{self.base_url}/{endpoint}"

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            if response.status_code == 404:
                return None
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as e:
            logger.warning(f"请求失败 {url}: {e}")
            if getattr(e, "response", None) is not None:
                logger.debug(f"状态码: {e.response.status_code}")
                logger.debug(f"响应内容: {e.response.text}")
            raise LedgerQueryError(f"请求 {url} 失败: {e}") from e
        except ValueError as e:
            raise LedgerQueryError(f"{url} 返回的不是有效 JSON: {e}") from e

    async def _get(self, endpoint: str, params: Optional[Dict] = None) -> Any:
        return await asyncio.to_thread(self._make_request, endpoint, params)
