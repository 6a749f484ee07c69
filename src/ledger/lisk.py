"""
Lisk 与 RISE 客户端

两者使用兼容的 Core REST API：
    GET api/node/status                 节点状态
    GET api/accounts?address=<addr>     账户信息
"""

import logging
from typing import Optional

from .base import LedgerHttpClient
from .exceptions import LedgerQueryError
from .models import Account, Amount

logger = logging.getLogger(__name__)


class LiskClient(LedgerHttpClient):
    """Lisk 账本客户端"""

    STATUS_ENDPOINT = "api/node/status"
    TICKER = "LSK"
    FRACTIONAL_DIGITS = 8

    async def get_account(self, address: str) -> Optional[Account]:
        """
        查询账户

        Returns:
            Account，未找到返回 None
        """
        response = await self._get("api/accounts", {"address": address})
        data = (response or {}).get("data") or []
        if not data:
            return None

        obj = data[0]
        try:
            balance = Amount(
                quantity=int(obj.get("balance", 0)),
                fractional_digits=self.FRACTIONAL_DIGITS,
                ticker=self.TICKER,
            )
            return Account(
                address=obj["address"],
                balance=[balance],
                pubkey=obj.get("publicKey") or None,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise LedgerQueryError(f"账户数据格式错误: {e}") from e


class RiseClient(LiskClient):
    """RISE 账本客户端"""

    TICKER = "RISE"
