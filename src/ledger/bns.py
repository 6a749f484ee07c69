"""
BNS（IOV 名称服务）客户端

通过 bnsapi REST 网关查询账户余额与用户名：
    GET info                              节点状态
    GET cash/balances?address=<addr>      账户余额
    GET account/accounts?name=<name>      按名称查账户
    GET username/owner/<addr>             某地址拥有的用户名
    GET username/resolve/<username>       解析用户名
"""

import logging
from typing import Any, Dict, List, Optional

from .base import LedgerHttpClient
from .exceptions import LedgerQueryError
from .models import Account, Amount, ChainAddress, Username

logger = logging.getLogger(__name__)

# weave 代币固定 9 位小数
WEAVE_FRACTIONAL_DIGITS = 9


def _parse_coin(coin: Dict[str, Any]) -> Amount:
    whole = int(coin.get("whole", 0))
    fractional = int(coin.get("fractional", 0))
    return Amount(
        quantity=whole * 10**WEAVE_FRACTIONAL_DIGITS + fractional,
        fractional_digits=WEAVE_FRACTIONAL_DIGITS,
        ticker=coin["ticker"],
    )


def _parse_username(obj: Dict[str, Any]) -> Username:
    targets = [
        ChainAddress(chain_id=target["blockchain_id"], address=target["address"])
        for target in obj.get("targets") or []
    ]
    return Username(id=obj["username"], owner=obj["owner"], targets=targets)


class BnsClient(LedgerHttpClient):
    """BNS 账本客户端"""

    STATUS_ENDPOINT = "info"

    async def get_account(
        self, address: Optional[str] = None, name: Optional[str] = None
    ) -> Optional[Account]:
        """
        查询账户

        Args:
            address: 账户地址
            name: 账户名称（与 address 二选一）

        Returns:
            Account，未找到返回 None
        """
        if (address is None) == (name is None):
            raise ValueError("address 与 name 必须且只能提供一个")

        if address is not None:
            response = await self._get("cash/balances", {"address": address})
        else:
            response = await self._get("account/accounts", {"name": name})

        objects = (response or {}).get("objects") or []
        if not objects:
            return None

        obj = objects[0]
        try:
            return Account(
                address=obj["address"],
                balance=[_parse_coin(coin) for coin in obj.get("coins") or []],
                pubkey=obj.get("pubkey"),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise LedgerQueryError(f"账户数据格式错误: {e}") from e

    async def get_usernames(
        self, owner: Optional[str] = None, username: Optional[str] = None
    ) -> List[Username]:
        """
        查询用户名

        Args:
            owner: 按所有者地址查询
            username: 按用户名解析（与 owner 二选一）

        Returns:
            用户名列表，未找到时为空列表
        """
        if (owner is None) == (username is None):
            raise ValueError("owner 与 username 必须且只能提供一个")

        if owner is not None:
            response = await self._get(f"username/owner/{owner}")
        else:
            response = await self._get(f"username/resolve/{username}")

        if not response:
            return []

        objects = response.get("objects")
        if objects is None:
            # resolve 端点直接返回单个对象
            objects = [response]

        try:
            return [_parse_username(obj) for obj in objects]
        except (KeyError, TypeError) as e:
            raise LedgerQueryError(f"用户名数据格式错误: {e}") from e
