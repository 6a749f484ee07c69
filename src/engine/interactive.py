"""
延迟候选构造函数

每个函数签名为 (value, network, cache) -> InteractiveDisplay，只构造描述对象
并捕获 fetch/render 闭包，不做任何 I/O。真正的网络访问发生在 resolve() 时，
连接通过连接缓存获取。
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from src.config.networks import NetworkSettings
from src.ledger.models import Account, Username

from .connection_cache import ClientKind, ConnectionCache
from .displays import InteractiveDisplay
from .priorities import Priorities

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IovAccountResult:
    """IOV 账户查询结果：账户本身及其拥有的用户名"""

    account: Account
    names: List[Username]


def _account_data(account: Account) -> Dict[str, Any]:
    return {
        "address": account.address,
        "pubkey": account.pubkey,
        "balance": [str(amount) for amount in account.balance],
    }


def make_iov_account_display(
    value: str, network: NetworkSettings, cache: ConnectionCache
) -> "InteractiveDisplay[IovAccountResult]":
    async def fetch() -> Optional[IovAccountResult]:
        connection = await cache.connect(ClientKind.BNS, network.url)
        account = await connection.get_account(address=value)
        if account is None:
            return None
        names: List[Username] = []
        if network.username_supported:
            names = await connection.get_usernames(owner=account.address)
        return IovAccountResult(account=account, names=names)

    def render(result: IovAccountResult) -> Dict[str, Any]:
        data = _account_data(result.account)
        data["names"] = [name.id for name in result.names]
        return data

    return InteractiveDisplay(
        id=f"{value}#{network.name}-bns-account",
        priority=Priorities.BNS_ACCOUNT,
        interpreted_as=f"Account on {network.name}",
        fetch=fetch,
        render=render,
    )


def make_iov_username_display(
    value: str, network: NetworkSettings, cache: ConnectionCache
) -> "InteractiveDisplay[Username]":
    async def fetch() -> Optional[Username]:
        connection = await cache.connect(ClientKind.BNS, network.url)
        usernames = await connection.get_usernames(username=value)
        return usernames[0] if usernames else None

    def render(username: Username) -> Dict[str, Any]:
        return {
            "name": username.id,
            "owner": username.owner,
            "addresses": [
                {"chain_id": target.chain_id, "address": target.address}
                for target in username.targets
            ],
        }

    return InteractiveDisplay(
        id=f"{value}#{network.name}-username",
        priority=Priorities.BNS_USERNAME,
        interpreted_as=f"Username on {network.name}",
        fetch=fetch,
        render=render,
    )


def _make_lisk_like_account_display(
    value: str,
    network: NetworkSettings,
    cache: ConnectionCache,
    client_kind: ClientKind,
    id_suffix: str,
    priority: int,
) -> "InteractiveDisplay[Account]":
    async def fetch() -> Optional[Account]:
        connection = await cache.connect(client_kind, network.url)
        return await connection.get_account(value)

    return InteractiveDisplay(
        id=f"{value}#{network.name}-{id_suffix}",
        priority=priority,
        interpreted_as=f"Account on {network.name}",
        fetch=fetch,
        render=_account_data,
    )


def make_lisk_account_display(
    value: str, network: NetworkSettings, cache: ConnectionCache
) -> "InteractiveDisplay[Account]":
    return _make_lisk_like_account_display(
        value, network, cache, ClientKind.LISK, "lisk-account", Priorities.LISK_ACCOUNT
    )


def make_rise_account_display(
    value: str, network: NetworkSettings, cache: ConnectionCache
) -> "InteractiveDisplay[Account]":
    return _make_lisk_like_account_display(
        value, network, cache, ClientKind.RISE, "rise-account", Priorities.RISE_ACCOUNT
    )
