"""分派上下文：一次解析所需的外部数据与共享服务"""

from dataclasses import dataclass
from typing import Optional, Sequence

from src.config.networks import HD_COINS, HdCoin, NetworkCatalogs, build_catalogs
from src.config.settings import ExplorerConfig, get_config

from .connection_cache import ConnectionCache, default_connection_cache


@dataclass(frozen=True)
class DispatchContext:
    """
    Attributes:
        catalogs: 网络目录（只读）
        hd_coins: HD 钱包币种
        cache: 连接缓存
        hd_address_count: 每个 HD 钱包展示的地址数
    """

    catalogs: NetworkCatalogs
    hd_coins: Sequence[HdCoin]
    cache: ConnectionCache
    hd_address_count: int = 5


def create_dispatch_context(
    config: Optional[ExplorerConfig] = None,
    cache: Optional[ConnectionCache] = None,
    catalogs: Optional[NetworkCatalogs] = None,
) -> DispatchContext:
    """
    创建分派上下文

    Args:
        config: 运行配置，默认读取环境变量
        cache: 连接缓存，默认使用进程级实例
        catalogs: 网络目录，默认按配置构建

    Returns:
        DispatchContext 实例
    """
    if config is None:
        config = get_config()
    return DispatchContext(
        catalogs=catalogs if catalogs is not None else build_catalogs(config),
        hd_coins=HD_COINS,
        cache=cache if cache is not None else default_connection_cache(),
        hd_address_count=config.hd_address_count,
    )
