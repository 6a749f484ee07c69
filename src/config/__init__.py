"""
配置模块

- settings: 环境变量驱动的运行参数
- networks: 静态网络目录与 HD 币种
"""

from .networks import (
    HD_COINS,
    IOV_MAINNETS,
    IOV_TESTNETS,
    LISK_NETWORKS,
    RISE_NETWORKS,
    HdCoin,
    NetworkCatalogs,
    NetworkSettings,
    build_catalogs,
)
from .settings import ExplorerConfig, get_config, load_config

__all__ = [
    "ExplorerConfig",
    "HD_COINS",
    "HdCoin",
    "IOV_MAINNETS",
    "IOV_TESTNETS",
    "LISK_NETWORKS",
    "NetworkCatalogs",
    "NetworkSettings",
    "RISE_NETWORKS",
    "build_catalogs",
    "get_config",
    "load_config",
]
