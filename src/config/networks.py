"""
网络目录

每个链族一个静态网络列表，以及用于 HD 钱包展示的币种列表。
引擎只读取这些数据，不负责维护。
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from src.codec.addresses import (
    IOV_TESTNET_PREFIX,
    ethereum_address,
    iov_address,
    lisk_address,
    rise_address,
)
from .settings import ExplorerConfig, get_config

# 目录名称
IOV_TESTNETS = "iov-testnets"
IOV_MAINNETS = "iov-mainnets"
LISK_NETWORKS = "lisk-networks"
RISE_NETWORKS = "rise-networks"

ED25519 = "ed25519"
SECP256K1 = "secp256k1"


@dataclass(frozen=True)
class NetworkSettings:
    """单个网络的配置"""

    name: str
    url: str
    # 是否支持用户名（BNS username NFT）查询
    username_supported: bool = False


@dataclass(frozen=True)
class HdCoin:
    """HD 钱包币种定义（SLIP-44 编号）"""

    name: str
    number: int
    curve: str
    address_codec: Callable[[bytes], str]


NetworkCatalogs = Dict[str, Tuple[NetworkSettings, ...]]

# (目录, 网络名, 默认 URL, 覆盖用环境变量, 是否支持用户名)
_DEFAULT_NETWORKS = (
    (IOV_TESTNETS, "Yaknet (bnsd)", "https://bns.yaknet.iov.one", "IOV_TESTNET_BNS_URL", True),
    (IOV_TESTNETS, "Yaknet (bcpd)", "https://bov.yaknet.iov.one", "IOV_TESTNET_BCP_URL", False),
    (IOV_MAINNETS, "IOV Mainnet", "https://bns.mainnet.iov.one", "IOV_MAINNET_BNS_URL", True),
    (LISK_NETWORKS, "Lisk Testnet", "https://testnet.lisk.io", "LISK_TESTNET_URL", False),
    (LISK_NETWORKS, "Lisk Mainnet", "https://hub32.lisk.io", "LISK_MAINNET_URL", False),
    (RISE_NETWORKS, "RISE Testnet", "https://twallet.rise.vision", "RISE_TESTNET_URL", False),
    (RISE_NETWORKS, "RISE Mainnet", "https://wallet.rise.vision", "RISE_MAINNET_URL", False),
)


def build_catalogs(config: Optional[ExplorerConfig] = None) -> NetworkCatalogs:
    """
    构建网络目录，应用环境变量中的 URL 覆盖

    Returns:
        目录名 -> 有序网络列表
    """
    if config is None:
        config = get_config()

    catalogs: Dict[str, list] = {
        IOV_TESTNETS: [],
        IOV_MAINNETS: [],
        LISK_NETWORKS: [],
        RISE_NETWORKS: [],
    }
    for catalog, name, url, env_key, username_supported in _DEFAULT_NETWORKS:
        catalogs[catalog].append(
            NetworkSettings(
                name=name,
                url=config.url_for(env_key, url),
                username_supported=username_supported,
            )
        )

    return {catalog: tuple(networks) for catalog, networks in catalogs.items()}


def _iov_testnet_address(pubkey: bytes) -> str:
    # 任何测试网都使用 tiov 前缀
    return iov_address(pubkey, IOV_TESTNET_PREFIX)


HD_COINS: Tuple[HdCoin, ...] = (
    HdCoin(name="IOV", number=234, curve=ED25519, address_codec=_iov_testnet_address),
    HdCoin(name="Lisk", number=134, curve=ED25519, address_codec=lisk_address),
    HdCoin(name="RISE", number=1120, curve=ED25519, address_codec=rise_address),
    HdCoin(name="Ethereum", number=60, curve=SECP256K1, address_codec=ethereum_address),
)
