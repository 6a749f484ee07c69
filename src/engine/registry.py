"""
解析注册表

属性 -> 候选规格列表的静态映射。新增一种解析方式只需要在这里登记，
分派器本身不需要改动。

候选规格分两类：
- ImmediateCandidate: 离线计算，分派时立即执行
- DeferredCandidate: 需要网络查询，分派时按网络目录展开为交互展示，不做 I/O
"""

from dataclasses import dataclass, field
from typing import (
    Awaitable,
    Callable,
    Dict,
    FrozenSet,
    List,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from src.config.networks import (
    IOV_MAINNETS,
    IOV_TESTNETS,
    LISK_NETWORKS,
    RISE_NETWORKS,
    NetworkSettings,
)

from . import interactive, producers
from .connection_cache import ConnectionCache
from .context import DispatchContext
from .displays import InteractiveDisplay, ResolvedDisplay
from .properties import InputProperty

Producer = Callable[
    [str, DispatchContext],
    Awaitable[Union[ResolvedDisplay, Sequence[ResolvedDisplay]]],
]
DeferredFactory = Callable[[str, NetworkSettings, ConnectionCache], InteractiveDisplay]
NetworkFilter = Callable[[NetworkSettings], bool]


@dataclass(frozen=True)
class ImmediateCandidate:
    """
    Attributes:
        name: 候选名称（用于日志）
        producer: async (value, context) -> 展示或展示列表
        requires: 除登记属性外还必须同时具备的属性
    """

    name: str
    producer: Producer
    requires: FrozenSet[InputProperty] = field(default_factory=frozenset)


@dataclass(frozen=True)
class DeferredCandidate:
    """
    Attributes:
        name: 候选名称（用于日志）
        factory: (value, network, cache) -> InteractiveDisplay
        catalog: 要展开的网络目录名
        network_filter: 按网络能力过滤，None 表示全部网络
    """

    name: str
    factory: DeferredFactory
    catalog: str
    network_filter: Optional[NetworkFilter] = None
    requires: FrozenSet[InputProperty] = field(default_factory=frozenset)

    def networks(self, context: DispatchContext) -> List[NetworkSettings]:
        networks = context.catalogs.get(self.catalog, ())
        if self.network_filter is None:
            return list(networks)
        return [network for network in networks if self.network_filter(network)]


CandidateSpec = Union[ImmediateCandidate, DeferredCandidate]
Registry = Dict[InputProperty, Tuple[CandidateSpec, ...]]


def supports_usernames(network: NetworkSettings) -> bool:
    return network.username_supported


def _requires(*properties: InputProperty) -> FrozenSet[InputProperty]:
    return frozenset(properties)


# 登记顺序即同优先级展示的输出顺序
REGISTRY: Registry = {
    InputProperty.IOV_ADDRESS_TESTNET: (
        DeferredCandidate("iov-account", interactive.make_iov_account_display, IOV_TESTNETS),
    ),
    InputProperty.IOV_ADDRESS_MAINNET: (
        DeferredCandidate("iov-account", interactive.make_iov_account_display, IOV_MAINNETS),
    ),
    InputProperty.IOV_USERNAME: (
        DeferredCandidate(
            "iov-username-testnet",
            interactive.make_iov_username_display,
            IOV_TESTNETS,
            network_filter=supports_usernames,
        ),
        DeferredCandidate(
            "iov-username-mainnet",
            interactive.make_iov_username_display,
            IOV_MAINNETS,
            network_filter=supports_usernames,
        ),
    ),
    InputProperty.ENGLISH_MNEMONIC: (
        ImmediateCandidate("bip39-mnemonic", producers.make_bip39_mnemonic_display),
        ImmediateCandidate("hd-wallets", producers.make_hd_wallet_displays),
    ),
    InputProperty.ENGLISH_MNEMONIC_12_WORDS: (
        ImmediateCandidate("lisk-like-passphrase", producers.make_lisk_like_passphrase_display),
    ),
    InputProperty.BECH32: (
        ImmediateCandidate("bech32", producers.make_bech32_display),
    ),
    InputProperty.HEX: (
        ImmediateCandidate(
            "weave-address",
            producers.make_weave_address_display,
            requires=_requires(InputProperty.BYTE_LENGTH_20),
        ),
        ImmediateCandidate(
            "ed25519-pubkey",
            producers.make_ed25519_pubkey_display,
            requires=_requires(InputProperty.BYTE_LENGTH_32),
        ),
        ImmediateCandidate(
            "secp256k1-pubkey-compressed",
            producers.make_secp256k1_pubkey_display,
            requires=_requires(InputProperty.BYTE_LENGTH_33),
        ),
        ImmediateCandidate(
            "secp256k1-pubkey-uncompressed",
            producers.make_secp256k1_pubkey_display,
            requires=_requires(InputProperty.BYTE_LENGTH_65),
        ),
        ImmediateCandidate(
            "ed25519-privkey",
            producers.make_ed25519_privkey_display,
            requires=_requires(InputProperty.BYTE_LENGTH_64),
        ),
        ImmediateCandidate("hex-summary", producers.make_hex_display),
    ),
    InputProperty.ETHEREUM_ADDRESS: (
        ImmediateCandidate("ethereum-address", producers.make_ethereum_address_display),
    ),
    InputProperty.LISK_ADDRESS: (
        DeferredCandidate("lisk-account", interactive.make_lisk_account_display, LISK_NETWORKS),
    ),
    InputProperty.RISE_ADDRESS: (
        DeferredCandidate("rise-account", interactive.make_rise_account_display, RISE_NETWORKS),
    ),
}
