"""
即时候选生成函数

全部为 async def (value, context)，返回一个或多个 ResolvedDisplay。
只做离线计算；失败时直接抛异常，由分派器隔离。
CPU 较重的派生（PBKDF2、HD 派生）放到工作线程执行。
"""

import asyncio
import logging
from typing import Any, Dict, List

from src.codec import (
    IOV_MAINNET_PREFIX,
    IOV_TESTNET_PREFIX,
    decode_bech32,
    derive_ed25519_private_key,
    derive_secp256k1_private_key,
    ed25519_pubkey,
    ethereum_address,
    format_path,
    from_hex,
    hardened,
    iov_address,
    lisk_address,
    mnemonic_to_entropy,
    mnemonic_to_seed,
    passphrase_to_ed25519_pubkey,
    rise_address,
    secp256k1_pubkey,
    to_checksummed_address,
    to_hex,
    weave_address_to_bech32,
)
from src.config.networks import ED25519, HdCoin

from .context import DispatchContext
from .displays import ResolvedDisplay
from .exceptions import UnsupportedFormatError
from .priorities import Priorities

logger = logging.getLogger(__name__)

# 熵位数 -> 词数
ENTROPY_BITS_TO_WORDS = {128: 12, 160: 15, 192: 18, 224: 21, 256: 24}

# IOV simple address 钱包的第一级路径
SIMPLE_ADDRESS_PURPOSE = 4804438

ETHERSCAN_URLS = {
    "Ropsten": "https://ropsten.etherscan.io/address/",
    "Rinkeby": "https://rinkeby.etherscan.io/address/",
    "Mainnet": "https://etherscan.io/address/",
}


async def make_hex_display(value: str, context: DispatchContext) -> ResolvedDisplay:
    data = from_hex(value)
    return ResolvedDisplay(
        id=f"{value}#hex-summary",
        priority=Priorities.HEX,
        interpreted_as="Hex data summary",
        data={
            "length": len(data),
            "lower": value.lower(),
            "upper": value.upper(),
        },
    )


async def make_bech32_display(value: str, context: DispatchContext) -> ResolvedDisplay:
    prefix, data = decode_bech32(value)
    return ResolvedDisplay(
        id=f"{value}#bech32",
        priority=Priorities.BECH32,
        interpreted_as="Bech32 address",
        data={"prefix": prefix, "data": to_hex(data)},
    )


async def make_weave_address_display(
    value: str, context: DispatchContext
) -> ResolvedDisplay:
    data = from_hex(value)
    return ResolvedDisplay(
        id=f"{value}#weave-address",
        priority=Priorities.WEAVE_ADDRESS,
        interpreted_as="Weave address",
        data={
            "iov_test": weave_address_to_bech32(data, IOV_TESTNET_PREFIX),
            "iov_main": weave_address_to_bech32(data, IOV_MAINNET_PREFIX),
        },
    )


async def make_ed25519_pubkey_display(
    value: str, context: DispatchContext
) -> ResolvedDisplay:
    pubkey = from_hex(value)
    return ResolvedDisplay(
        id=f"{value}#ed25519-pubkey",
        priority=Priorities.ED25519_PUBKEY,
        interpreted_as="Ed25519 public key",
        data={
            "iov_main": iov_address(pubkey, IOV_MAINNET_PREFIX),
            "iov_test": iov_address(pubkey, IOV_TESTNET_PREFIX),
            "lisk": lisk_address(pubkey),
            "rise": rise_address(pubkey),
        },
    )


async def make_secp256k1_pubkey_display(
    value: str, context: DispatchContext
) -> ResolvedDisplay:
    pubkey = from_hex(value)
    return ResolvedDisplay(
        id=f"{value}#secp256k1-pubkey",
        priority=Priorities.SECP256K1_PUBKEY,
        interpreted_as="Secp256k1 public key",
        data={"ethereum": ethereum_address(pubkey)},
    )


async def make_ed25519_privkey_display(
    value: str, context: DispatchContext
) -> ResolvedDisplay:
    """libsodium 格式私钥：32 字节种子 + 32 字节公钥"""
    raw = from_hex(value)
    seed, pubkey = raw[:32], raw[32:]
    return ResolvedDisplay(
        id=f"{value}#ed25519-privkey",
        priority=Priorities.ED25519_PRIVKEY,
        interpreted_as="Ed25519 private key (libsodium format)",
        data={
            "seed": to_hex(seed),
            "pubkey": to_hex(pubkey),
            # 公钥部分是否与种子推导结果一致
            "consistent": ed25519_pubkey(seed) == pubkey,
        },
    )


async def make_ethereum_address_display(
    value: str, context: DispatchContext
) -> ResolvedDisplay:
    checksummed = to_checksummed_address(value)
    body = value[2:]
    # 全大写或全小写视为未使用校验
    checksum_valid = value == checksummed or body == body.lower() or body == body.upper()
    return ResolvedDisplay(
        id=f"{value}#ethereum-address",
        priority=Priorities.ETHEREUM_ADDRESS,
        interpreted_as="Ethereum address",
        data={
            "lower": value.lower(),
            "checksummed": checksummed,
            "checksum_valid": checksum_valid,
            "explorers": {
                name: base_url + checksummed for name, base_url in ETHERSCAN_URLS.items()
            },
        },
    )


async def make_bip39_mnemonic_display(
    value: str, context: DispatchContext
) -> ResolvedDisplay:
    """
    BIP39 助记词摘要

    Raises:
        CodecError: 校验和错误
        UnsupportedFormatError: 熵长度不在 BIP39 规定范围内
    """
    entropy = mnemonic_to_entropy(value)
    entropy_bits = len(entropy) * 8
    word_count = ENTROPY_BITS_TO_WORDS.get(entropy_bits)
    if word_count is None:
        raise UnsupportedFormatError(f"不支持的熵长度: {entropy_bits} 位")

    return ResolvedDisplay(
        id=f"{value}#bip39-english-mnemonic",
        priority=Priorities.BIP39_MNEMONIC,
        interpreted_as="Bip39 english mnemonic",
        data={
            "words": word_count,
            "entropy_bits": entropy_bits,
            "entropy": to_hex(entropy),
        },
    )


async def make_lisk_like_passphrase_display(
    value: str, context: DispatchContext
) -> ResolvedDisplay:
    pubkey = await asyncio.to_thread(passphrase_to_ed25519_pubkey, value)
    return ResolvedDisplay(
        id=f"{value}#lisk-like-passphrase",
        priority=Priorities.LISK_LIKE_PASSPHRASE,
        interpreted_as="Lisk-like passphrase",
        data={"lisk": lisk_address(pubkey), "rise": rise_address(pubkey)},
    )


def _hd_path(coin: HdCoin, index: int) -> List[int]:
    if coin.curve == ED25519:
        return [hardened(44), hardened(coin.number), hardened(index)]
    return [hardened(44), hardened(coin.number), hardened(0), 0, index]


def _derive_hd_addresses(seed: bytes, coin: HdCoin, count: int) -> List[Dict[str, Any]]:
    addresses = []
    for index in range(count):
        path = _hd_path(coin, index)
        if coin.curve == ED25519:
            pubkey = ed25519_pubkey(derive_ed25519_private_key(seed, path))
        else:
            pubkey = secp256k1_pubkey(derive_secp256k1_private_key(seed, path))
        addresses.append(
            {
                "path": format_path(path),
                "address": coin.address_codec(pubkey),
                "algorithm": coin.curve,
                "pubkey": to_hex(pubkey),
            }
        )
    return addresses


def _derive_simple_addresses(seed: bytes, count: int) -> List[Dict[str, Any]]:
    addresses = []
    for index in range(count):
        path = [hardened(SIMPLE_ADDRESS_PURPOSE), hardened(index)]
        pubkey = ed25519_pubkey(derive_ed25519_private_key(seed, path))
        addresses.append(
            {
                "path": format_path(path),
                "address": iov_address(pubkey, IOV_TESTNET_PREFIX),
                "algorithm": ED25519,
                "pubkey": to_hex(pubkey),
            }
        )
    return addresses


async def _simple_address_display(
    value: str, seed: bytes, context: DispatchContext
) -> ResolvedDisplay:
    """IOV 早期的 simple address 派生方式，已废弃，仅供找回旧地址"""
    addresses = await asyncio.to_thread(
        _derive_simple_addresses, seed, context.hd_address_count
    )
    return ResolvedDisplay(
        id=f"{value}#hd-wallet-simple-address",
        priority=Priorities.HD_ADDRESSES,
        interpreted_as="Simple Address HD Wallet",
        data={"coin": "IOV", "addresses": addresses},
        deprecated=True,
    )


async def _coin_wallet_display(
    value: str, seed: bytes, coin: HdCoin, context: DispatchContext
) -> ResolvedDisplay:
    addresses = await asyncio.to_thread(
        _derive_hd_addresses, seed, coin, context.hd_address_count
    )
    return ResolvedDisplay(
        id=f"{value}#hd-wallet-coin{coin.number}",
        priority=Priorities.HD_ADDRESSES,
        interpreted_as=f"{coin.name} HD Wallet",
        data={"coin": coin.name, "addresses": addresses},
    )


async def make_hd_wallet_displays(
    value: str, context: DispatchContext
) -> List[ResolvedDisplay]:
    """
    助记词对应的全部 HD 钱包

    种子只计算一次，依次生成 simple address 钱包和每个 HD 币种的钱包。
    单个钱包派生失败只跳过该钱包。

    Raises:
        CodecError: 助记词校验和错误（此时没有任何钱包可生成）
    """
    seed = await asyncio.to_thread(mnemonic_to_seed, value)

    wallets = [("simple-address", _simple_address_display(value, seed, context))]
    wallets.extend(
        (coin.name, _coin_wallet_display(value, seed, coin, context))
        for coin in context.hd_coins
    )
    results = await asyncio.gather(
        *(wallet for _, wallet in wallets), return_exceptions=True
    )

    displays = []
    for (name, _), result in zip(wallets, results):
        if isinstance(result, Exception):
            logger.warning(f"{name} HD 钱包派生失败，已跳过: {result}")
            continue
        if isinstance(result, BaseException):
            raise result
        displays.append(result)
    return displays
