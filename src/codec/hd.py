"""
分层确定性（HD）密钥派生

- SLIP-10 ed25519：只支持硬化派生
- BIP32 secp256k1：支持硬化与普通派生
"""

import hashlib
import hmac
from typing import Sequence

from ecdsa import SECP256k1

from .exceptions import CodecError
from .keys import secp256k1_pubkey

HARDENED_OFFSET = 0x80000000

_ED25519_SEED_KEY = b"ed25519 seed"
_SECP256K1_SEED_KEY = b"Bitcoin seed"
_SECP256K1_ORDER = SECP256k1.order


def hardened(index: int) -> int:
    """返回硬化索引"""
    if not 0 <= index < HARDENED_OFFSET:
        raise CodecError(f"索引超出范围: {index}")
    return index + HARDENED_OFFSET


def format_path(path: Sequence[int]) -> str:
    """将派生路径格式化为 m/44'/234'/0' 形式"""
    parts = ["m"]
    for index in path:
        if index >= HARDENED_OFFSET:
            parts.append(f"{index - HARDENED_OFFSET}'")
        else:
            parts.append(str(index))
    return "/".join(parts)


def _hmac_sha512(key: bytes, data: bytes) -> bytes:
    return hmac.new(key, data, hashlib.sha512).digest()


def derive_ed25519_private_key(seed: bytes, path: Sequence[int]) -> bytes:
    """
    按 SLIP-10 派生 ed25519 私钥（32 字节种子形式）

    Raises:
        CodecError: 路径中包含非硬化索引
    """
    digest = _hmac_sha512(_ED25519_SEED_KEY, seed)
    key, chain_code = digest[:32], digest[32:]

    for index in path:
        if index < HARDENED_OFFSET:
            raise CodecError("ed25519 仅支持硬化派生")
        digest = _hmac_sha512(
            chain_code, b"\x00" + key + index.to_bytes(4, "big")
        )
        key, chain_code = digest[:32], digest[32:]

    return key


def derive_secp256k1_private_key(seed: bytes, path: Sequence[int]) -> bytes:
    """按 BIP32 派生 secp256k1 私钥"""
    digest = _hmac_sha512(_SECP256K1_SEED_KEY, seed)
    key = int.from_bytes(digest[:32], "big")
    chain_code = digest[32:]
    if key == 0 or key >= _SECP256K1_ORDER:
        raise CodecError("主私钥无效")

    for index in path:
        key_bytes = key.to_bytes(32, "big")
        if index >= HARDENED_OFFSET:
            data = b"\x00" + key_bytes
        else:
            data = secp256k1_pubkey(key_bytes, compressed=True)
        digest = _hmac_sha512(chain_code, data + index.to_bytes(4, "big"))

        tweak = int.from_bytes(digest[:32], "big")
        if tweak >= _SECP256K1_ORDER:
            raise CodecError(f"索引 {index} 派生结果无效")
        key = (tweak + key) % _SECP256K1_ORDER
        if key == 0:
            raise CodecError(f"索引 {index} 派生结果无效")
        chain_code = digest[32:]

    return key.to_bytes(32, "big")
