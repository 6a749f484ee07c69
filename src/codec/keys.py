"""
公钥计算

ed25519 使用 PyNaCl，secp256k1 使用 ecdsa。
"""

import hashlib

from ecdsa import SECP256k1, SigningKey, VerifyingKey
from ecdsa.errors import MalformedPointError
from nacl.signing import SigningKey as Ed25519SigningKey

from .exceptions import CodecError


def ed25519_pubkey(seed: bytes) -> bytes:
    """由 32 字节种子计算 ed25519 公钥"""
    if len(seed) != 32:
        raise CodecError(f"ed25519 种子必须为 32 字节: {len(seed)}")
    return Ed25519SigningKey(bytes(seed)).verify_key.encode()


def secp256k1_pubkey(private_key: bytes, compressed: bool = True) -> bytes:
    """由私钥计算 secp256k1 公钥（压缩 33 字节或未压缩 65 字节）"""
    try:
        signing_key = SigningKey.from_string(bytes(private_key), curve=SECP256k1)
    except (ValueError, MalformedPointError) as e:
        raise CodecError(f"无效的 secp256k1 私钥: {e}") from e
    encoding = "compressed" if compressed else "uncompressed"
    return signing_key.get_verifying_key().to_string(encoding)


def secp256k1_uncompressed(pubkey: bytes) -> bytes:
    """
    将 secp256k1 公钥统一为未压缩格式

    Raises:
        CodecError: 不是曲线上的点
    """
    try:
        verifying_key = VerifyingKey.from_string(bytes(pubkey), curve=SECP256k1)
    except (ValueError, MalformedPointError) as e:
        raise CodecError(f"无效的 secp256k1 公钥: {e}") from e
    return verifying_key.to_string("uncompressed")


def passphrase_to_ed25519_pubkey(passphrase: str) -> bytes:
    """Lisk 风格口令：sha256(口令) 作为 ed25519 种子"""
    seed = hashlib.sha256(passphrase.encode("utf-8")).digest()
    return ed25519_pubkey(seed)
