"""
各链地址计算

- IOV: bech32(prefix, sha256("sigs/ed25519/" + pubkey)[:20])
- Lisk/RISE: sha256(pubkey) 前 8 字节逆序后的十进制数 + 后缀
- Ethereum: keccak256(未压缩公钥去掉 0x04)[-20:]，EIP-55 校验大小写
"""

import hashlib

from Crypto.Hash import keccak

from .encoding import encode_bech32, from_hex
from .exceptions import CodecError
from .keys import secp256k1_uncompressed

IOV_TESTNET_PREFIX = "tiov"
IOV_MAINNET_PREFIX = "iov"

_ED25519_CONDITION = b"sigs/ed25519/"


def keccak256(data: bytes) -> bytes:
    return keccak.new(digest_bits=256, data=bytes(data)).digest()


def weave_address_to_bech32(address: bytes, prefix: str) -> str:
    """20 字节 weave 地址编码为 bech32"""
    if len(address) != 20:
        raise CodecError(f"weave 地址必须为 20 字节: {len(address)}")
    return encode_bech32(prefix, address)


def iov_address(pubkey: bytes, prefix: str = IOV_TESTNET_PREFIX) -> str:
    """ed25519 公钥转 IOV 地址"""
    if len(pubkey) != 32:
        raise CodecError(f"ed25519 公钥必须为 32 字节: {len(pubkey)}")
    condition = _ED25519_CONDITION + bytes(pubkey)
    return weave_address_to_bech32(hashlib.sha256(condition).digest()[:20], prefix)


def _lisk_like_address(pubkey: bytes, suffix: str) -> str:
    if len(pubkey) != 32:
        raise CodecError(f"ed25519 公钥必须为 32 字节: {len(pubkey)}")
    first_eight = hashlib.sha256(bytes(pubkey)).digest()[:8]
    return f"{int.from_bytes(first_eight[::-1], 'big')}{suffix}"


def lisk_address(pubkey: bytes) -> str:
    return _lisk_like_address(pubkey, "L")


def rise_address(pubkey: bytes) -> str:
    return _lisk_like_address(pubkey, "R")


def to_checksummed_address(address: str) -> str:
    """
    按 EIP-55 生成带校验大小写的以太坊地址

    Args:
        address: 0x 开头的 40 位 hex 地址，大小写任意
    """
    body = address[2:] if address.lower().startswith("0x") else address
    if len(body) != 40:
        raise CodecError(f"以太坊地址长度无效: {address}")
    from_hex(body)

    lower = body.lower()
    address_hash = keccak256(lower.encode("ascii")).hex()
    checksummed = "".join(
        char.upper() if int(address_hash[i], 16) >= 8 else char
        for i, char in enumerate(lower)
    )
    return "0x" + checksummed


def ethereum_address(pubkey: bytes) -> str:
    """secp256k1 公钥（压缩或未压缩）转以太坊地址"""
    uncompressed = secp256k1_uncompressed(pubkey)
    return to_checksummed_address("0x" + keccak256(uncompressed[1:])[-20:].hex())
