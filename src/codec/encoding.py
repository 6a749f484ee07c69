"""
基础编码工具

hex 与 bech32 的编解码封装。bech32 部分基于参考实现库 ``bech32``。
"""

from typing import Tuple

from bech32 import bech32_decode, bech32_encode, convertbits

from .exceptions import CodecError


def from_hex(value: str) -> bytes:
    """hex 字符串转字节，大小写均可"""
    if len(value) % 2 != 0:
        raise CodecError(f"hex 字符串长度必须为偶数: {len(value)}")
    try:
        return bytes.fromhex(value)
    except ValueError as e:
        raise CodecError(f"无效的 hex 字符串: {e}") from e


def to_hex(data: bytes) -> str:
    """字节转小写 hex 字符串"""
    return bytes(data).hex()


def decode_bech32(value: str) -> Tuple[str, bytes]:
    """
    解码 bech32 字符串

    Args:
        value: bech32 字符串（全小写或全大写）

    Returns:
        (prefix, data) 元组，data 为 8 位字节

    Raises:
        CodecError: 校验和错误、字符集错误或填充位无效
    """
    prefix, words = bech32_decode(value)
    if prefix is None or words is None:
        raise CodecError(f"无效的 bech32 字符串: {value}")

    data = convertbits(words, 5, 8, False)
    if data is None:
        raise CodecError(f"bech32 数据填充位无效: {value}")

    return prefix, bytes(data)


def encode_bech32(prefix: str, data: bytes) -> str:
    """将字节编码为 bech32 字符串"""
    words = convertbits(list(data), 8, 5)
    if words is None:
        raise CodecError("无法转换为 5 位分组")
    return bech32_encode(prefix, words)
