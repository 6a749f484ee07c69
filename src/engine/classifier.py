"""
输入分类器

把输入字符串映射为结构属性集合。只做语法/结构检查（正则、字节长度、
词表），不做需要编解码库的语义校验，那部分留给具体的候选生成函数。
每个检查相互独立，不假设属性之间互斥。
"""

import re
from typing import Callable, FrozenSet, List, Tuple

from src.codec.bip39 import ENGLISH_WORDLIST, SUPPORTED_WORD_COUNTS

from .properties import InputProperty

_BECH32_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"

_HEX_PATTERN = re.compile(r"^(?:[0-9a-fA-F]{2})+$")
# 前缀为 33-126 的可打印字符，最后一个 "1" 之后至少 6 个数据字符（校验和）
_BECH32_PATTERN = re.compile(rf"^[\x21-\x7e]{{1,83}}1[{_BECH32_CHARSET}]{{6,}}$")
_BECH32_MAX_LENGTH = 90
_IOV_TESTNET_PATTERN = re.compile(rf"^tiov1[{_BECH32_CHARSET}]{{38}}$")
_IOV_MAINNET_PATTERN = re.compile(rf"^iov1[{_BECH32_CHARSET}]{{38}}$")
_IOV_USERNAME_PATTERN = re.compile(r"^[a-z0-9.\-_]{4,64}\*iov$")
_LISK_ADDRESS_PATTERN = re.compile(r"^[0-9]{1,20}L$")
_RISE_ADDRESS_PATTERN = re.compile(r"^[0-9]{1,20}R$")
_ETHEREUM_ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")


def is_hex(value: str) -> bool:
    return bool(_HEX_PATTERN.match(value))


def _hex_of_length(byte_length: int) -> Callable[[str], bool]:
    def check(value: str) -> bool:
        return len(value) == 2 * byte_length and is_hex(value)

    return check


def is_bech32(value: str) -> bool:
    """bech32 形状检查（不校验校验和）"""
    if len(value) > _BECH32_MAX_LENGTH:
        return False
    # 不允许大小写混用
    if value != value.lower() and value != value.upper():
        return False
    return bool(_BECH32_PATTERN.match(value.lower()))


def _mnemonic_words(value: str) -> List[str]:
    return value.split(" ")


def is_english_mnemonic(value: str) -> bool:
    words = _mnemonic_words(value)
    if len(words) not in SUPPORTED_WORD_COUNTS:
        return False
    return all(word in ENGLISH_WORDLIST for word in words)


def is_english_mnemonic_12_words(value: str) -> bool:
    return len(_mnemonic_words(value)) == 12 and is_english_mnemonic(value)


def _matches(pattern: "re.Pattern[str]") -> Callable[[str], bool]:
    return lambda value: bool(pattern.match(value))


# 属性 -> 检查函数
PROPERTY_TESTS: Tuple[Tuple[InputProperty, Callable[[str], bool]], ...] = (
    (InputProperty.BECH32, is_bech32),
    (InputProperty.HEX, is_hex),
    (InputProperty.BYTE_LENGTH_20, _hex_of_length(20)),
    (InputProperty.BYTE_LENGTH_32, _hex_of_length(32)),
    (InputProperty.BYTE_LENGTH_33, _hex_of_length(33)),
    (InputProperty.BYTE_LENGTH_64, _hex_of_length(64)),
    (InputProperty.BYTE_LENGTH_65, _hex_of_length(65)),
    (InputProperty.ENGLISH_MNEMONIC, is_english_mnemonic),
    (InputProperty.ENGLISH_MNEMONIC_12_WORDS, is_english_mnemonic_12_words),
    (InputProperty.IOV_ADDRESS_TESTNET, _matches(_IOV_TESTNET_PATTERN)),
    (InputProperty.IOV_ADDRESS_MAINNET, _matches(_IOV_MAINNET_PATTERN)),
    (InputProperty.IOV_USERNAME, _matches(_IOV_USERNAME_PATTERN)),
    (InputProperty.LISK_ADDRESS, _matches(_LISK_ADDRESS_PATTERN)),
    (InputProperty.RISE_ADDRESS, _matches(_RISE_ADDRESS_PATTERN)),
    (InputProperty.ETHEREUM_ADDRESS, _matches(_ETHEREUM_ADDRESS_PATTERN)),
)


def classify(value: str) -> FrozenSet[InputProperty]:
    """
    对输入进行结构分类

    纯函数、确定性、不抛异常；什么都不匹配时返回空集合。

    Args:
        value: 已去除首尾空白的输入

    Returns:
        属性集合
    """
    if not isinstance(value, str) or not value:
        return frozenset()
    return frozenset(prop for prop, test in PROPERTY_TESTS if test(value))
