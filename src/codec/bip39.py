"""
BIP39 助记词封装

基于 Trezor 的 ``mnemonic`` 库，只使用英文词表。
"""

from typing import FrozenSet

from mnemonic import Mnemonic

from .exceptions import CodecError

_ENGLISH = Mnemonic("english")

ENGLISH_WORDLIST: FrozenSet[str] = frozenset(_ENGLISH.wordlist)

# 合法的助记词词数
SUPPORTED_WORD_COUNTS = (12, 15, 18, 21, 24)


def mnemonic_to_entropy(phrase: str) -> bytes:
    """
    助记词解码为熵

    Raises:
        CodecError: 单词不在词表中、词数不合法或校验和错误
    """
    try:
        return bytes(_ENGLISH.to_entropy(phrase))
    except (ValueError, LookupError) as e:
        raise CodecError(f"无效的 BIP39 助记词: {e}") from e


def mnemonic_to_seed(phrase: str, passphrase: str = "") -> bytes:
    """助记词转 512 位种子（PBKDF2-HMAC-SHA512，2048 轮）"""
    mnemonic_to_entropy(phrase)
    return bytes(Mnemonic.to_seed(phrase, passphrase))
