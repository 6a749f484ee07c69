"""
编解码与密钥派生

为解析引擎提供的不透明能力：hex/bech32 编解码、BIP39 助记词、
HD 派生以及各链公钥到地址的转换。
"""

from .addresses import (
    IOV_MAINNET_PREFIX,
    IOV_TESTNET_PREFIX,
    ethereum_address,
    iov_address,
    lisk_address,
    rise_address,
    to_checksummed_address,
    weave_address_to_bech32,
)
from .bip39 import ENGLISH_WORDLIST, mnemonic_to_entropy, mnemonic_to_seed
from .encoding import decode_bech32, encode_bech32, from_hex, to_hex
from .exceptions import CodecError
from .hd import (
    derive_ed25519_private_key,
    derive_secp256k1_private_key,
    format_path,
    hardened,
)
from .keys import ed25519_pubkey, passphrase_to_ed25519_pubkey, secp256k1_pubkey

__all__ = [
    "CodecError",
    "ENGLISH_WORDLIST",
    "IOV_MAINNET_PREFIX",
    "IOV_TESTNET_PREFIX",
    "decode_bech32",
    "derive_ed25519_private_key",
    "derive_secp256k1_private_key",
    "ed25519_pubkey",
    "encode_bech32",
    "ethereum_address",
    "format_path",
    "from_hex",
    "hardened",
    "iov_address",
    "lisk_address",
    "mnemonic_to_entropy",
    "mnemonic_to_seed",
    "passphrase_to_ed25519_pubkey",
    "rise_address",
    "secp256k1_pubkey",
    "to_checksummed_address",
    "to_hex",
    "weave_address_to_bech32",
]
