"""输入结构属性定义"""

from enum import Enum


class InputProperty(Enum):
    """输入字符串可能具备的结构属性，一个输入可同时具备多个"""

    BECH32 = "bech32"
    HEX = "hex"
    BYTE_LENGTH_20 = "byte-length-20"
    BYTE_LENGTH_32 = "byte-length-32"
    BYTE_LENGTH_33 = "byte-length-33"
    BYTE_LENGTH_64 = "byte-length-64"
    BYTE_LENGTH_65 = "byte-length-65"
    ENGLISH_MNEMONIC = "english-mnemonic"
    ENGLISH_MNEMONIC_12_WORDS = "english-mnemonic-12-words"
    IOV_ADDRESS_TESTNET = "iov-address-testnet"
    IOV_ADDRESS_MAINNET = "iov-address-mainnet"
    IOV_USERNAME = "iov-username"
    LISK_ADDRESS = "lisk-address"
    RISE_ADDRESS = "rise-address"
    ETHEREUM_ADDRESS = "ethereum-address"
