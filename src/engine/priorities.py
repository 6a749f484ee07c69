"""展示优先级，数值越小越靠前"""


class Priorities:
    ED25519_PUBKEY = 7
    SECP256K1_PUBKEY = 7
    ED25519_PRIVKEY = 7
    LISK_LIKE_PASSPHRASE = 7
    HD_ADDRESSES = 8
    BNS_ACCOUNT = 9
    BNS_USERNAME = 9
    BECH32 = 10
    WEAVE_ADDRESS = 10
    ETHEREUM_ADDRESS = 10
    LISK_ACCOUNT = 10
    RISE_ACCOUNT = 10
    BIP39_MNEMONIC = 11
    HEX = 20
