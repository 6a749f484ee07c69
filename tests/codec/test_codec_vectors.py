"""
编解码与派生测试

使用公开的标准测试向量（RFC 8032、SLIP-10、BIP32、EIP-55、BIP173）。
"""

import hashlib
import os
import sys
import unittest

# 添加项目根目录到Python路径
sys.path.insert(
    0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
)

from src.codec import (
    CodecError,
    decode_bech32,
    derive_ed25519_private_key,
    derive_secp256k1_private_key,
    ed25519_pubkey,
    encode_bech32,
    ethereum_address,
    format_path,
    from_hex,
    hardened,
    iov_address,
    lisk_address,
    mnemonic_to_entropy,
    mnemonic_to_seed,
    rise_address,
    secp256k1_pubkey,
    to_checksummed_address,
    to_hex,
    weave_address_to_bech32,
)

MNEMONIC_12 = " ".join(["abandon"] * 11 + ["about"])


class TestEncoding(unittest.TestCase):
    """测试 hex 与 bech32"""

    def test_hex(self):
        self.assertEqual(from_hex("48656C6c6f"), b"Hello")
        self.assertEqual(to_hex(b"\x00\xff"), "00ff")
        with self.assertRaises(CodecError):
            from_hex("abc")
        with self.assertRaises(CodecError):
            from_hex("zz")

    def test_bech32_decode(self):
        """测试 BIP173 向量"""
        print("\n--- 测试 bech32 解码 ---")
        prefix, data = decode_bech32("abcdef1qpzry9x8gf2tvdw0s3jn54khce6mua7lmqqqxw")
        self.assertEqual(prefix, "abcdef")
        self.assertEqual(to_hex(data), "00443214c74254b635cf84653a56d7c675be77df")

        prefix, data = decode_bech32("a12uel5l")
        self.assertEqual(prefix, "a")
        self.assertEqual(data, b"")
        print("✅ bech32 解码正确")

    def test_bech32_bad_checksum(self):
        with self.assertRaises(CodecError):
            decode_bech32("abcdef1qpzry9x8gf2tvdw0s3jn54khce6mua7lmqqqxx")

    def test_bech32_encode(self):
        data = from_hex("00443214c74254b635cf84653a56d7c675be77df")
        encoded = encode_bech32("abcdef", data)
        self.assertEqual(encoded, "abcdef1qpzry9x8gf2tvdw0s3jn54khce6mua7lmqqqxw")

    def test_weave_address(self):
        address = weave_address_to_bech32(bytes(20), "tiov")
        self.assertTrue(address.startswith("tiov1"))
        self.assertEqual(len(address), 43)
        with self.assertRaises(CodecError):
            weave_address_to_bech32(bytes(19), "tiov")


class TestKeys(unittest.TestCase):
    """测试公钥计算"""

    def test_ed25519_rfc8032(self):
        """测试 RFC 8032 第一个向量"""
        seed = from_hex("9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60")
        self.assertEqual(
            to_hex(ed25519_pubkey(seed)),
            "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a",
        )
        with self.assertRaises(CodecError):
            ed25519_pubkey(bytes(31))

    def test_secp256k1_generator(self):
        """私钥 1 的公钥即生成元 G"""
        private_key = (1).to_bytes(32, "big")
        self.assertEqual(
            to_hex(secp256k1_pubkey(private_key)),
            "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798",
        )
        uncompressed = secp256k1_pubkey(private_key, compressed=False)
        self.assertEqual(len(uncompressed), 65)
        self.assertEqual(uncompressed[0], 4)

    def test_invalid_secp256k1_private_key(self):
        with self.assertRaises(CodecError):
            secp256k1_pubkey(bytes(32))


class TestAddresses(unittest.TestCase):
    """测试地址计算"""

    def test_eip55(self):
        """测试 EIP-55 向量"""
        print("\n--- 测试 EIP-55 ---")
        for expected in (
            "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
            "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359",
            "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB",
            "0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9aDb",
        ):
            self.assertEqual(to_checksummed_address(expected.lower()), expected)
            self.assertEqual(to_checksummed_address("0x" + expected[2:].upper()), expected)
        print("✅ EIP-55 校验大小写正确")

    def test_ethereum_address_from_pubkey(self):
        private_key = (1).to_bytes(32, "big")
        expected = "0x7E5F4552091A69125d5DfCb7b8C2659029395Bdf"
        self.assertEqual(ethereum_address(secp256k1_pubkey(private_key)), expected)
        self.assertEqual(
            ethereum_address(secp256k1_pubkey(private_key, compressed=False)), expected
        )

    def test_ethereum_address_invalid_point(self):
        with self.assertRaises(CodecError):
            ethereum_address(from_hex("05" + "11" * 32))

    def test_iov_address(self):
        pubkey = from_hex("d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a")
        testnet = iov_address(pubkey, "tiov")
        mainnet = iov_address(pubkey, "iov")

        expected = hashlib.sha256(b"sigs/ed25519/" + pubkey).digest()[:20]
        self.assertEqual(decode_bech32(testnet), ("tiov", expected))
        self.assertEqual(decode_bech32(mainnet), ("iov", expected))

    def test_lisk_like_addresses(self):
        pubkey = from_hex("d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a")
        digest = hashlib.sha256(pubkey).digest()
        number = int.from_bytes(digest[:8], "little")

        self.assertEqual(lisk_address(pubkey), f"{number}L")
        self.assertEqual(rise_address(pubkey), f"{number}R")


class TestMnemonic(unittest.TestCase):
    """测试 BIP39"""

    def test_entropy(self):
        self.assertEqual(mnemonic_to_entropy(MNEMONIC_12), bytes(16))

    def test_bad_checksum(self):
        with self.assertRaises(CodecError):
            mnemonic_to_entropy(" ".join(["abandon"] * 12))
        with self.assertRaises(CodecError):
            mnemonic_to_seed(" ".join(["abandon"] * 12))

    def test_seed(self):
        seed = mnemonic_to_seed(MNEMONIC_12)
        self.assertEqual(len(seed), 64)
        self.assertTrue(to_hex(seed).startswith("5eb00bbddcf069084889a8ab91555681"))


class TestHdDerivation(unittest.TestCase):
    """测试 HD 派生"""

    SEED = from_hex("000102030405060708090a0b0c0d0e0f")

    def test_format_path(self):
        self.assertEqual(format_path([hardened(44), hardened(234), hardened(0)]), "m/44'/234'/0'")
        self.assertEqual(format_path([hardened(44), hardened(60), hardened(0), 0, 3]), "m/44'/60'/0'/0/3")
        self.assertEqual(format_path([]), "m")

    def test_slip10_ed25519(self):
        """测试 SLIP-10 ed25519 向量 1"""
        print("\n--- 测试 SLIP-10 ---")
        self.assertEqual(
            to_hex(derive_ed25519_private_key(self.SEED, [])),
            "2b4be7f19ee27bbf30c667b642d5f4aa69fd169872f8fc3059c08ebae2eb19e7",
        )
        self.assertEqual(
            to_hex(derive_ed25519_private_key(self.SEED, [hardened(0)])),
            "68e0fe46dfb67e368c75379acec591dad19df3cde26e63b93a8e704f1dade7a3",
        )
        print("✅ SLIP-10 派生正确")

    def test_slip10_rejects_normal_index(self):
        with self.assertRaises(CodecError):
            derive_ed25519_private_key(self.SEED, [0])

    def test_bip32_secp256k1(self):
        """测试 BIP32 向量 1"""
        self.assertEqual(
            to_hex(derive_secp256k1_private_key(self.SEED, [])),
            "e8f32e723decf4051aefac8e2c93c9c5b214313817cdb01a1494b917c8436b35",
        )
        self.assertEqual(
            to_hex(derive_secp256k1_private_key(self.SEED, [hardened(0)])),
            "edb2e14f9ee77d26dd93b4ecede8d16ed408ce149b6cd80b0715a2d911a0afea",
        )

    def test_hardened_range(self):
        with self.assertRaises(CodecError):
            hardened(-1)
        with self.assertRaises(CodecError):
            hardened(2**31)


if __name__ == "__main__":
    unittest.main()
