"""
延迟候选构造函数测试（IOV 账户、用户名、Lisk/RISE 账户）
"""

import os
import sys
import unittest

# 添加项目根目录到Python路径
sys.path.insert(
    0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
)

from src.config.networks import NetworkSettings
from src.engine.connection_cache import ClientKind, ConnectionCache
from src.engine.displays import ResolutionState
from src.engine.interactive import (
    make_iov_account_display,
    make_iov_username_display,
    make_rise_account_display,
)
from src.engine.priorities import Priorities
from src.ledger.models import Account, Amount, ChainAddress, Username

ADDRESS = "tiov1" + "q" * 38


class FakeBnsClient:
    def __init__(self, url):
        self.url = url
        self.username_queries = []

    async def get_account(self, address=None, name=None):
        if address != ADDRESS:
            return None
        return Account(address=address, balance=[Amount(3000000000, 9, "IOV")])

    async def get_usernames(self, owner=None, username=None):
        self.username_queries.append(owner or username)
        if username == "alice*iov" or owner == ADDRESS:
            return [
                Username(
                    id="alice*iov",
                    owner=ADDRESS,
                    targets=[ChainAddress(chain_id="iov-mainnet", address="iov1abc")],
                )
            ]
        return []


class TestInteractiveFactories(unittest.IsolatedAsyncioTestCase):
    """测试交互展示的查询与渲染"""

    def setUp(self):
        self.clients = []

        async def connect(url):
            client = FakeBnsClient(url)
            self.clients.append(client)
            return client

        self.cache = ConnectionCache({ClientKind.BNS: connect})
        self.with_names = NetworkSettings("Yaknet (bnsd)", "https://bnsd", username_supported=True)
        self.without_names = NetworkSettings("Yaknet (bcpd)", "https://bcpd")

    async def test_factory_does_not_connect(self):
        """测试构造交互展示时不建立连接"""
        display = make_iov_account_display(ADDRESS, self.with_names, self.cache)
        self.assertEqual(display.id, f"{ADDRESS}#Yaknet (bnsd)-bns-account")
        self.assertEqual(display.priority, Priorities.BNS_ACCOUNT)
        self.assertEqual(len(self.cache), 0)

    async def test_account_with_usernames(self):
        print("\n--- 测试 IOV 账户查询 ---")
        resolution = await make_iov_account_display(ADDRESS, self.with_names, self.cache).resolve()

        self.assertTrue(resolution.ok)
        self.assertEqual(resolution.display.data["balance"], ["3 IOV"])
        self.assertEqual(resolution.display.data["names"], ["alice*iov"])
        print("✅ 账户与用户名均已获取")

    async def test_account_without_username_support(self):
        """测试不支持用户名的网络不查询用户名"""
        resolution = await make_iov_account_display(ADDRESS, self.without_names, self.cache).resolve()

        self.assertTrue(resolution.ok)
        self.assertEqual(resolution.display.data["names"], [])
        self.assertEqual(self.clients[0].username_queries, [])

    async def test_unknown_account(self):
        resolution = await make_iov_account_display(
            "tiov1" + "p" * 38, self.with_names, self.cache
        ).resolve()
        self.assertEqual(resolution.state, ResolutionState.NOT_FOUND)

    async def test_username(self):
        display = make_iov_username_display("alice*iov", self.with_names, self.cache)
        self.assertEqual(display.id, "alice*iov#Yaknet (bnsd)-username")

        resolution = await display.resolve()
        self.assertEqual(resolution.display.data["owner"], ADDRESS)
        self.assertEqual(
            resolution.display.data["addresses"],
            [{"chain_id": "iov-mainnet", "address": "iov1abc"}],
        )

        missing = await make_iov_username_display("nobody*iov", self.with_names, self.cache).resolve()
        self.assertEqual(missing.state, ResolutionState.NOT_FOUND)

    async def test_shared_connection(self):
        """测试同一网络上的多个展示共用一个连接"""
        await make_iov_account_display(ADDRESS, self.with_names, self.cache).resolve()
        await make_iov_username_display("alice*iov", self.with_names, self.cache).resolve()
        self.assertEqual(len(self.clients), 1)

    async def test_missing_connector_fails(self):
        """测试没有 RISE 连接函数时查询失败而不是抛出"""
        network = NetworkSettings("RISE Mainnet", "https://rise")
        resolution = await make_rise_account_display("1R", network, self.cache).resolve()
        self.assertEqual(resolution.state, ResolutionState.FAILED)
        self.assertIsInstance(resolution.error, KeyError)


if __name__ == "__main__":
    unittest.main()
