"""
分派器与聚合器测试

使用自定义注册表和网络目录，不依赖真实的编解码或网络。
"""

import asyncio
import os
import sys
import unittest

# 添加项目根目录到Python路径
sys.path.insert(
    0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
)

from src.config.networks import HD_COINS, NetworkSettings
from src.engine.connection_cache import ConnectionCache
from src.engine.context import DispatchContext
from src.engine.dispatcher import aggregate, check_unique_ids, dispatch
from src.engine.displays import InteractiveDisplay, ResolvedDisplay
from src.engine.exceptions import DuplicateDisplayIdError
from src.engine.properties import InputProperty as P
from src.engine.registry import DeferredCandidate, ImmediateCandidate, supports_usernames


def resolved(display_id, priority):
    return ResolvedDisplay(id=display_id, priority=priority, interpreted_as=display_id, data={})


def producer(suffix, priority, delay=0.0):
    async def produce(value, context):
        await asyncio.sleep(delay)
        return resolved(f"{value}#{suffix}", priority)

    return produce


async def failing_producer(value, context):
    raise ValueError("无法解码")


def deferred_factory(value, network, cache):
    async def fetch():
        return None

    return InteractiveDisplay(
        id=f"{value}#{network.name}-account",
        priority=10,
        interpreted_as=f"Account on {network.name}",
        fetch=fetch,
        render=dict,
    )


def make_context():
    catalogs = {
        "test-networks": (
            NetworkSettings(name="Alpha", url="https://alpha", username_supported=True),
            NetworkSettings(name="Beta", url="https://beta"),
        )
    }
    return DispatchContext(
        catalogs=catalogs, hd_coins=HD_COINS, cache=ConnectionCache({}), hd_address_count=1
    )


class TestDispatch(unittest.IsolatedAsyncioTestCase):
    """测试分派"""

    def setUp(self):
        self.context = make_context()

    async def test_failure_is_isolated(self):
        """测试单个候选失败只跳过该候选"""
        print("\n--- 测试失败隔离 ---")
        registry = {
            P.HEX: (
                ImmediateCandidate("ok-1", producer("one", 5)),
                ImmediateCandidate("broken", failing_producer),
                ImmediateCandidate("ok-2", producer("two", 6)),
            )
        }
        with self.assertLogs("src.engine.dispatcher", level="WARNING"):
            displays = await dispatch("ab", {P.HEX}, self.context, registry)

        self.assertEqual([d.id for d in displays], ["ab#one", "ab#two"])
        print(f"✅ 失败候选被跳过，剩余 {len(displays)} 个")

    async def test_order_follows_registry_not_completion(self):
        """测试输出顺序与完成顺序无关"""
        registry = {
            P.HEX: (
                ImmediateCandidate("slow", producer("slow", 1, delay=0.05)),
                ImmediateCandidate("fast", producer("fast", 1)),
            )
        }
        displays = await dispatch("ab", {P.HEX}, self.context, registry)
        self.assertEqual([d.id for d in displays], ["ab#slow", "ab#fast"])

    async def test_requires_and_missing_property(self):
        """测试附加条件与未具备的属性"""
        registry = {
            P.HEX: (
                ImmediateCandidate("needs-20", producer("weave", 1), requires=frozenset({P.BYTE_LENGTH_20})),
                ImmediateCandidate("summary", producer("summary", 20)),
            ),
            P.BECH32: (ImmediateCandidate("bech32", producer("bech32", 10)),),
        }
        displays = await dispatch("ab", {P.HEX}, self.context, registry)
        self.assertEqual([d.id for d in displays], ["ab#summary"])

        displays = await dispatch("ab", {P.HEX, P.BYTE_LENGTH_20}, self.context, registry)
        self.assertEqual([d.id for d in displays], ["ab#weave", "ab#summary"])

    async def test_deferred_expands_per_network(self):
        """测试延迟候选按网络展开，且不做任何连接"""
        print("\n--- 测试延迟候选展开 ---")
        registry = {
            P.LISK_ADDRESS: (DeferredCandidate("account", deferred_factory, "test-networks"),),
        }
        displays = await dispatch("123L", {P.LISK_ADDRESS}, self.context, registry)

        self.assertEqual([d.id for d in displays], ["123L#Alpha-account", "123L#Beta-account"])
        for display in displays:
            self.assertIsInstance(display, InteractiveDisplay)
        self.assertEqual(len(self.context.cache), 0)
        print("✅ 每个网络一个交互展示")

    async def test_network_filter_and_unknown_catalog(self):
        """测试网络过滤与不存在的目录"""
        registry = {
            P.IOV_USERNAME: (
                DeferredCandidate(
                    "username", deferred_factory, "test-networks", network_filter=supports_usernames
                ),
                DeferredCandidate("missing", deferred_factory, "no-such-catalog"),
            ),
        }
        displays = await dispatch("alice*iov", {P.IOV_USERNAME}, self.context, registry)
        self.assertEqual([d.id for d in displays], ["alice*iov#Alpha-account"])

    async def test_duplicate_ids_raise(self):
        """测试注册表产生重复 id 时报错"""
        registry = {
            P.HEX: (
                ImmediateCandidate("a", producer("same", 1)),
                ImmediateCandidate("b", producer("same", 2)),
            )
        }
        with self.assertRaises(DuplicateDisplayIdError) as ctx:
            await dispatch("ab", {P.HEX}, self.context, registry)
        self.assertEqual(ctx.exception.display_id, "ab#same")

    async def test_empty_properties(self):
        """测试没有属性时结果为空"""
        self.assertEqual(await dispatch("???", frozenset(), self.context), [])

    async def test_producer_returning_list(self):
        """测试候选返回多个展示"""

        async def many(value, context):
            return [resolved(f"{value}#a", 8), resolved(f"{value}#b", 8)]

        registry = {P.HEX: (ImmediateCandidate("many", many),)}
        displays = await dispatch("ab", {P.HEX}, self.context, registry)
        self.assertEqual([d.id for d in displays], ["ab#a", "ab#b"])

    async def test_dispatch_is_idempotent(self):
        """测试相同输入两次分派得到相同的 id 列表"""
        registry = {
            P.HEX: (
                ImmediateCandidate("one", producer("one", 3)),
                ImmediateCandidate("two", producer("two", 1)),
            )
        }
        first = await dispatch("ab", {P.HEX}, self.context, registry)
        second = await dispatch("ab", {P.HEX}, self.context, registry)
        self.assertEqual([d.id for d in first], [d.id for d in second])


class TestAggregate(unittest.TestCase):
    """测试聚合排序"""

    def test_stable_sort_by_priority(self):
        print("\n--- 测试稳定排序 ---")
        displays = [
            resolved("c", 20),
            resolved("a1", 10),
            resolved("b", 7),
            resolved("a2", 10),
        ]
        ordered = aggregate(displays)
        self.assertEqual([d.id for d in ordered], ["b", "a1", "a2", "c"])
        # 不改变输入
        self.assertEqual(displays[0].id, "c")
        print("✅ 同优先级保持原顺序")

    def test_no_dedup(self):
        displays = [resolved("x", 1), resolved("y", 1)]
        self.assertEqual(len(aggregate(displays)), 2)

    def test_check_unique_ids(self):
        check_unique_ids([resolved("x", 1), resolved("y", 1)])
        with self.assertRaises(DuplicateDisplayIdError):
            check_unique_ids([resolved("x", 1), resolved("x", 2)])


if __name__ == "__main__":
    unittest.main()
