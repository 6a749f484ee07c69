"""
分派器与聚合器

dispatch: 按注册表处理属性集合
    - 即时候选并发执行，单个失败只跳过该候选
    - 延迟候选按网络目录展开为交互展示，不做 I/O
    - 输出顺序为登记顺序，与即时候选的完成顺序无关
aggregate: 按 priority 稳定排序，不去重
"""

import asyncio
import logging
from typing import AbstractSet, List, Optional, Sequence, Set, Tuple

from src.codec import CodecError

from .context import DispatchContext
from .displays import Display
from .exceptions import DuplicateDisplayIdError
from .properties import InputProperty
from .registry import REGISTRY, ImmediateCandidate, Registry

logger = logging.getLogger(__name__)


def check_unique_ids(displays: Sequence[Display]) -> None:
    """
    校验展示 id 唯一

    Raises:
        DuplicateDisplayIdError: 出现重复 id
    """
    seen: Set[str] = set()
    for display in displays:
        if display.id in seen:
            raise DuplicateDisplayIdError(display.id)
        seen.add(display.id)


async def dispatch(
    value: str,
    properties: AbstractSet[InputProperty],
    context: DispatchContext,
    registry: Optional[Registry] = None,
) -> List[Display]:
    """
    对已分类的输入生成所有候选展示

    Args:
        value: 输入字符串
        properties: classify() 的结果
        context: 网络目录、HD 币种与连接缓存
        registry: 注册表，默认使用 REGISTRY

    Returns:
        未排序的展示列表（已就绪与交互展示混合）

    Raises:
        DuplicateDisplayIdError: 注册表产生了重复 id
    """
    if registry is None:
        registry = REGISTRY

    # 每个候选占一个槽位，保证输出顺序与登记顺序一致
    slots: List[List[Display]] = []
    pending: List[Tuple[int, str]] = []
    coroutines = []

    for prop, specs in registry.items():
        if prop not in properties:
            continue
        for spec in specs:
            if not spec.requires <= properties:
                continue
            if isinstance(spec, ImmediateCandidate):
                pending.append((len(slots), spec.name))
                coroutines.append(spec.producer(value, context))
                slots.append([])
            else:
                slots.append(
                    [spec.factory(value, network, context.cache) for network in spec.networks(context)]
                )

    results = await asyncio.gather(*coroutines, return_exceptions=True)

    for (slot, name), result in zip(pending, results):
        if isinstance(result, CodecError):
            # 形状匹配但解码失败，如校验和不符
            logger.debug(f"候选 {name} 不适用，已跳过: {result}")
            continue
        if isinstance(result, Exception):
            logger.warning(f"候选 {name} 解析失败，已跳过: {result}")
            continue
        if isinstance(result, BaseException):
            raise result
        if isinstance(result, (list, tuple)):
            slots[slot] = list(result)
        else:
            slots[slot] = [result]

    displays = [display for slot in slots for display in slot]
    check_unique_ids(displays)
    logger.debug(f"{value!r} 生成 {len(displays)} 个候选")
    return displays


def aggregate(displays: Sequence[Display]) -> List[Display]:
    """按 priority 升序稳定排序，同优先级保持原有顺序"""
    return sorted(displays, key=lambda display: display.priority)
