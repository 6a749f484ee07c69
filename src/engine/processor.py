"""
解析入口

process_input: 去空白 -> 分类 -> 分派 -> 排序
process_inputs: 批量并发处理，共享同一个连接缓存，重复输入只处理一次
resolve_all: 并发解析一组展示中的所有交互展示
"""

import asyncio
import logging
from typing import Dict, List, Optional, Sequence

from src.utils.progress_utils import ProgressTracker

from .classifier import classify
from .context import DispatchContext, create_dispatch_context
from .dispatcher import aggregate, dispatch
from .displays import Display, Resolution, is_interactive

logger = logging.getLogger(__name__)


async def process_input(
    value: str, context: Optional[DispatchContext] = None
) -> List[Display]:
    """
    解析单个输入

    Args:
        value: 用户输入
        context: 分派上下文，默认按环境配置创建

    Returns:
        按优先级排序的展示列表
    """
    if context is None:
        context = create_dispatch_context()

    normalized = value.strip()
    properties = classify(normalized)
    logger.debug(
        f"{normalized!r} 属性: {sorted(prop.value for prop in properties)}"
    )

    displays = await dispatch(normalized, properties, context)
    return aggregate(displays)


async def process_inputs(
    values: Sequence[str],
    context: Optional[DispatchContext] = None,
    show_progress: bool = True,
) -> Dict[str, List[Display]]:
    """
    批量解析输入

    Args:
        values: 输入列表
        context: 分派上下文
        show_progress: 超过 10 个输入时是否显示进度条

    Returns:
        输入 -> 展示列表，按首次出现的顺序；重复的输入只解析一次
    """
    if context is None:
        context = create_dispatch_context()

    unique_values = list(dict.fromkeys(values))
    if len(unique_values) < len(values):
        logger.info(f"忽略 {len(values) - len(unique_values)} 个重复输入")
    values = unique_values

    if not show_progress or len(values) <= 10:
        results = await asyncio.gather(*(process_input(v, context) for v in values))
        return dict(zip(values, results))

    with ProgressTracker(len(values), "解析输入", "个") as tracker:

        async def run(value: str) -> List[Display]:
            displays = await process_input(value, context)
            tracker.update(1, value[:20])
            return displays

        results = await asyncio.gather(*(run(v) for v in values))
    return dict(zip(values, results))


async def resolve_all(displays: Sequence[Display]) -> Dict[str, Resolution]:
    """
    并发解析所有交互展示

    Returns:
        展示 id -> 解析终态
    """
    interactive = [d for d in displays if is_interactive(d)]
    resolutions = await asyncio.gather(*(d.resolve() for d in interactive))
    return {display.id: resolution for display, resolution in zip(interactive, resolutions)}
