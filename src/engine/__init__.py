"""
解析引擎

分类 -> 注册表分派 -> 排序，得到一个输入的全部候选解析。

核心组件：
- classify: 结构分类器
- REGISTRY: 属性到候选规格的注册表
- dispatch / aggregate: 分派器与聚合器
- ConnectionCache: 去重的连接缓存
- process_input: 入口函数
"""

from .classifier import classify
from .connection_cache import ClientKind, ConnectionCache, default_connection_cache
from .context import DispatchContext, create_dispatch_context
from .dispatcher import aggregate, check_unique_ids, dispatch
from .displays import (
    Display,
    InteractiveDisplay,
    Resolution,
    ResolutionState,
    ResolvedDisplay,
    is_interactive,
)
from .exceptions import (
    DuplicateDisplayIdError,
    InterpretationError,
    ResolutionInProgressError,
    UnsupportedFormatError,
)
from .processor import process_input, process_inputs, resolve_all
from .properties import InputProperty
from .registry import REGISTRY, DeferredCandidate, ImmediateCandidate

__all__ = [
    "REGISTRY",
    "ClientKind",
    "ConnectionCache",
    "DeferredCandidate",
    "DispatchContext",
    "Display",
    "DuplicateDisplayIdError",
    "ImmediateCandidate",
    "InputProperty",
    "InteractiveDisplay",
    "InterpretationError",
    "Resolution",
    "ResolutionInProgressError",
    "ResolutionState",
    "ResolvedDisplay",
    "UnsupportedFormatError",
    "aggregate",
    "check_unique_ids",
    "classify",
    "create_dispatch_context",
    "default_connection_cache",
    "dispatch",
    "is_interactive",
    "process_input",
    "process_inputs",
    "resolve_all",
]
