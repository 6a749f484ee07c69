"""
展示对象

一次解析尝试的结果有两种形态：

- ResolvedDisplay: 数据已就绪（离线计算得到）
- InteractiveDisplay: 需要一次网络往返，调用 resolve() 后才得到 ResolvedDisplay

两者都带 id / priority / interpreted_as，因此可以在任何网络访问之前统一排序。
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Generic, Optional, TypeVar, Union

from .exceptions import ResolutionInProgressError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ResolvedDisplay:
    """已就绪的解析结果"""

    id: str
    priority: int
    interpreted_as: str
    data: Dict[str, Any]
    deprecated: bool = False


class ResolutionState(Enum):
    """交互展示的状态：UNRESOLVED -> FETCHING -> RESOLVED | NOT_FOUND | FAILED"""

    UNRESOLVED = "unresolved"
    FETCHING = "fetching"
    RESOLVED = "resolved"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class Resolution:
    """一次延迟解析的终态"""

    state: ResolutionState
    display: Optional[ResolvedDisplay] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.state is ResolutionState.RESOLVED


@dataclass(eq=False)
class InteractiveDisplay(Generic[T]):
    """
    需要网络查询的解析结果

    Attributes:
        fetch: 无参异步函数，返回查询结果；返回 None 表示未找到
        render: 把查询结果转换为展示数据，与 fetch 的结果类型一致
    """

    id: str
    priority: int
    interpreted_as: str
    fetch: Callable[[], Awaitable[Optional[T]]]
    render: Callable[[T], Dict[str, Any]]
    deprecated: bool = False
    state: ResolutionState = field(default=ResolutionState.UNRESOLVED, init=False)

    def to_resolved(self, result: T) -> ResolvedDisplay:
        """用查询结果生成共享 id/priority/interpreted_as 的 ResolvedDisplay"""
        return ResolvedDisplay(
            id=self.id,
            priority=self.priority,
            interpreted_as=self.interpreted_as,
            data=self.render(result),
            deprecated=self.deprecated,
        )

    async def resolve(self) -> Resolution:
        """
        执行延迟查询

        失败与未找到都会返回明确的终态，不会静默忽略。
        同一实例不会缓存结果，每次调用都重新查询。

        Raises:
            ResolutionInProgressError: 该实例已有查询在进行中
        """
        if self.state is ResolutionState.FETCHING:
            raise ResolutionInProgressError(self.id)

        self.state = ResolutionState.FETCHING
        try:
            result = await self.fetch()
            if result is None:
                self.state = ResolutionState.NOT_FOUND
                return Resolution(state=ResolutionState.NOT_FOUND)
            resolved = self.to_resolved(result)
        except Exception as e:
            logger.warning(f"{self.id} 查询失败: {e}")
            self.state = ResolutionState.FAILED
            return Resolution(state=ResolutionState.FAILED, error=e)
        except BaseException:
            # 被取消时回到初始状态，允许重新触发
            self.state = ResolutionState.UNRESOLVED
            raise

        self.state = ResolutionState.RESOLVED
        return Resolution(state=ResolutionState.RESOLVED, display=resolved)


Display = Union[ResolvedDisplay, InteractiveDisplay]


def is_interactive(display: Display) -> bool:
    return isinstance(display, InteractiveDisplay)
