#!/usr/bin/env python3
"""
展示格式化工具

把引擎输出的展示对象转换为终端文本或表格行。只负责格式化，
不负责解析或网络查询。
"""

import json
from typing import Any, Dict, List, Mapping, Optional, Sequence

from src.engine.displays import (
    Display,
    InteractiveDisplay,
    Resolution,
    ResolutionState,
    ResolvedDisplay,
    is_interactive,
)

# 终态 -> 终端提示
RESOLUTION_LABELS = {
    ResolutionState.UNRESOLVED: "⏳ 未查询",
    ResolutionState.FETCHING: "⏳ 查询中",
    ResolutionState.RESOLVED: "✅ 已找到",
    ResolutionState.NOT_FOUND: "➖ 未找到",
    ResolutionState.FAILED: "❌ 查询失败",
}


def display_to_row(
    display: Display, resolution: Optional[Resolution] = None
) -> Dict[str, Any]:
    """
    展示对象转为扁平字典（用于表格或 CSV）

    Args:
        display: 展示对象
        resolution: 交互展示的解析结果（可选）

    Returns:
        包含 id/priority/interpreted_as/kind/state/data 的字典
    """
    interactive = is_interactive(display)
    row: Dict[str, Any] = {
        "id": display.id,
        "priority": display.priority,
        "interpreted_as": display.interpreted_as,
        "deprecated": display.deprecated,
        "kind": "interactive" if interactive else "resolved",
        "state": None,
        "data": None,
    }

    if isinstance(display, ResolvedDisplay):
        row["state"] = ResolutionState.RESOLVED.value
        row["data"] = json.dumps(display.data, ensure_ascii=False)
    elif resolution is not None:
        row["state"] = resolution.state.value
        if resolution.display is not None:
            row["data"] = json.dumps(resolution.display.data, ensure_ascii=False)
        elif resolution.error is not None:
            row["data"] = str(resolution.error)
    else:
        row["state"] = display.state.value

    return row


def format_display(display: Display, resolution: Optional[Resolution] = None) -> List[str]:
    """格式化单个展示为多行文本"""
    title = f"[{display.priority:>2}] {display.interpreted_as}"
    if display.deprecated:
        title += " (已废弃)"
    lines = [title, f"     id: {display.id}"]

    if isinstance(display, InteractiveDisplay):
        state = resolution.state if resolution is not None else display.state
        lines.append(f"     {RESOLUTION_LABELS[state]}")
        if resolution is not None and resolution.display is not None:
            display = resolution.display
        elif resolution is not None and resolution.error is not None:
            lines.append(f"     错误: {resolution.error}")
            return lines
        else:
            return lines

    payload = json.dumps(display.data, indent=2, ensure_ascii=False)
    lines.extend("     " + line for line in payload.splitlines())
    return lines


def print_displays(
    displays: Sequence[Display],
    resolutions: Optional[Mapping[str, Resolution]] = None,
    title: str = "",
) -> None:
    """打印展示列表"""
    if title:
        print(f"\n{'='*50}")
        print(title)
        print(f"{'='*50}")

    if not displays:
        print("未找到任何解析结果")
        return

    resolutions = resolutions or {}
    for display in displays:
        for line in format_display(display, resolutions.get(display.id)):
            print(line)
        print()
