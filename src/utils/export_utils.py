"""
解析结果导出

把一个或多个输入的展示列表导出为 CSV。
"""

import logging
from pathlib import Path
from typing import Mapping, Optional, Sequence

import pandas as pd

from src.engine.displays import Display, Resolution

from .display_utils import display_to_row

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = [
    "input",
    "rank",
    "id",
    "priority",
    "interpreted_as",
    "deprecated",
    "kind",
    "state",
    "data",
]


def displays_to_dataframe(
    results: Mapping[str, Sequence[Display]],
    resolutions: Optional[Mapping[str, Resolution]] = None,
) -> pd.DataFrame:
    """
    展示列表转为 DataFrame

    Args:
        results: 输入 -> 已排序的展示列表
        resolutions: 展示 id -> 解析结果

    Returns:
        每个展示一行，rank 为该输入内的排名（从 1 开始）
    """
    resolutions = resolutions or {}
    rows = []
    for value, displays in results.items():
        for rank, display in enumerate(displays, 1):
            row = display_to_row(display, resolutions.get(display.id))
            row["input"] = value
            row["rank"] = rank
            rows.append(row)

    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def export_displays_csv(
    results: Mapping[str, Sequence[Display]],
    output_path: str,
    resolutions: Optional[Mapping[str, Resolution]] = None,
) -> bool:
    """
    导出解析结果到 CSV

    Args:
        results: 输入 -> 已排序的展示列表
        output_path: 输出文件路径
        resolutions: 展示 id -> 解析结果

    Returns:
        是否成功
    """
    try:
        df = displays_to_dataframe(results, resolutions)

        # 确保输出目录存在
        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)

        df.to_csv(output_file, index=False, encoding="utf-8-sig")

        print(f"✅ 解析结果已导出到: {output_path}")
        print(f"   共导出 {len(df)} 条解析结果")
        return True

    except OSError as e:
        logger.error(f"导出解析结果失败: {e}")
        print(f"❌ 导出解析结果失败: {e}")
        return False
