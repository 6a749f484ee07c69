"""
工具模块

提供进度显示、展示格式化和结果导出等实用工具
"""

from .progress_utils import ProgressTracker

__all__ = [
    "ProgressTracker",
]
