#!/usr/bin/env python3
"""
进度显示工具

为批量解析提供统一的进度条。
"""

import time
from typing import Optional

from tqdm import tqdm


class ProgressTracker:
    """进度跟踪器，提供统一的进度显示接口"""

    def __init__(self, total: int, desc: str = "处理中", unit: str = "item"):
        """
        初始化进度跟踪器

        Args:
            total: 总数量
            desc: 描述文字
            unit: 单位名称
        """
        self.total = total
        self.desc = desc
        self.unit = unit
        self.pbar: Optional[tqdm] = None
        self.start_time: Optional[float] = None

    def __enter__(self):
        """进入上下文管理器"""
        self.start_time = time.time()
        self.pbar = tqdm(
            total=self.total,
            desc=self.desc,
            unit=self.unit,
            ncols=80,
            leave=False,  # 完成后清除进度条
            dynamic_ncols=True,
            mininterval=0.1,
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """退出上下文管理器"""
        if self.pbar:
            self.pbar.close()
            if exc_type is None:
                elapsed = time.time() - self.start_time if self.start_time else 0
                print(f"✅ {self.desc} 完成 (耗时: {elapsed:.1f}s)")
            else:
                print(f"❌ {self.desc} 中断")

    def update(self, n: int = 1, postfix: Optional[str] = None):
        """更新进度"""
        if self.pbar:
            self.pbar.update(n)
            if postfix:
                self.pbar.set_postfix_str(postfix)
