#!/usr/bin/env python3
"""
区块链标识符解析项目主入口文件

使用方式:
    python main.py <输入>                       # 列出所有可能的解析
    python main.py <输入> --resolve             # 同时查询需要联网的解析
    python main.py --file inputs.txt            # 批量解析（每行一个输入）
    python main.py --file inputs.txt --export data/results.csv
    python main.py --test                       # 运行单元测试

核心模块使用:
    from src.engine import process_input, create_dispatch_context
"""

import argparse
import asyncio
import logging
import subprocess
import sys
from pathlib import Path

from src.config.settings import get_config
from src.engine import create_dispatch_context, process_input, process_inputs, resolve_all
from src.utils.display_utils import print_displays
from src.utils.export_utils import export_displays_csv


async def explain(values, resolve: bool, export_path=None) -> None:
    """解析输入并打印结果"""
    context = create_dispatch_context()

    if len(values) == 1:
        results = {values[0]: await process_input(values[0], context)}
    else:
        results = await process_inputs(values, context)

    resolutions = {}
    if resolve:
        for displays in results.values():
            resolutions.update(await resolve_all(displays))

    for value, displays in results.items():
        print_displays(displays, resolutions, title=f"🔍 {value}")

    if export_path:
        export_displays_csv(results, export_path, resolutions)


def run_tests():
    """运行所有单元测试

    测试目录不是包，按子目录逐个 discover。
    """
    print("🧪 运行所有单元测试...")
    tests_root = Path(__file__).parent / "tests"
    test_dirs = sorted(path for path in tests_root.iterdir() if path.is_dir())

    failed = []
    for test_dir in test_dirs:
        print(f"\n--- {test_dir.name} ---")
        try:
            result = subprocess.run(
                [sys.executable, "-m", "unittest", "discover", "-s", str(test_dir)],
                capture_output=True,
                text=True,
                check=True,
            )
            # unittest 把结果摘要写到标准错误
            print(result.stderr)
        except subprocess.CalledProcessError as e:
            failed.append(test_dir.name)
            print(e.stdout)
            print(e.stderr)

    if failed:
        print(f"❌ 部分测试未通过: {', '.join(failed)}")
        sys.exit(1)
    print("✅ 全部测试通过")


def main():
    """项目主入口函数

    解析命令行参数并根据选项运行对应功能。
    """
    parser = argparse.ArgumentParser(description="区块链标识符解析")
    parser.add_argument("input", nargs="?", help="要解析的字符串")
    parser.add_argument("--file", help="批量输入文件，每行一个")
    parser.add_argument("--resolve", action="store_true", help="查询需要联网的解析")
    parser.add_argument("--export", help="导出结果到 CSV")
    parser.add_argument("--test", action="store_true", help="运行单元测试")

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, get_config().log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.test:
        run_tests()
        return

    if args.file:
        lines = Path(args.file).read_text(encoding="utf-8").splitlines()
        values = [line.strip() for line in lines if line.strip()]
        duplicates = len(values) - len(set(values))
        if duplicates:
            print(f"ℹ️ 已合并 {duplicates} 个重复输入")
    elif args.input:
        values = [args.input.strip()]
    else:
        parser.error("需要提供输入字符串或 --file")

    if not values:
        print("❌ 没有可解析的输入")
        sys.exit(1)

    asyncio.run(explain(values, args.resolve, args.export))


if __name__ == "__main__":
    main()
