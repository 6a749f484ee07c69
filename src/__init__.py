"""
区块链标识符解析项目（"这是什么字符串"）

主要模块:
- engine: 分类、注册表分派、连接缓存与排序
- codec: hex/bech32/BIP39 编解码与 HD 派生
- ledger: 账本节点客户端（BNS、Lisk、RISE）
- config: 运行配置与网络目录
- utils: 工具函数
"""

__version__ = "1.0.0"

# 导入主要类和函数
from .engine import ConnectionCache, classify, create_dispatch_context, process_input

__all__ = [
    "ConnectionCache",
    "classify",
    "create_dispatch_context",
    "process_input",
]
