"""
运行配置模块

从环境变量（支持 .env 文件）读取解析引擎的运行参数。
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Optional

from dotenv import load_dotenv

# 加载环境变量
load_dotenv()


@dataclass
class ExplorerConfig:
    """解析引擎配置"""

    # 网络请求
    http_timeout: float = 15.0

    # 日志
    log_level: str = "INFO"

    # HD 钱包每个币种展示的地址数量
    hd_address_count: int = 5

    # 网络地址覆盖：环境变量名 -> URL
    url_overrides: Dict[str, str] = field(default_factory=dict)

    def url_for(self, env_key: str, default: str) -> str:
        """返回某个网络的 URL，存在覆盖时优先使用覆盖值"""
        return self.url_overrides.get(env_key, default)


# 允许通过环境变量覆盖的网络地址
URL_OVERRIDE_KEYS = (
    "IOV_TESTNET_BNS_URL",
    "IOV_TESTNET_BCP_URL",
    "IOV_MAINNET_BNS_URL",
    "LISK_TESTNET_URL",
    "LISK_MAINNET_URL",
    "RISE_TESTNET_URL",
    "RISE_MAINNET_URL",
)


def _get_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"环境变量 {key} 不是有效的数字: {value!r}")


def _get_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"环境变量 {key} 不是有效的整数: {value!r}")


def load_config() -> ExplorerConfig:
    """
    从环境变量构建配置

    支持的环境变量:
        EXPLORER_HTTP_TIMEOUT: HTTP 请求超时（秒）
        LOG_LEVEL: 日志级别
        EXPLORER_HD_ADDRESS_COUNT: HD 钱包展示地址数量
        IOV_TESTNET_BNS_URL 等: 覆盖内置网络目录中的 URL

    Returns:
        ExplorerConfig 实例
    """
    overrides = {}
    for key in URL_OVERRIDE_KEYS:
        value = os.getenv(key)
        if value:
            overrides[key] = value.rstrip("/")

    hd_address_count = _get_int("EXPLORER_HD_ADDRESS_COUNT", 5)
    if hd_address_count < 1:
        raise ValueError("EXPLORER_HD_ADDRESS_COUNT 必须大于 0")

    return ExplorerConfig(
        http_timeout=_get_float("EXPLORER_HTTP_TIMEOUT", 15.0),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        hd_address_count=hd_address_count,
        url_overrides=overrides,
    )


_CONFIG: Optional[ExplorerConfig] = None


def get_config() -> ExplorerConfig:
    """惰性获取全局配置"""
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = load_config()
    return _CONFIG
