"""
账本查询结果数据类
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional


@dataclass(frozen=True)
class Amount:
    """链上金额：整数原子单位 + 小数位数"""

    quantity: int
    fractional_digits: int
    ticker: str

    def __str__(self) -> str:
        value = Decimal(self.quantity).scaleb(-self.fractional_digits)
        text = format(value.normalize(), "f") if self.quantity else "0"
        return f"{text} {self.ticker}"


@dataclass(frozen=True)
class Account:
    """账户信息"""

    address: str
    balance: List[Amount] = field(default_factory=list)
    pubkey: Optional[str] = None


@dataclass(frozen=True)
class ChainAddress:
    """用户名指向的链上地址"""

    chain_id: str
    address: str


@dataclass(frozen=True)
class Username:
    """BNS 用户名"""

    id: str
    owner: str
    targets: List[ChainAddress] = field(default_factory=list)
