"""解析引擎异常定义"""


class InterpretationError(Exception):
    """解析引擎错误基类"""


class UnsupportedFormatError(InterpretationError):
    """输入结构合法但格式不受支持（如助记词熵长度）"""


class DuplicateDisplayIdError(InterpretationError):
    """同一次分派中出现重复的展示 id，说明注册表配置有误"""

    def __init__(self, display_id: str):
        self.display_id = display_id
        super().__init__(f"重复的展示 id: {display_id}")


class ResolutionInProgressError(InterpretationError):
    """同一个交互展示已经在获取数据"""

    def __init__(self, display_id: str):
        self.display_id = display_id
        super().__init__(f"展示 {display_id} 正在获取数据，不能重复触发")
