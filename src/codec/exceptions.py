"""编解码异常定义"""


class CodecError(ValueError):
    """编码、解码或密钥派生失败"""
