"""
日志配置

基于标准 logging。应用启动时调用一次 configure_logging()，
各模块通过 get_logger(__name__) 获取 logger。
"""

import logging
import sys

_configured = False


def configure_logging(level: str = "INFO", fmt: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s") -> None:
    """
    配置根 logger

    重复调用只会更新日志级别，不会重复添加 handler。

    Args:
        level: 日志级别名称
        fmt: 日志格式
    """
    global _configured

    root = logging.getLogger()
    root.setLevel(level.upper())

    if _configured:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """获取 logger"""
    return logging.getLogger(name)
