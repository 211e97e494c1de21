"""日志配置测试"""

import logging

import pytest

import common.logging as app_logging
from common.logging import configure_logging, get_logger


@pytest.fixture
def clean_root_logger(monkeypatch):
    """隔离根 logger 的 handler 和级别"""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    monkeypatch.setattr(app_logging, "_configured", False)
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestGetLogger:
    """get_logger 测试"""

    def test_returns_named_logger(self):
        """测试返回指定名称的 logger"""
        logger = get_logger("infrastructure.mailstore.memory_mailbox_store")

        assert logger is logging.getLogger("infrastructure.mailstore.memory_mailbox_store")

    def test_store_uses_module_logger_by_default(self):
        """测试存储未注入 logger 时使用模块 logger"""
        from infrastructure.mailstore.memory_mailbox_store import InMemoryMailboxStore

        store = InMemoryMailboxStore()

        assert store._logger is get_logger("infrastructure.mailstore.memory_mailbox_store")


class TestConfigureLogging:
    """configure_logging 测试"""

    def test_sets_level(self, clean_root_logger):
        """测试设置根 logger 级别"""
        configure_logging("debug")

        assert clean_root_logger.level == logging.DEBUG

    def test_repeated_calls_do_not_add_handlers(self, clean_root_logger):
        """测试重复调用不会重复添加 handler，但会更新级别"""
        configure_logging("INFO")
        handler_count = len(clean_root_logger.handlers)

        configure_logging("WARNING")

        assert len(clean_root_logger.handlers) == handler_count
        assert clean_root_logger.level == logging.WARNING
