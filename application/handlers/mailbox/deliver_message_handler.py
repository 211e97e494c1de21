"""投递邮件处理器"""

import logging
from dataclasses import dataclass
from typing import Optional

from application.commands.mailbox.deliver_message import DeliverMessageCommand
from common.logging import get_logger
from domain.common.exceptions import InvalidOperationException, MailboxError
from domain.mailbox.entities.message import Message
from domain.mailbox.repositories.mailbox_store import MailboxStore
from domain.mailbox.value_objects.mailbox_name import parse_mailbox_name


@dataclass
class DeliverMessageResult:
    """
    投递结果

    Attributes:
        success: 是否成功
        mailbox: 规范化后的邮箱名（成功时）
        message_id: 邮件 ID
        message: 结果消息
        error_code: 错误代码（失败时）
    """

    success: bool
    mailbox: Optional[str] = None
    message_id: str = ""
    message: str = ""
    error_code: Optional[str] = None


class DeliverMessageHandler:
    """
    投递邮件处理器

    业务流程：
    1. 校验并规范化邮箱名
    2. 构建 Message
    3. 写入存储（ID 重复时失败，不覆盖）
    """

    def __init__(self, store: MailboxStore, logger: Optional[logging.Logger] = None):
        """
        初始化处理器

        Args:
            store: 邮箱存储
            logger: 日志记录器
        """
        self._store = store
        self._logger = logger or get_logger(__name__)

    def handle(self, command: DeliverMessageCommand) -> DeliverMessageResult:
        """
        处理投递命令

        Args:
            command: 投递邮件命令

        Returns:
            DeliverMessageResult 处理结果
        """
        try:
            name = parse_mailbox_name(command.mailbox)
            message = Message.create(
                mailbox=name,
                id=command.message_id,
                from_address=command.from_address,
                date=command.date,
                to=command.to,
                subject=command.subject,
                size=command.size,
                envelope=command.envelope,
            )
            self._store.add(name, message)
        except MailboxError as e:
            self._logger.warning(f"Failed to deliver message {command.message_id!r}: {e.message}")
            return DeliverMessageResult(
                success=False,
                message_id=command.message_id,
                message=e.message,
                error_code=e.kind.value,
            )
        except InvalidOperationException as e:
            self._logger.warning(f"Rejected message {command.message_id!r}: {e.reason}")
            return DeliverMessageResult(
                success=False,
                message_id=command.message_id,
                message=e.reason,
                error_code="INVALID_MESSAGE",
            )

        self._logger.info(f"Delivered message {name}/{command.message_id}")
        return DeliverMessageResult(
            success=True,
            mailbox=name,
            message_id=command.message_id,
            message="Message delivered",
        )
