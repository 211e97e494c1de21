"""邮箱存储接口"""

from abc import ABC, abstractmethod
from typing import List

from domain.mailbox.entities.message import Message, Metadata


class MailboxStore(ABC):
    """
    邮箱存储接口

    按邮箱名、再按邮件 ID 两级寻址的邮件仓储，具体实现在基础设施层。
    所有失败都以 MailboxError 抛出，不涉及任何传输层语义。
    实现必须支持多线程并发读写。
    """

    @abstractmethod
    def add(self, mailbox: str, message: Message) -> None:
        """
        追加邮件，邮箱不存在时自动创建

        Args:
            mailbox: 邮箱名
            message: 邮件，ID 已由写入方分配

        Raises:
            MailboxError: MESSAGE_WRITE_FAILURE（ID 重复或邮箱名不一致）
        """
        raise NotImplementedError

    @abstractmethod
    def list(self, mailbox: str) -> List[Metadata]:
        """
        获取邮箱内所有邮件的元数据

        Args:
            mailbox: 邮箱名

        Returns:
            按写入顺序排列的元数据列表，邮箱从未写入过时返回空列表

        Raises:
            MailboxError: MAILBOX_LOOKUP_FAILURE
        """
        raise NotImplementedError

    @abstractmethod
    def get(self, mailbox: str, message_id: str) -> Message:
        """
        获取完整邮件

        Args:
            mailbox: 邮箱名
            message_id: 邮件 ID

        Returns:
            邮件（元数据 + 内容）

        Raises:
            MailboxError: MESSAGE_NOT_FOUND, MAILBOX_LOOKUP_FAILURE 或 MESSAGE_BODY_FAILURE
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, mailbox: str, message_id: str) -> None:
        """
        删除邮件

        Raises:
            MailboxError: MESSAGE_NOT_FOUND
        """
        raise NotImplementedError

    def count(self, mailbox: str) -> int:
        """邮箱内邮件数量"""
        return len(self.list(mailbox))
