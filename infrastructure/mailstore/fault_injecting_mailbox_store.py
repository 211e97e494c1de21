"""可注入故障的邮箱存储"""

import threading
from typing import FrozenSet, List, Optional, Tuple

from domain.common.exceptions import MailboxError, MailboxErrorKind
from domain.mailbox.entities.message import Message, Metadata
from domain.mailbox.repositories.mailbox_store import MailboxStore


class FaultInjectingMailboxStore(MailboxStore):
    """
    故障注入存储装饰器

    包装任意 MailboxStore，可以让指定邮箱的解析失败，
    或让已存在邮件的正文读取失败。用于测试查询层的错误映射。
    """

    def __init__(self, inner: MailboxStore):
        """
        Args:
            inner: 被包装的存储
        """
        self._inner = inner
        self._lock = threading.Lock()
        self._lookup_failures: FrozenSet[str] = frozenset()
        self._body_failures: FrozenSet[Tuple[str, Optional[str]]] = frozenset()

    def fail_lookup(self, mailbox: str) -> None:
        """之后对该邮箱的 list/get 都抛出 MAILBOX_LOOKUP_FAILURE"""
        with self._lock:
            self._lookup_failures = self._lookup_failures | {mailbox}

    def fail_body(self, mailbox: str, message_id: Optional[str] = None) -> None:
        """
        之后 get 已存在的邮件时抛出 MESSAGE_BODY_FAILURE

        Args:
            mailbox: 邮箱名
            message_id: 邮件 ID，不提供则对该邮箱所有邮件生效
        """
        with self._lock:
            self._body_failures = self._body_failures | {(mailbox, message_id)}

    def reset(self) -> None:
        """清除所有注入的故障"""
        with self._lock:
            self._lookup_failures = frozenset()
            self._body_failures = frozenset()

    def add(self, mailbox: str, message: Message) -> None:
        self._inner.add(mailbox, message)

    def list(self, mailbox: str) -> List[Metadata]:
        self._check_lookup(mailbox)
        return self._inner.list(mailbox)

    def get(self, mailbox: str, message_id: str) -> Message:
        self._check_lookup(mailbox)
        message = self._inner.get(mailbox, message_id)

        failures = self._body_failures
        if (mailbox, None) in failures or (mailbox, message_id) in failures:
            raise MailboxError(
                MailboxErrorKind.MESSAGE_BODY_FAILURE,
                mailbox=mailbox,
                message_id=message_id,
                reason="Injected body failure",
            )
        return message

    def remove(self, mailbox: str, message_id: str) -> None:
        self._inner.remove(mailbox, message_id)

    def count(self, mailbox: str) -> int:
        self._check_lookup(mailbox)
        return self._inner.count(mailbox)

    def _check_lookup(self, mailbox: str) -> None:
        if mailbox in self._lookup_failures:
            raise MailboxError(
                MailboxErrorKind.MAILBOX_LOOKUP_FAILURE,
                mailbox=mailbox,
                reason="Injected lookup failure",
            )
