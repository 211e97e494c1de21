"""内存邮箱存储实现"""

import logging
import threading
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from common.logging import get_logger
from domain.common.exceptions import MailboxError, MailboxErrorKind
from domain.mailbox.entities.message import Message, Metadata
from domain.mailbox.repositories.mailbox_store import MailboxStore
from domain.mailbox.value_objects.mailbox_name import parse_mailbox_name


class _MailboxSlot:
    """
    单个邮箱的存储槽

    messages 是只读快照，写入时在 lock 内复制并整体替换，
    读取方直接拿当前快照，无需加锁，也不会看到写了一半的数据。
    """

    __slots__ = ("lock", "messages")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.messages: Mapping[str, Message] = MappingProxyType({})


class InMemoryMailboxStore(MailboxStore):
    """
    内存邮箱存储

    两级索引：邮箱名 -> 邮件 ID -> 邮件。dict 保持插入顺序，
    因此列表结果天然按写入顺序排列。写操作只锁对应邮箱，
    索引锁仅在首次创建邮箱时短暂持有。
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        初始化存储

        Args:
            logger: 日志记录器
        """
        self._mailboxes: Dict[str, _MailboxSlot] = {}
        self._index_lock = threading.Lock()
        self._logger = logger or get_logger(__name__)

    def add(self, mailbox: str, message: Message) -> None:
        """追加邮件"""
        if not self._is_canonical(mailbox):
            raise MailboxError(
                MailboxErrorKind.MESSAGE_WRITE_FAILURE,
                mailbox=mailbox,
                message_id=message.id,
                reason="Mailbox key must be a normalised mailbox name",
            )

        if message.mailbox != mailbox:
            raise MailboxError(
                MailboxErrorKind.MESSAGE_WRITE_FAILURE,
                mailbox=mailbox,
                message_id=message.id,
                reason=f"Message belongs to mailbox {message.mailbox!r}",
            )

        slot = self._slot_for_write(mailbox)
        with slot.lock:
            current = slot.messages
            if message.id in current:
                raise MailboxError(
                    MailboxErrorKind.MESSAGE_WRITE_FAILURE,
                    mailbox=mailbox,
                    message_id=message.id,
                    reason="Duplicate message ID",
                )
            updated = dict(current)
            updated[message.id] = message
            slot.messages = MappingProxyType(updated)

        self._logger.debug(f"Stored message {mailbox}/{message.id}")

    def list(self, mailbox: str) -> List[Metadata]:
        """获取邮箱内所有元数据，按写入顺序"""
        messages = self._snapshot(mailbox)
        return [message.metadata for message in messages.values()]

    def get(self, mailbox: str, message_id: str) -> Message:
        """获取完整邮件"""
        message = self._snapshot(mailbox).get(message_id)
        if message is None:
            raise MailboxError(
                MailboxErrorKind.MESSAGE_NOT_FOUND,
                mailbox=mailbox,
                message_id=message_id,
            )
        return message

    def remove(self, mailbox: str, message_id: str) -> None:
        """删除邮件"""
        slot = self._mailboxes.get(mailbox)
        if slot is None:
            raise MailboxError(
                MailboxErrorKind.MESSAGE_NOT_FOUND,
                mailbox=mailbox,
                message_id=message_id,
            )

        with slot.lock:
            current = slot.messages
            if message_id not in current:
                raise MailboxError(
                    MailboxErrorKind.MESSAGE_NOT_FOUND,
                    mailbox=mailbox,
                    message_id=message_id,
                )
            updated = {key: value for key, value in current.items() if key != message_id}
            slot.messages = MappingProxyType(updated)

        self._logger.debug(f"Removed message {mailbox}/{message_id}")

    def count(self, mailbox: str) -> int:
        """邮箱内邮件数量"""
        return len(self._snapshot(mailbox))

    def _snapshot(self, mailbox: str) -> Mapping[str, Message]:
        slot = self._mailboxes.get(mailbox)
        if slot is None:
            return MappingProxyType({})
        return slot.messages

    @staticmethod
    def _is_canonical(mailbox: str) -> bool:
        try:
            return parse_mailbox_name(mailbox) == mailbox
        except MailboxError:
            return False

    def _slot_for_write(self, mailbox: str) -> _MailboxSlot:
        slot = self._mailboxes.get(mailbox)
        if slot is None:
            with self._index_lock:
                slot = self._mailboxes.setdefault(mailbox, _MailboxSlot())
        return slot
