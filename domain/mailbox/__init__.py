"""
邮箱界限上下文

提供一次性邮箱的领域模型，包括：
- Message 实体（Metadata + Envelope）
- Address, Timestamp 值对象
- 邮箱名校验
- MailboxStore 存储接口
"""

from domain.mailbox.entities.message import Envelope, Message, Metadata
from domain.mailbox.repositories.mailbox_store import MailboxStore
from domain.mailbox.value_objects.address import Address
from domain.mailbox.value_objects.mailbox_name import is_valid_mailbox_name, parse_mailbox_name
from domain.mailbox.value_objects.timestamp import Timestamp

__all__ = [
    "Address",
    "Envelope",
    "MailboxStore",
    "Message",
    "Metadata",
    "Timestamp",
    "is_valid_mailbox_name",
    "parse_mailbox_name",
]
