"""查询邮箱邮件列表"""

from dataclasses import dataclass


@dataclass
class ListMailboxMessagesQuery:
    """
    查询邮箱内的邮件摘要列表

    Attributes:
        mailbox: 邮箱名（未校验的原始值）
    """

    mailbox: str
