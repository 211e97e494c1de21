"""查询单封邮件"""

from dataclasses import dataclass


@dataclass
class GetMailboxMessageQuery:
    """
    查询单封邮件的完整内容

    Attributes:
        mailbox: 邮箱名（未校验的原始值）
        message_id: 邮件 ID
    """

    mailbox: str
    message_id: str
