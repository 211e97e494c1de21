"""投递邮件命令"""

from dataclasses import dataclass, field
from typing import List, Optional

from domain.mailbox.entities.message import Envelope
from domain.mailbox.value_objects.address import Address
from domain.mailbox.value_objects.timestamp import Timestamp


@dataclass
class DeliverMessageCommand:
    """
    投递邮件命令（由收信链路调用）

    Attributes:
        mailbox: 目标邮箱名（未校验的原始值）
        message_id: 写入方分配的邮件 ID
        from_address: 发件人
        date: 邮件时间
        to: 收件人列表
        subject: 主题
        size: 大小（字节），未计算时为 0
        envelope: 解析后的内容（可选）
    """

    mailbox: str
    message_id: str
    from_address: Address
    date: Timestamp
    to: List[Address] = field(default_factory=list)
    subject: str = ""
    size: int = 0
    envelope: Optional[Envelope] = None
