"""邮箱实体模块"""

from domain.mailbox.entities.message import Envelope, Message, Metadata

__all__ = ["Envelope", "Message", "Metadata"]
