"""邮箱处理器模块"""

from application.handlers.mailbox.deliver_message_handler import (
    DeliverMessageHandler,
    DeliverMessageResult,
)
from application.handlers.mailbox.get_mailbox_message_handler import GetMailboxMessageHandler
from application.handlers.mailbox.list_mailbox_messages_handler import (
    ListMailboxMessagesHandler,
)

__all__ = [
    "DeliverMessageHandler",
    "DeliverMessageResult",
    "GetMailboxMessageHandler",
    "ListMailboxMessagesHandler",
]
