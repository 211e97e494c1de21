"""Mailbox queries package"""

from application.queries.mailbox.get_mailbox_message import GetMailboxMessageQuery
from application.queries.mailbox.list_mailbox_messages import ListMailboxMessagesQuery

__all__ = [
    "GetMailboxMessageQuery",
    "ListMailboxMessagesQuery",
]
