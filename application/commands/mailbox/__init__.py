"""Mailbox commands package"""

from application.commands.mailbox.deliver_message import DeliverMessageCommand

__all__ = ["DeliverMessageCommand"]
