"""邮箱值对象模块"""

from domain.mailbox.value_objects.address import Address
from domain.mailbox.value_objects.mailbox_name import is_valid_mailbox_name, parse_mailbox_name
from domain.mailbox.value_objects.timestamp import Timestamp

__all__ = [
    "Address",
    "Timestamp",
    "parse_mailbox_name",
    "is_valid_mailbox_name",
]
