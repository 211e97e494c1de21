"""领域异常"""

from enum import Enum
from typing import Any, Optional


class DomainException(Exception):
    """领域异常基类"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidValueObjectException(DomainException):
    """
    值对象校验失败

    Attributes:
        value_object_type: 值对象类型名
        value: 导致失败的值
        reason: 失败原因
    """

    def __init__(self, value_object_type: str, value: Any, reason: str):
        self.value_object_type = value_object_type
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {value_object_type} ({value!r}): {reason}")


class InvalidOperationException(DomainException):
    """
    非法操作

    Attributes:
        operation: 操作名
        reason: 失败原因
    """

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"Invalid operation '{operation}': {reason}")


class MailboxErrorKind(str, Enum):
    """邮箱存储错误类型（封闭集合）"""

    INVALID_MAILBOX_NAME = "invalid_mailbox_name"
    """邮箱名不合法"""

    MAILBOX_LOOKUP_FAILURE = "mailbox_lookup_failure"
    """邮箱解析本身失败（区别于邮箱为空或邮件不存在）"""

    MESSAGE_NOT_FOUND = "message_not_found"
    """邮箱中不存在该邮件"""

    MESSAGE_BODY_FAILURE = "message_body_failure"
    """元数据存在，但正文读取失败"""

    MESSAGE_WRITE_FAILURE = "message_write_failure"
    """写入失败（重复 ID 或邮箱不匹配）"""


class MailboxError(DomainException):
    """
    邮箱存储错误

    存储层只抛出这一种异常，通过 kind 区分失败类型，
    由查询层穷举映射为对外结果。

    Attributes:
        kind: 错误类型
        mailbox: 相关邮箱名
        message_id: 相关邮件 ID（可选）
        reason: 诊断信息
    """

    def __init__(
        self,
        kind: MailboxErrorKind,
        mailbox: str,
        message_id: Optional[str] = None,
        reason: str = "",
    ):
        self.kind = kind
        self.mailbox = mailbox
        self.message_id = message_id
        self.reason = reason

        target = mailbox if message_id is None else f"{mailbox}/{message_id}"
        message = f"{kind.value}: {target}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
