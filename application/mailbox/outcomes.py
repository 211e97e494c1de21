"""查询结果与错误映射"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from domain.common.exceptions import MailboxError, MailboxErrorKind


class QueryStatus(str, Enum):
    """查询对外结果"""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    INTERNAL_FAILURE = "internal_failure"


# 所有错误类型都必须在此登记。邮箱名非法也归为内部失败，与既有行为保持一致
_STATUS_BY_KIND: Dict[MailboxErrorKind, QueryStatus] = {
    MailboxErrorKind.INVALID_MAILBOX_NAME: QueryStatus.INTERNAL_FAILURE,
    MailboxErrorKind.MAILBOX_LOOKUP_FAILURE: QueryStatus.INTERNAL_FAILURE,
    MailboxErrorKind.MESSAGE_NOT_FOUND: QueryStatus.NOT_FOUND,
    MailboxErrorKind.MESSAGE_BODY_FAILURE: QueryStatus.INTERNAL_FAILURE,
    MailboxErrorKind.MESSAGE_WRITE_FAILURE: QueryStatus.INTERNAL_FAILURE,
}


def status_for_error(kind: MailboxErrorKind) -> QueryStatus:
    """把存储错误类型映射为查询结果"""
    return _STATUS_BY_KIND[kind]


@dataclass
class MailboxQueryResult:
    """
    邮箱查询结果

    Attributes:
        status: 对外结果
        data: 成功时的文档（列表或单封邮件）
        error_code: 失败时的错误类型
        message: 失败时的诊断信息
    """

    status: QueryStatus
    data: Any = None
    error_code: Optional[str] = None
    message: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status == QueryStatus.SUCCESS

    @classmethod
    def ok(cls, data: Any) -> "MailboxQueryResult":
        return cls(status=QueryStatus.SUCCESS, data=data)

    @classmethod
    def from_error(cls, error: MailboxError) -> "MailboxQueryResult":
        return cls(
            status=status_for_error(error.kind),
            error_code=error.kind.value,
            message=error.message,
        )
