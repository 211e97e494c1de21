"""邮箱查询的文档渲染与结果映射"""

from application.mailbox.documents import (
    format_address,
    format_timestamp,
    render_listing,
    render_message,
    render_summary,
)
from application.mailbox.outcomes import MailboxQueryResult, QueryStatus, status_for_error

__all__ = [
    "MailboxQueryResult",
    "QueryStatus",
    "format_address",
    "format_timestamp",
    "render_listing",
    "render_message",
    "render_summary",
    "status_for_error",
]
