"""查询邮箱邮件列表处理器"""

import logging
from typing import Optional

from application.mailbox.documents import render_listing
from application.mailbox.outcomes import MailboxQueryResult
from application.queries.mailbox.list_mailbox_messages import ListMailboxMessagesQuery
from common.logging import get_logger
from domain.common.exceptions import MailboxError
from domain.mailbox.repositories.mailbox_store import MailboxStore
from domain.mailbox.value_objects.mailbox_name import parse_mailbox_name


class ListMailboxMessagesHandler:
    """
    查询邮箱邮件列表处理器

    处理 ListMailboxMessagesQuery：校验邮箱名 -> 查询存储 -> 渲染摘要列表。
    """

    def __init__(self, store: MailboxStore, logger: Optional[logging.Logger] = None):
        """
        初始化处理器

        Args:
            store: 邮箱存储
            logger: 日志记录器
        """
        self._store = store
        self._logger = logger or get_logger(__name__)

    def handle(self, query: ListMailboxMessagesQuery) -> MailboxQueryResult:
        """
        处理查询请求

        Args:
            query: 查询参数

        Returns:
            MailboxQueryResult: 成功时 data 为摘要文档列表
        """
        self._logger.debug(f"Handling ListMailboxMessagesQuery for mailbox={query.mailbox!r}")

        try:
            name = parse_mailbox_name(query.mailbox)
            items = self._store.list(name)
        except MailboxError as e:
            self._logger.warning(f"Failed to list mailbox {query.mailbox!r}: {e.message}")
            return MailboxQueryResult.from_error(e)

        self._logger.debug(f"Mailbox {name!r} contains {len(items)} message(s)")
        return MailboxQueryResult.ok(render_listing(items))
