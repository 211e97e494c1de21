"""查询单封邮件处理器"""

import logging
from typing import Optional

from application.mailbox.documents import render_message
from application.mailbox.outcomes import MailboxQueryResult, QueryStatus
from application.queries.mailbox.get_mailbox_message import GetMailboxMessageQuery
from common.logging import get_logger
from domain.common.exceptions import MailboxError
from domain.mailbox.repositories.mailbox_store import MailboxStore
from domain.mailbox.value_objects.mailbox_name import parse_mailbox_name


class GetMailboxMessageHandler:
    """
    查询单封邮件处理器

    处理 GetMailboxMessageQuery，返回包含正文和头部的完整邮件文档。
    邮件不存在时返回 NOT_FOUND，其余失败一律为 INTERNAL_FAILURE。
    """

    def __init__(self, store: MailboxStore, logger: Optional[logging.Logger] = None):
        self._store = store
        self._logger = logger or get_logger(__name__)

    def handle(self, query: GetMailboxMessageQuery) -> MailboxQueryResult:
        """
        处理查询请求

        Args:
            query: 查询对象，包含邮箱名和邮件 ID

        Returns:
            MailboxQueryResult: 成功时 data 为完整邮件文档
        """
        self._logger.debug(
            f"Handling GetMailboxMessageQuery for {query.mailbox!r}/{query.message_id!r}"
        )

        try:
            name = parse_mailbox_name(query.mailbox)
            message = self._store.get(name, query.message_id)
        except MailboxError as e:
            result = MailboxQueryResult.from_error(e)
            if result.status == QueryStatus.NOT_FOUND:
                self._logger.debug(f"Message {query.mailbox!r}/{query.message_id!r} not found")
            else:
                self._logger.warning(
                    f"Failed to get message {query.mailbox!r}/{query.message_id!r}: {e.message}"
                )
            return result

        return MailboxQueryResult.ok(render_message(message))
