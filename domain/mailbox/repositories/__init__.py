"""邮箱仓储接口模块"""

from domain.mailbox.repositories.mailbox_store import MailboxStore

__all__ = ["MailboxStore"]
