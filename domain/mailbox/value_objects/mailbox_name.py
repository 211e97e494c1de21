"""邮箱名校验"""

import string

from domain.common.exceptions import MailboxError, MailboxErrorKind

# RFC 5322 atext，去掉路径分隔符 "/"
_ALLOWED_CHARS = frozenset(string.ascii_letters + string.digits + "!#$%&'*+-=?^_`.{|}~")


def parse_mailbox_name(name: str) -> str:
    """
    校验并规范化邮箱名

    只接受类似邮件 local-part 的名字：不能为空，不能包含 "@"、路径分隔符、
    空白或其他非法字符。合法名字统一转小写，并去掉 "+tag" 后缀。

    Args:
        name: 原始邮箱名

    Returns:
        规范化后的邮箱名

    Raises:
        MailboxError: kind 为 INVALID_MAILBOX_NAME
    """
    if not name:
        raise MailboxError(
            MailboxErrorKind.INVALID_MAILBOX_NAME,
            mailbox=name,
            reason="Mailbox name cannot be empty",
        )

    invalid = sorted({c for c in name if c not in _ALLOWED_CHARS})
    if invalid:
        raise MailboxError(
            MailboxErrorKind.INVALID_MAILBOX_NAME,
            mailbox=name,
            reason=f"Mailbox name contained invalid character(s): {''.join(invalid)!r}",
        )

    local_part = name.split("+", 1)[0]
    if not local_part:
        raise MailboxError(
            MailboxErrorKind.INVALID_MAILBOX_NAME,
            mailbox=name,
            reason="Mailbox name cannot be empty before '+'",
        )

    return local_part.lower()


def is_valid_mailbox_name(name: str) -> bool:
    """检查邮箱名是否合法"""
    try:
        parse_mailbox_name(name)
    except MailboxError:
        return False
    return True
