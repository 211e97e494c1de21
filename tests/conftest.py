"""公共测试夹具"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence

import pytest

from domain.mailbox.entities.message import Envelope, Message
from domain.mailbox.value_objects.address import Address
from domain.mailbox.value_objects.timestamp import Timestamp

PST = timezone(timedelta(hours=-8), "PST")


def build_message(
    mailbox: str = "good",
    id: str = "0001",
    from_address: str = "from1@host",
    to: Sequence[str] = ("to1@host",),
    subject: str = "subject 1",
    date: Optional[Timestamp] = None,
    size: int = 0,
    envelope: Optional[Envelope] = None,
) -> Message:
    """构造测试邮件"""
    if date is None:
        date = Timestamp(moment=datetime(2012, 2, 1, 10, 11, 12, tzinfo=PST), nanosecond=253)
    return Message.create(
        mailbox=mailbox,
        id=id,
        from_address=Address(address=from_address),
        date=date,
        to=[Address(address=address) for address in to],
        subject=subject,
        size=size,
        envelope=envelope,
    )


@pytest.fixture
def make_message():
    """邮件工厂夹具"""
    return build_message


@pytest.fixture
def sample_envelope() -> Envelope:
    """带正文和重复头部的 envelope"""
    return Envelope(
        text="This is some text",
        html="This is some HTML",
        headers={
            "To": ["fred@fish.com", "keyword@nsa.gov"],
            "From": ["noreply@inbucket.org"],
        },
    )
