"""Message 实体测试"""

from dataclasses import FrozenInstanceError

import pytest

from domain.common.exceptions import InvalidOperationException
from domain.mailbox.entities.message import Envelope, Message, Metadata
from domain.mailbox.value_objects.address import Address


class TestMessageCreate:
    """Message.create() 工厂方法测试"""

    def test_create_message_with_required_fields(self, make_message):
        """测试使用必需字段创建邮件"""
        message = make_message()

        assert message.mailbox == "good"
        assert message.id == "0001"
        assert message.metadata.from_address == Address(address="from1@host")
        assert message.metadata.to == (Address(address="to1@host"),)
        assert message.metadata.size == 0
        assert message.envelope is None
        assert message.has_envelope is False

    def test_to_order_is_preserved(self, make_message):
        """测试收件人顺序保持不变"""
        message = make_message(to=["c@host", "a@host", "b@host"])

        assert [a.address for a in message.metadata.to] == ["c@host", "a@host", "b@host"]

    def test_to_list_is_copied(self, make_message):
        """测试修改原收件人列表不影响元数据"""
        recipients = [Address(address="a@host")]
        message = Message.create(
            mailbox="good",
            id="0001",
            from_address=Address(address="from@host"),
            date=make_message().metadata.date,
            to=recipients,
        )

        recipients.append(Address(address="b@host"))

        assert len(message.metadata.to) == 1


class TestMetadataValidation:
    """Metadata 验证测试"""

    def test_invalid_mailbox_raises_exception(self, make_message):
        """测试非法邮箱名抛出异常"""
        with pytest.raises(InvalidOperationException) as exc_info:
            make_message(mailbox="foo@bar")

        assert "Invalid mailbox name" in str(exc_info.value)

    @pytest.mark.parametrize("mailbox", ["Bob", "bob+tag", "GOOD"])
    def test_non_normalised_mailbox_raises_exception(self, make_message, mailbox):
        """测试未规范化的邮箱名（大写、带 +tag）被拒绝"""
        with pytest.raises(InvalidOperationException) as exc_info:
            make_message(mailbox=mailbox)

        assert "must be normalised" in str(exc_info.value)

    def test_empty_id_raises_exception(self, make_message):
        """测试空 ID 抛出异常"""
        with pytest.raises(InvalidOperationException) as exc_info:
            make_message(id="")

        assert "Message ID cannot be empty" in str(exc_info.value)

    def test_negative_size_raises_exception(self, make_message):
        """测试负数大小抛出异常"""
        with pytest.raises(InvalidOperationException):
            make_message(size=-1)


class TestImmutability:
    """不可变性测试"""

    def test_metadata_is_frozen(self, make_message):
        """测试元数据不可修改"""
        message = make_message()

        with pytest.raises(FrozenInstanceError):
            message.metadata.subject = "changed"  # type: ignore[misc]

    def test_envelope_headers_are_read_only(self):
        """测试头部不可修改"""
        envelope = Envelope(headers={"To": ["a@host"]})

        with pytest.raises(TypeError):
            envelope.headers["To"] = ("b@host",)  # type: ignore[index]

    def test_envelope_copies_header_values(self):
        """测试修改原头部值列表不影响 envelope"""
        values = ["a@host", "b@host"]
        envelope = Envelope(headers={"To": values})

        values.append("c@host")

        assert envelope.header_values("To") == ("a@host", "b@host")

    def test_envelope_preserves_header_casing_and_order(self, sample_envelope):
        """测试头部名称大小写和值顺序保持不变"""
        assert list(sample_envelope.headers) == ["To", "From"]
        assert sample_envelope.header_values("To") == ("fred@fish.com", "keyword@nsa.gov")
        assert sample_envelope.header_values("to") == ()


def test_metadata_equality(make_message):
    """测试元数据按值判等"""
    assert make_message().metadata == make_message().metadata
    assert isinstance(make_message().metadata, Metadata)
