"""InMemoryMailboxStore 测试"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from domain.common.exceptions import MailboxError, MailboxErrorKind
from infrastructure.mailstore.memory_mailbox_store import InMemoryMailboxStore


@pytest.fixture
def store() -> InMemoryMailboxStore:
    """创建存储实例"""
    return InMemoryMailboxStore()


class TestAdd:
    """add() 测试"""

    def test_add_creates_mailbox_implicitly(self, store, make_message):
        """测试写入时自动创建邮箱"""
        store.add("good", make_message())

        assert store.count("good") == 1

    def test_duplicate_id_raises_write_failure(self, store, make_message):
        """测试重复 ID 报错而不是覆盖"""
        store.add("good", make_message(subject="first"))

        with pytest.raises(MailboxError) as exc_info:
            store.add("good", make_message(subject="second"))

        assert exc_info.value.kind == MailboxErrorKind.MESSAGE_WRITE_FAILURE
        assert exc_info.value.message_id == "0001"
        assert store.get("good", "0001").metadata.subject == "first"

    def test_same_id_in_different_mailboxes(self, store, make_message):
        """测试不同邮箱可以使用相同 ID"""
        store.add("good", make_message(mailbox="good"))
        store.add("other", make_message(mailbox="other"))

        assert store.get("good", "0001").mailbox == "good"
        assert store.get("other", "0001").mailbox == "other"

    def test_mailbox_mismatch_raises_write_failure(self, store, make_message):
        """测试邮件所属邮箱与写入键不一致时报错"""
        with pytest.raises(MailboxError) as exc_info:
            store.add("other", make_message(mailbox="good"))

        assert exc_info.value.kind == MailboxErrorKind.MESSAGE_WRITE_FAILURE
        assert store.list("other") == []

    def test_non_normalised_mailbox_key_raises_write_failure(self, store, make_message):
        """测试写入键不是规范化邮箱名时报错，避免写入查询方无法寻址的邮箱"""
        for key in ("Bob", "bob+tag", "foo@bar"):
            with pytest.raises(MailboxError) as exc_info:
                store.add(key, make_message(mailbox="bob"))

            assert exc_info.value.kind == MailboxErrorKind.MESSAGE_WRITE_FAILURE
            assert store.list(key) == []

        assert store.list("bob") == []


class TestList:
    """list() 测试"""

    def test_unknown_mailbox_returns_empty_list(self, store):
        """测试从未写入的邮箱返回空列表"""
        assert store.list("empty") == []

    def test_list_keeps_insertion_order(self, store, make_message):
        """测试按写入顺序返回"""
        store.add("good", make_message(id="0002"))
        store.add("good", make_message(id="0001"))
        store.add("good", make_message(id="0003"))

        assert [m.id for m in store.list("good")] == ["0002", "0001", "0003"]

    def test_list_only_returns_own_mailbox(self, store, make_message):
        """测试不会返回其他邮箱的邮件"""
        store.add("good", make_message(mailbox="good", id="0001"))
        store.add("other", make_message(mailbox="other", id="0002"))

        assert [m.id for m in store.list("good")] == ["0001"]

    def test_mutating_returned_list_does_not_affect_store(self, store, make_message):
        """测试修改返回的列表不影响存储"""
        store.add("good", make_message())

        store.list("good").clear()

        assert len(store.list("good")) == 1


class TestGet:
    """get() 测试"""

    def test_get_returns_message_with_envelope(self, store, make_message, sample_envelope):
        """测试返回完整邮件"""
        store.add("good", make_message(envelope=sample_envelope))

        message = store.get("good", "0001")

        assert message.envelope == sample_envelope

    def test_missing_id_raises_not_found(self, store, make_message):
        """测试邮件不存在"""
        store.add("good", make_message())

        with pytest.raises(MailboxError) as exc_info:
            store.get("good", "9999")

        assert exc_info.value.kind == MailboxErrorKind.MESSAGE_NOT_FOUND

    def test_missing_mailbox_raises_not_found(self, store):
        """测试邮箱不存在时同样是 not found"""
        with pytest.raises(MailboxError) as exc_info:
            store.get("empty", "0001")

        assert exc_info.value.kind == MailboxErrorKind.MESSAGE_NOT_FOUND
        assert exc_info.value.mailbox == "empty"


class TestRemove:
    """remove() 测试"""

    def test_remove_message(self, store, make_message):
        """测试删除后不可再读取，其余顺序不变"""
        for message_id in ("0001", "0002", "0003"):
            store.add("good", make_message(id=message_id))

        store.remove("good", "0002")

        assert [m.id for m in store.list("good")] == ["0001", "0003"]
        with pytest.raises(MailboxError):
            store.get("good", "0002")

    def test_remove_missing_raises_not_found(self, store):
        """测试删除不存在的邮件"""
        with pytest.raises(MailboxError) as exc_info:
            store.remove("good", "0001")

        assert exc_info.value.kind == MailboxErrorKind.MESSAGE_NOT_FOUND

    def test_removed_id_can_be_added_again(self, store, make_message):
        """测试删除后可以重新写入同一 ID"""
        store.add("good", make_message())
        store.remove("good", "0001")

        store.add("good", make_message(subject="again"))

        assert store.get("good", "0001").metadata.subject == "again"


class TestConcurrency:
    """并发读写测试"""

    def test_concurrent_adds_to_same_mailbox(self, store, make_message):
        """测试并发写入同一邮箱不丢数据"""
        ids = [f"{i:04d}" for i in range(200)]

        with ThreadPoolExecutor(max_workers=8) as executor:
            list(executor.map(lambda i: store.add("good", make_message(id=i)), ids))

        assert sorted(m.id for m in store.list("good")) == ids

    def test_concurrent_adds_to_different_mailboxes(self, store, make_message):
        """测试并发写入不同邮箱"""
        mailboxes = [f"box{i}" for i in range(20)]

        def fill(mailbox):
            for n in range(10):
                store.add(mailbox, make_message(mailbox=mailbox, id=f"{n:04d}"))

        with ThreadPoolExecutor(max_workers=8) as executor:
            list(executor.map(fill, mailboxes))

        for mailbox in mailboxes:
            assert [m.id for m in store.list(mailbox)] == [f"{n:04d}" for n in range(10)]

    def test_readers_see_consistent_prefixes(self, store, make_message):
        """测试读取方只会看到完整的、按顺序的前缀"""
        ids = [f"{i:04d}" for i in range(300)]
        done = threading.Event()
        violations = []

        def writer():
            for message_id in ids:
                store.add("good", make_message(id=message_id))
            done.set()

        def reader():
            while not done.is_set():
                snapshot = [m.id for m in store.list("good")]
                if snapshot != ids[: len(snapshot)]:
                    violations.append(snapshot)

        threads = [threading.Thread(target=writer)] + [threading.Thread(target=reader) for _ in range(3)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert violations == []
        assert store.count("good") == len(ids)
