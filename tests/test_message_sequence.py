import pytest

from rmwcore.message_sequence import MessageInfoSequence, MessageSequence
from rmwcore.ret import InvalidArgumentError, RmwError


def _both():
    return [MessageSequence(), MessageInfoSequence()]


def test_new_sequence_is_empty():
    for seq in (MessageSequence(), MessageInfoSequence()):
        assert len(seq) == 0
        assert seq.capacity == 0


def test_init_sets_capacity_not_size():
    for seq in (MessageSequence(), MessageInfoSequence()):
        seq.init(3)
        assert seq.capacity == 3
        assert seq.size == 0


def test_append_until_full():
    for seq in (MessageSequence(), MessageInfoSequence()):
        seq.init(2)
        seq.append("first")
        seq.append("second")
        assert list(seq) == ["first", "second"]
        assert seq[1] == "second"
        with pytest.raises(RmwError):
            seq.append("third")


def test_zero_capacity_rejects_append():
    for seq in (MessageSequence(), MessageInfoSequence()):
        seq.init(0)
        with pytest.raises(RmwError):
            seq.append("item")


def test_negative_size_rejected():
    with pytest.raises(InvalidArgumentError):
        MessageSequence().init(-1)
    with pytest.raises(InvalidArgumentError):
        MessageInfoSequence().init(-1)


def test_fini_resets():
    for seq in (MessageSequence(), MessageInfoSequence()):
        seq.init(4)
        seq.append("item")
        seq.fini()
        assert len(seq) == 0
        assert seq.capacity == 0
        with pytest.raises(RmwError):
            seq.append("item")


def test_reinit_discards_items():
    for seq in (MessageSequence(), MessageInfoSequence()):
        seq.init(2)
        seq.append("item")
        seq.init(5)
        assert len(seq) == 0
        assert seq.capacity == 5