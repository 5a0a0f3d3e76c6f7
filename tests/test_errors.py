# tests/test_errors.py

import pytest

from activity_indexer.types import (
    ClassificationError,
    MalformedInput,
    UnsupportedOwner,
    AmbiguousSender,
    PayloadDecodeError,
    ProcessingError,
    create_classify_error,
    create_rpc_error,
)


def test_classify_error_record():
    error = create_classify_error(AmbiguousSender("two senders"), tx_digest="abc", event_type="0x2::a::B")

    assert error.stage == "classify"
    assert error.error_type == "ambiguous_sender"
    assert error.message == "two senders"
    assert error.context == {"tx_digest": "abc", "event_type": "0x2::a::B"}
    assert len(error.error_id) == 12


def test_error_without_message_uses_class_name():
    error = create_classify_error(PayloadDecodeError())

    assert error.message == "PayloadDecodeError"
    assert error.context is None


def test_error_id_is_stable():
    first = create_classify_error(MalformedInput("zero amount"), tx_digest="abc")
    second = create_classify_error(MalformedInput("zero amount"), tx_digest="abc")
    other = create_classify_error(MalformedInput("zero amount"), tx_digest="def")

    assert first.error_id == second.error_id
    assert first.error_id != other.error_id


def test_explicit_error_id_is_kept():
    assert ProcessingError(stage="rpc", error_type="x", message="y", error_id="fixed").error_id == "fixed"


def test_rpc_error_record():
    error = create_rpc_error("rpc_error", "Node overloaded", cursor="Cur5or", method="suix_queryTransactionBlocks")

    assert error.stage == "rpc"
    assert error.context == {"cursor": "Cur5or", "method": "suix_queryTransactionBlocks"}


@pytest.mark.parametrize("error_class,parent", [
    (UnsupportedOwner, MalformedInput),
    (MalformedInput, ClassificationError),
    (PayloadDecodeError, ClassificationError),
])
def test_hierarchy(error_class, parent):
    assert issubclass(error_class, parent)
