# activity_indexer/types/model/errors.py

from typing import Optional, Dict, Any
import hashlib
import msgspec
from msgspec import Struct

from ..new import ErrorId, TxDigest, EventType


def error_fingerprint(stage: str, error_type: str, message: str,
                      context: Optional[Dict[str, Any]] = None) -> ErrorId:
    """Stable id for an error: the same failure on the same transaction hashes the same"""
    payload = msgspec.msgpack.encode([stage, error_type, message, sorted((context or {}).items())])
    return ErrorId(hashlib.sha256(payload).hexdigest()[:12])


class ProcessingError(Struct):
    stage: str  # "rpc", "classify"
    error_type: str  # "ambiguous_sender", "payload_decode_error", ...
    message: str
    error_id: Optional[ErrorId] = None
    context: Optional[Dict[str, Any]] = None  # tx_digest, event_type, cursor, method

    def __post_init__(self) -> None:
        if self.error_id is None:
            self.error_id = error_fingerprint(self.stage, self.error_type, self.message, self.context)


'''
Classification exceptions. Every one maps to a ProcessingError via error_type.
'''
class ClassificationError(Exception):
    error_type = "classification_error"


class MalformedInput(ClassificationError):
    error_type = "malformed_input"


class UnsupportedOwner(MalformedInput):
    error_type = "unsupported_owner"


class AmbiguousSender(ClassificationError):
    error_type = "ambiguous_sender"


class AmbiguousToken(ClassificationError):
    error_type = "ambiguous_token"


class TooManyReceivers(ClassificationError):
    error_type = "too_many_receivers"


class TooManyCandidates(ClassificationError):
    error_type = "too_many_candidates"


class AmountNotFound(ClassificationError):
    error_type = "amount_not_found"


class PayloadDecodeError(ClassificationError):
    error_type = "payload_decode_error"


class UnknownTxType(ClassificationError):
    error_type = "unknown_tx_type"


class TransactionWithoutEffects(ClassificationError):
    error_type = "transaction_without_effects"


class RpcError(Exception):
    def __init__(self, code: int, message: str, data: Any = None):
        super().__init__(f"RPC error {code}: {message}")
        self.code = code
        self.message = message
        self.data = data


'''
Helper functions to create specific error records
'''
def _context(**values: Optional[str]) -> Optional[Dict[str, Any]]:
    context = {key: value for key, value in values.items() if value}
    return context or None


def create_classify_error(
    error: ClassificationError,
    tx_digest: Optional[TxDigest] = None,
    event_type: Optional[EventType] = None,
) -> ProcessingError:
    return ProcessingError(
        stage="classify",
        error_type=error.error_type,
        message=str(error) or type(error).__name__,
        context=_context(tx_digest=tx_digest, event_type=event_type),
    )


def create_rpc_error(
    error_type: str,
    message: str,
    cursor: Optional[str] = None,
    method: Optional[str] = None
) -> ProcessingError:
    return ProcessingError(
        stage="rpc",
        error_type=error_type,
        message=message,
        context=_context(cursor=cursor, method=method),
    )
