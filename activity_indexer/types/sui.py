# activity_indexer/types/sui.py

from typing import Any, Dict, List, Literal, Optional
from msgspec import Struct

from .new import SuiAddress, TxDigest, EventType, IntStr


class SuiExecutionStatus(Struct):
    status: Literal["success", "failure"]
    error: Optional[str] = None

class SuiGasCostSummary(Struct):
    computationCost: IntStr
    storageCost: IntStr
    storageRebate: IntStr
    nonRefundableStorageFee: IntStr = "0"

class SuiEffects(Struct):
    status: SuiExecutionStatus
    gasUsed: Optional[SuiGasCostSummary] = None
    transactionDigest: Optional[TxDigest] = None

class SuiEventId(Struct):
    txDigest: TxDigest
    eventSeq: IntStr

class SuiEvent(Struct):
    type: EventType
    parsedJson: Any = None
    id: Optional[SuiEventId] = None
    packageId: Optional[str] = None
    transactionModule: Optional[str] = None
    sender: Optional[SuiAddress] = None
    timestampMs: Optional[IntStr] = None

class SuiBalanceChange(Struct):
    owner: Any  # Sui Owner enum: {"AddressOwner": ...}, {"Shared": ...}, "Immutable", ...
    coinType: str
    amount: IntStr

class SuiTransactionResponse(Struct):
    digest: TxDigest
    timestampMs: Optional[IntStr] = None
    checkpoint: Optional[IntStr] = None
    effects: Optional[SuiEffects] = None
    events: Optional[List[SuiEvent]] = None
    balanceChanges: Optional[List[SuiBalanceChange]] = None

class TransactionPage(Struct):
    data: List[SuiTransactionResponse]
    nextCursor: Optional[TxDigest] = None
    hasNextPage: bool = False

class JsonRpcError(Struct):
    code: int
    message: str
    data: Any = None

class QueryTransactionsResponse(Struct):
    jsonrpc: str = "2.0"
    id: Any = None
    result: Optional[TransactionPage] = None
    error: Optional[JsonRpcError] = None

TransactionFilter = Dict[str, SuiAddress]
