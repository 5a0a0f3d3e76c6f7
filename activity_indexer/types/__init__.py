# activity_indexer/types/__init__.py

from .constants import (
    SUI_COIN_TYPE,
    MIST_PER_SUI,
    I128_MIN,
    I128_MAX,
    CETUS_SWAP_EVENT,
    BLUEFIN_SWAP_EVENT,
    MAINNET_RPC_URL,
)

# New Types
from .new import (
    SuiAddress,
    CoinType,
    TxDigest,
    EventType,
    IntStr,
    ErrorId,
)

# Sui RPC Types
from .sui import (
    SuiExecutionStatus,
    SuiGasCostSummary,
    SuiEffects,
    SuiEventId,
    SuiEvent,
    SuiBalanceChange,
    SuiTransactionResponse,
    TransactionPage,
    JsonRpcError,
    QueryTransactionsResponse,
    TransactionFilter,
)

# Configuration Types
from .configs.config import RpcConfig, LoggingConfig
from .configs.swap_event import SwapEventConfig

# Model Types: Base
from .model.base import ActivityRecord

# Model Types: Errors
from .model.errors import (
    ProcessingError,
    ClassificationError,
    MalformedInput,
    UnsupportedOwner,
    AmbiguousSender,
    AmbiguousToken,
    TooManyReceivers,
    TooManyCandidates,
    AmountNotFound,
    PayloadDecodeError,
    UnknownTxType,
    TransactionWithoutEffects,
    RpcError,
    create_classify_error,
    create_rpc_error,
)

# Model Types: Balance / Transfer / Swap
from .model.balance import BalanceChange
from .model.transfer import TransferEvent
from .model.swap import Dex, SwapEvent

# Model Types: Activity
from .model.activity import (
    Transfer,
    SelfTransfer,
    Swap,
    Unknown,
    TxType,
    TransactionKind,
    ClassificationFailure,
)

__all__ = [
    # Constants
    "SUI_COIN_TYPE",
    "MIST_PER_SUI",
    "I128_MIN",
    "I128_MAX",
    "CETUS_SWAP_EVENT",
    "BLUEFIN_SWAP_EVENT",
    "MAINNET_RPC_URL",

    # New Types
    "SuiAddress",
    "CoinType",
    "TxDigest",
    "EventType",
    "IntStr",
    "ErrorId",

    # Sui RPC types
    "SuiExecutionStatus",
    "SuiGasCostSummary",
    "SuiEffects",
    "SuiEventId",
    "SuiEvent",
    "SuiBalanceChange",
    "SuiTransactionResponse",
    "TransactionPage",
    "JsonRpcError",
    "QueryTransactionsResponse",
    "TransactionFilter",

    # Configuration types
    "RpcConfig",
    "LoggingConfig",
    "SwapEventConfig",

    # Model Types
    ## Base
    "ActivityRecord",
    ## Errors
    "ProcessingError",
    "ClassificationError",
    "MalformedInput",
    "UnsupportedOwner",
    "AmbiguousSender",
    "AmbiguousToken",
    "TooManyReceivers",
    "TooManyCandidates",
    "AmountNotFound",
    "PayloadDecodeError",
    "UnknownTxType",
    "TransactionWithoutEffects",
    "RpcError",
    "create_classify_error",
    "create_rpc_error",
    ## Balance / Transfer / Swap
    "BalanceChange",
    "TransferEvent",
    "Dex",
    "SwapEvent",
    ## Activity
    "Transfer",
    "SelfTransfer",
    "Swap",
    "Unknown",
    "TxType",
    "TransactionKind",
    "ClassificationFailure",
]
