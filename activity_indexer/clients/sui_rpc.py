# activity_indexer/clients/sui_rpc.py

from typing import Any, List, Optional

import msgspec
import requests

from ..types import (
    MAINNET_RPC_URL,
    QueryTransactionsResponse,
    RpcConfig,
    RpcError,
    TransactionFilter,
    TransactionPage,
    TxDigest,
)
from ..core.logging import LoggingMixin
from .interfaces import RPCClientInterface

QUERY_TRANSACTIONS_METHOD = "suix_queryTransactionBlocks"

RESPONSE_OPTIONS = {
    "showInput": False,
    "showRawInput": False,
    "showEffects": True,
    "showEvents": True,
    "showObjectChanges": False,
    "showBalanceChanges": True,
}


class SuiRpcClient(RPCClientInterface, LoggingMixin):
    """
    A client for reading executed transactions from a Sui full node over JSON-RPC.
    """

    def __init__(self, endpoint_url: str = MAINNET_RPC_URL, timeout: int = 30,
                 session: Optional[requests.Session] = None):
        self.endpoint_url = endpoint_url
        self.timeout = timeout
        self.session = session or requests.Session()
        self._request_id = 0

        self.log_debug("SuiRpcClient initialized", endpoint_url=endpoint_url, timeout=timeout)

    @classmethod
    def mainnet(cls, timeout: int = 30) -> 'SuiRpcClient':
        return cls(MAINNET_RPC_URL, timeout=timeout)

    @classmethod
    def from_config(cls, config: RpcConfig) -> 'SuiRpcClient':
        return cls(config.endpoint_url, timeout=config.timeout)

    def _call(self, method: str, params: List[Any]) -> bytes:
        self._request_id += 1
        payload = {
            "jsonrpc": "2.0",
            "id": self._request_id,
            "method": method,
            "params": params,
        }
        response = self.session.post(self.endpoint_url, json=payload, timeout=self.timeout)
        response.raise_for_status()
        return response.content

    def query_transactions(self, tx_filter: TransactionFilter,
                           cursor: Optional[TxDigest] = None,
                           limit: Optional[int] = None,
                           descending: bool = False) -> TransactionPage:
        query = {"filter": tx_filter, "options": RESPONSE_OPTIONS}
        content = self._call(QUERY_TRANSACTIONS_METHOD, [query, cursor, limit, descending])

        try:
            response = msgspec.json.decode(content, type=QueryTransactionsResponse)
        except msgspec.DecodeError as e:
            self.log_error("Malformed RPC response",
                           method=QUERY_TRANSACTIONS_METHOD,
                           cursor=cursor,
                           error=str(e))
            raise

        if response.error is not None:
            raise RpcError(response.error.code, response.error.message, response.error.data)
        if response.result is None:
            raise RpcError(-32603, "Response carries neither result nor error")

        self.log_debug("Transaction page fetched",
                       cursor=cursor,
                       count=len(response.result.data),
                       has_next_page=response.result.hasNextPage)
        return response.result
