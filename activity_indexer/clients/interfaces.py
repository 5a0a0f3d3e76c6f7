"""
Interfaces for ledger RPC clients.

This module defines the interface the fetcher consumes to page through
the executed transactions of an account.
"""
from abc import ABC, abstractmethod
from typing import Iterator, Optional

from ..types import SuiAddress, TransactionFilter, TransactionPage, SuiTransactionResponse, TxDigest


def address_filter(address: SuiAddress, by_from: bool) -> TransactionFilter:
    """Build a FromAddress / ToAddress transaction filter"""
    return {"FromAddress": address} if by_from else {"ToAddress": address}


class RPCClientInterface(ABC):
    """Interface for RPC client implementations."""

    @abstractmethod
    def query_transactions(self, tx_filter: TransactionFilter,
                           cursor: Optional[TxDigest] = None,
                           limit: Optional[int] = None,
                           descending: bool = False) -> TransactionPage:
        """
        Fetch one page of transactions matching a filter.

        Args:
            tx_filter: Transaction filter, e.g. {"FromAddress": address}
            cursor: Digest to continue after (None for the first page)
            limit: Page size
            descending: Newest first when True

        Returns:
            One page of transaction responses
        """
        pass

    def stream_transactions(self, tx_filter: TransactionFilter,
                            descending: bool = False,
                            limit: Optional[int] = None,
                            cursor: Optional[TxDigest] = None) -> Iterator[SuiTransactionResponse]:
        """
        Iterate over every matching transaction, following page cursors.

        Args:
            tx_filter: Transaction filter
            descending: Newest first when True
            limit: Page size
            cursor: Digest to resume after

        Yields:
            Transaction responses in ledger order
        """
        while True:
            page = self.query_transactions(tx_filter, cursor=cursor, limit=limit, descending=descending)
            yield from page.data
            if not page.hasNextPage or page.nextCursor is None:
                return
            cursor = page.nextCursor
