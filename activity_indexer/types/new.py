# activity_indexer/types/new.py

from typing import NewType

SuiAddress = NewType('SuiAddress', str)
CoinType = NewType('CoinType', str)
TxDigest = NewType('TxDigest', str)
EventType = NewType('EventType', str)
IntStr = NewType('IntStr', str)
ErrorId = NewType('ErrorId', str)
