# activity_indexer/types/model/base.py

import hashlib
import msgspec
from msgspec import Struct


class ActivityRecord(Struct, frozen=True):
    """Base for every record handed to the sink. Records are immutable once built."""

    @property
    def content_id(self) -> str:
        content_bytes = msgspec.msgpack.encode(self._get_identifying_content())
        return hashlib.sha256(content_bytes).hexdigest()[:12]

    def _get_identifying_content(self):
        return msgspec.structs.asdict(self)
