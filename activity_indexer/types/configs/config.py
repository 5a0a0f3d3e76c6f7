# activity_indexer/types/configs/config.py

from typing import Optional

from msgspec import Struct

from ..constants import MAINNET_RPC_URL


class RpcConfig(Struct):
    endpoint_url: str = MAINNET_RPC_URL
    timeout: int = 30
    page_size: int = 50

class LoggingConfig(Struct):
    log_level: str = "INFO"
    log_dir: Optional[str] = None
    structured_format: bool = True
