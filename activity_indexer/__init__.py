# activity_indexer/__init__.py

import logging
from pathlib import Path
from typing import Optional

from .core.config import ActivityConfig
from .core.logging import ActivityLogger, log_with_context
from .clients.sui_rpc import SuiRpcClient
from .classify.classifier import TransactionClassifier
from .classify.decoders import SwapDecoderRegistry
from .classify.interpreter import TransferInterpreter, interpret
from .pipeline.fetcher import ActivityFetcher, FetchStats, classify_file
from .pipeline.sink import ActivitySink, LogSink, CollectingSink

__version__ = "0.1.0"


def configure_logging(config: ActivityConfig, console_enabled: bool = True) -> None:
    log_dir = config.log_config.log_dir
    ActivityLogger.configure(
        log_dir=Path(log_dir) if log_dir else None,
        log_level=config.log_config.log_level,
        console_enabled=console_enabled,
        file_enabled=bool(log_dir),
        structured_format=config.log_config.structured_format,
    )


def create_fetcher(config: ActivityConfig, sink: Optional[ActivitySink] = None,
                   client: Optional[SuiRpcClient] = None) -> ActivityFetcher:
    logger = ActivityLogger.get_logger('core.init')
    log_with_context(logger, logging.INFO, "Creating activity fetcher",
                     watched_account=config.watched_account)

    classifier = TransactionClassifier.from_config(config)
    return ActivityFetcher(
        client=client or SuiRpcClient.from_config(config.rpc),
        classifier=classifier,
        sink=sink or LogSink(),
        old_first=config.old_first,
        page_size=config.rpc.page_size,
    )


__all__ = [
    "ActivityConfig",
    "ActivityLogger",
    "SuiRpcClient",
    "TransactionClassifier",
    "SwapDecoderRegistry",
    "TransferInterpreter",
    "interpret",
    "ActivityFetcher",
    "FetchStats",
    "classify_file",
    "ActivitySink",
    "LogSink",
    "CollectingSink",
    "configure_logging",
    "create_fetcher",
]
