# activity_indexer/core/config.py

from msgspec import Struct
from typing import Dict, Optional, List, Any, Mapping
from pathlib import Path
import os
import logging

import msgspec
import yaml
from dotenv import load_dotenv

from ..types import SuiAddress, RpcConfig, LoggingConfig, SwapEventConfig, MAINNET_RPC_URL
from .logging import ActivityLogger, log_with_context

ENV_PREFIX = "ACTIVITY_"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class ActivityConfig(Struct, kw_only=True):
    watched_account: SuiAddress
    rpc: RpcConfig = msgspec.field(default_factory=RpcConfig)
    log_config: LoggingConfig = msgspec.field(default_factory=LoggingConfig)
    old_first: bool = False
    by_from: bool = False
    from_ts: Optional[int] = None  # epoch seconds, inclusive
    to_ts: Optional[int] = None  # epoch seconds, inclusive
    report_unknown: bool = False
    swap_events: List[SwapEventConfig] = msgspec.field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.watched_account:
            raise ValueError("watched_account is required")
        if self.from_ts is not None and self.to_ts is not None and self.from_ts > self.to_ts:
            raise ValueError(f"Time window is empty: from {self.from_ts} is after to {self.to_ts}")
        for swap_event in self.swap_events:
            swap_event.validate()

    @classmethod
    def from_env(cls, env_vars: Optional[Mapping[str, str]] = None, **overrides) -> 'ActivityConfig':
        logger = ActivityLogger.get_logger('core.config')

        if env_vars is None:
            load_dotenv()
            env_vars = os.environ
        env = env_vars

        watched_account = overrides.pop("watched_account", None) or env.get(f"{ENV_PREFIX}WATCHED_ACCOUNT")
        if not watched_account:
            raise ValueError(f"Must provide a watched account or set {ENV_PREFIX}WATCHED_ACCOUNT")

        rpc = RpcConfig(
            endpoint_url=env.get(f"{ENV_PREFIX}RPC_URL", MAINNET_RPC_URL),
            timeout=int(env.get(f"{ENV_PREFIX}RPC_TIMEOUT", "30")),
            page_size=int(env.get(f"{ENV_PREFIX}PAGE_SIZE", "50")),
        )
        log_dir = env.get(f"{ENV_PREFIX}LOG_DIR")
        logging_config = LoggingConfig(
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", "INFO"),
            log_dir=log_dir or None,
        )

        swap_events = []
        swap_events_path = env.get(f"{ENV_PREFIX}SWAP_EVENTS")
        if swap_events_path:
            swap_events = load_swap_events(Path(swap_events_path))

        values: Dict[str, Any] = dict(
            watched_account=SuiAddress(watched_account),
            rpc=rpc,
            log_config=logging_config,
            old_first=_env_flag(env.get(f"{ENV_PREFIX}OLD_FIRST")),
            by_from=_env_flag(env.get(f"{ENV_PREFIX}BY_FROM")),
            from_ts=_env_int(env.get(f"{ENV_PREFIX}FROM")),
            to_ts=_env_int(env.get(f"{ENV_PREFIX}TO")),
            swap_events=swap_events,
        )
        values.update({k: v for k, v in overrides.items() if v is not None})

        config = cls(**values)
        log_with_context(logger, logging.INFO, "Configuration loaded from environment",
                         watched_account=config.watched_account,
                         rpc_url=config.rpc.endpoint_url,
                         swap_event_count=len(config.swap_events))
        return config

    @classmethod
    def from_file(cls, path: Path, **overrides) -> 'ActivityConfig':
        logger = ActivityLogger.get_logger('core.config')

        config_path = Path(path)
        if not config_path.exists():
            raise ValueError(f"Config file not found: {config_path}")

        with open(config_path, 'r') as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {config_path}")

        data.update({k: v for k, v in overrides.items() if v is not None})
        try:
            config = msgspec.convert(data, type=cls)
        except msgspec.ValidationError as e:
            raise ValueError(f"Invalid configuration in {config_path}: {e}") from e

        log_with_context(logger, logging.INFO, "Configuration loaded from file",
                         config_path=str(config_path),
                         watched_account=config.watched_account,
                         swap_event_count=len(config.swap_events))
        return config


def load_swap_events(path: Path) -> List[SwapEventConfig]:
    """Load additional swap event signatures from a YAML file with a top level 'swap_events' list"""
    if not path.exists():
        raise ValueError(f"Swap events file not found: {path}")

    with open(path, 'r') as f:
        data = yaml.safe_load(f) or {}

    entries = data.get('swap_events', []) if isinstance(data, dict) else []
    try:
        configs = msgspec.convert(entries, type=List[SwapEventConfig])
    except msgspec.ValidationError as e:
        raise ValueError(f"Invalid swap event config in {path}: {e}") from e

    for config in configs:
        config.validate()
    return configs


def _env_flag(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUE_VALUES


def _env_int(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == "":
        return None
    return int(value)
