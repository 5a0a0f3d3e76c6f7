# activity_indexer/cli/context.py

from pathlib import Path
from typing import Any, Dict, Optional

import click
import msgspec

from .. import configure_logging
from ..core.config import ActivityConfig, load_swap_events


def build_config(ctx: click.Context, config_file: Optional[str] = None,
                 rpc_url: Optional[str] = None, page_size: Optional[int] = None,
                 swap_events: Optional[str] = None, **overrides: Any) -> ActivityConfig:
    """Load configuration from a YAML file or the environment, then apply CLI options"""
    scalar_overrides: Dict[str, Any] = {k: v for k, v in overrides.items() if v is not None}

    try:
        if config_file:
            config = ActivityConfig.from_file(Path(config_file), **scalar_overrides)
        else:
            config = ActivityConfig.from_env(**scalar_overrides)

        if rpc_url or page_size:
            rpc = msgspec.structs.replace(
                config.rpc,
                endpoint_url=rpc_url or config.rpc.endpoint_url,
                page_size=page_size or config.rpc.page_size,
            )
            config = msgspec.structs.replace(config, rpc=rpc)

        if swap_events:
            extra = load_swap_events(Path(swap_events))
            config = msgspec.structs.replace(config, swap_events=config.swap_events + extra)

    except ValueError as e:
        raise click.ClickException(str(e))

    if ctx.obj and ctx.obj.get('verbose'):
        log_config = msgspec.structs.replace(config.log_config, log_level="DEBUG")
        config = msgspec.structs.replace(config, log_config=log_config)

    configure_logging(config)
    return config
