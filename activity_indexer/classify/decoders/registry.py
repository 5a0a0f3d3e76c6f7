# activity_indexer/classify/decoders/registry.py

from typing import Dict, Iterable, List, Optional, Sequence

from ...types import BalanceChange, EventType, SuiEvent, SwapEvent, SwapEventConfig
from ...core.logging import LoggingMixin
from .base import FieldMappedSwapDecoder, SwapDecoder
from .builtin import BUILTIN_SWAP_EVENTS


class SwapDecoderRegistry(LoggingMixin):
    """Maps fully qualified event types to swap decoders."""

    def __init__(self, configs: Optional[Iterable[SwapEventConfig]] = None):
        self._decoders: Dict[EventType, SwapDecoder] = {}
        for config in configs or []:
            self.register_config(config)

    @classmethod
    def default(cls, extra: Optional[Iterable[SwapEventConfig]] = None) -> 'SwapDecoderRegistry':
        registry = cls(BUILTIN_SWAP_EVENTS)
        for config in extra or []:
            registry.register_config(config)
        return registry

    def register(self, event_type: EventType, decoder: SwapDecoder) -> None:
        if not callable(decoder):
            raise TypeError(f"Decoder for {event_type} must be callable")
        if event_type in self._decoders:
            self.log_warning("Replacing registered swap decoder", event_type=event_type)
        self._decoders[event_type] = decoder
        self.log_debug("Swap decoder registered", event_type=event_type)

    def register_config(self, config: SwapEventConfig) -> None:
        config.validate()
        self.register(config.event_type, FieldMappedSwapDecoder.from_config(config))

    def unregister(self, event_type: EventType) -> None:
        self._decoders.pop(event_type, None)

    def get(self, event_type: str) -> Optional[SwapDecoder]:
        return self._decoders.get(event_type)

    @property
    def event_types(self) -> List[EventType]:
        return list(self._decoders.keys())

    def __contains__(self, event_type: object) -> bool:
        return event_type in self._decoders

    def __len__(self) -> int:
        return len(self._decoders)

    def decode_swap(self, event: SuiEvent, balance_changes: Sequence[BalanceChange]) -> Optional[SwapEvent]:
        """Decode a swap from a known event type. Returns None when the event is not a swap."""
        decoder = self._decoders.get(event.type)
        if decoder is None:
            return None

        swap = decoder(event.parsedJson, balance_changes)
        self.log_debug("Swap event decoded",
                       event_type=event.type,
                       dex=swap.dex.value,
                       pool=swap.pool)
        return swap
