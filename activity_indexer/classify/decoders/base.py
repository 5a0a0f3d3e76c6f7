# activity_indexer/classify/decoders/base.py

from typing import Any, Callable, List, Optional, Sequence, Tuple

from ...types import (
    BalanceChange,
    CoinType,
    Dex,
    SwapEvent,
    SwapEventConfig,
    MalformedInput,
    PayloadDecodeError,
    I128_MIN,
    I128_MAX,
)
from ...utils.amounts import parse_int_str

# (payload, balance_changes) -> SwapEvent
SwapDecoder = Callable[[Any, Sequence[BalanceChange]], SwapEvent]


def derive_swap_tokens(balance_changes: Sequence[BalanceChange]) -> Tuple[CoinType, CoinType]:
    """Return (in_token, out_token) from the two balance changes of a pool swap.

    The smaller signed amount is the input. Only valid while the two entries
    have opposite signs, which is checked here.
    """
    if len(balance_changes) != 2:
        raise MalformedInput(f"Swap requires exactly 2 balance changes, got {len(balance_changes)}")

    first, second = balance_changes
    if (first.amount < 0) == (second.amount < 0):
        raise MalformedInput("Swap balance changes must have opposite signs")

    if first.amount > second.amount:
        return second.token, first.token
    return first.token, second.token


def _require(payload: dict, field: str) -> Any:
    if field not in payload:
        raise PayloadDecodeError(f"Swap payload is missing field {field!r}")
    return payload[field]


def parse_i128(payload: dict, field: str) -> int:
    try:
        value = parse_int_str(_require(payload, field))
    except ValueError as e:
        raise PayloadDecodeError(f"Field {field!r}: {e}") from e
    if not I128_MIN <= value <= I128_MAX:
        raise PayloadDecodeError(f"Field {field!r} is outside the signed 128-bit range")
    return value


def parse_bool(payload: dict, field: str) -> bool:
    value = _require(payload, field)
    if not isinstance(value, bool):
        raise PayloadDecodeError(f"Field {field!r} is not a boolean: {value!r}")
    return value


def parse_str(payload: dict, field: str) -> str:
    value = _require(payload, field)
    if not isinstance(value, str):
        raise PayloadDecodeError(f"Field {field!r} is not a string: {value!r}")
    return value


class FieldMappedSwapDecoder:
    """Decodes swap events whose payload carries pool, direction and amounts under fixed field names"""

    def __init__(self, dex: Dex, pool_field: str, a2b_field: str,
                 amount_in_field: str = "amount_in", amount_out_field: str = "amount_out",
                 before_sqrt_price_field: Optional[str] = None,
                 after_sqrt_price_field: Optional[str] = None):
        self.dex = dex
        self.pool_field = pool_field
        self.a2b_field = a2b_field
        self.amount_in_field = amount_in_field
        self.amount_out_field = amount_out_field
        self.before_sqrt_price_field = before_sqrt_price_field
        self.after_sqrt_price_field = after_sqrt_price_field

    @classmethod
    def from_config(cls, config: SwapEventConfig) -> 'FieldMappedSwapDecoder':
        try:
            dex = Dex(config.dex)
        except ValueError:
            raise ValueError(f"Unknown dex {config.dex!r} for {config.event_type}, "
                             f"expected one of {[d.value for d in Dex]}")
        return cls(
            dex=dex,
            pool_field=config.pool_field,
            a2b_field=config.a2b_field,
            amount_in_field=config.amount_in_field,
            amount_out_field=config.amount_out_field,
            before_sqrt_price_field=config.before_sqrt_price_field,
            after_sqrt_price_field=config.after_sqrt_price_field,
        )

    def __call__(self, payload: Any, balance_changes: Sequence[BalanceChange]) -> SwapEvent:
        if not isinstance(payload, dict):
            raise PayloadDecodeError(f"Swap payload must be an object, got {type(payload).__name__}")

        pool = parse_str(payload, self.pool_field)
        a2b = parse_bool(payload, self.a2b_field)
        in_amount = parse_i128(payload, self.amount_in_field)
        out_amount = parse_i128(payload, self.amount_out_field)
        before_sqrt_price = self._optional_str(payload, self.before_sqrt_price_field)
        after_sqrt_price = self._optional_str(payload, self.after_sqrt_price_field)

        in_token, out_token = derive_swap_tokens(balance_changes)

        return SwapEvent(
            pool=pool,
            dex=self.dex,
            a2b=a2b,
            in_amount=in_amount,
            out_amount=out_amount,
            in_token=in_token,
            out_token=out_token,
            before_sqrt_price=before_sqrt_price,
            after_sqrt_price=after_sqrt_price,
        )

    @staticmethod
    def _optional_str(payload: dict, field: Optional[str]) -> Optional[str]:
        if field is None:
            return None
        return parse_str(payload, field)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(dex={self.dex.value}, pool_field={self.pool_field!r})"
