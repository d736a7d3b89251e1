"""View — immutable состояние виджета и чистый пересчёт отображения."""

from .widget import (
    APPROX_PREFIX,
    Direction,
    WidgetState,
    WidgetView,
    get_net_fiat,
    get_net_stablecoin,
    recompute_view,
    swap_direction,
    with_amount,
    with_coin,
    with_fiat,
)

__all__ = [
    "APPROX_PREFIX",
    "Direction",
    "WidgetState",
    "WidgetView",
    "recompute_view",
    "swap_direction",
    "with_amount",
    "with_coin",
    "with_fiat",
    "get_net_fiat",
    "get_net_stablecoin",
]
