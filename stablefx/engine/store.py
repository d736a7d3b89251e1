"""
Active configuration reference.

Конфигурация процесса — одна immutable ссылка. Обновление курсов:
построить новый FxConfig и подменить ссылку через set_active_config().
Поля существующего FxConfig никогда не мутируют, поэтому расчёт,
уже получивший ссылку через resolve_config(), видит согласованную таблицу.
"""

import logging

from stablefx.core.domain.config import DEFAULT_CONFIG, FxConfig

logger = logging.getLogger(__name__)

_active_config: FxConfig = DEFAULT_CONFIG


def get_active_config() -> FxConfig:
    """Текущая конфигурация процесса."""
    return _active_config


def set_active_config(config: FxConfig) -> FxConfig:
    """
    Подмена активной конфигурации.

    Args:
        config: Новый FxConfig

    Returns:
        Предыдущая конфигурация (для восстановления)

    Raises:
        TypeError: Если config не FxConfig
    """
    global _active_config

    if not isinstance(config, FxConfig):
        raise TypeError(f"config must be FxConfig, got {type(config).__name__}")

    previous = _active_config
    _active_config = config
    logger.info(
        "Active FX config swapped: %d fiat codes, fee mode %s",
        len(config.rates),
        config.fees.network_fee_mode.value,
    )
    return previous


def resolve_config(config: FxConfig | None = None) -> FxConfig:
    """Явная конфигурация, если передана, иначе активная."""
    if config is not None:
        return config
    return _active_config
