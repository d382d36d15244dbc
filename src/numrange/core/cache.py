"""
RangeCache — Мемоизация результатов containment проверок

Явный объект кэша вместо скрытого глобального состояния:
- Ключ: (value, lower, upper, exclusive) после продвижения в общий домен
- Значение: bool результат is_in_range
- LRU вытеснение при превышении max_entries (None = без ограничения)
- Потокобезопасность через threading.Lock

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Попадание в кэш неотличимо от повторного вычисления
2. Записи неизменяемы после вставки; гонки влияют только на hit/miss
"""

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Final, Hashable, NamedTuple, Optional

logger = logging.getLogger(__name__)

# Ограничение размера кэша по умолчанию
DEFAULT_MAX_ENTRIES: Final[int] = 10_000

CacheKey = tuple[Hashable, ...]


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class RangeCacheConfig:
    """Конфигурация кэша.

    max_entries=None отключает вытеснение (неограниченный рост).
    """

    max_entries: Optional[int] = DEFAULT_MAX_ENTRIES

    def __post_init__(self) -> None:
        if self.max_entries is not None and self.max_entries <= 0:
            raise ValueError(f"max_entries must be positive, got {self.max_entries}")


# =============================================================================
# STATS
# =============================================================================


class CacheStats(NamedTuple):
    """Диагностический снимок состояния кэша (read-only)."""

    size: int
    max_entries: Optional[int]
    hits: int
    misses: int
    entries: tuple[tuple[CacheKey, bool], ...]


# =============================================================================
# CACHE
# =============================================================================


class RangeCache:
    """Потокобезопасный LRU кэш результатов is_in_range."""

    def __init__(self, config: RangeCacheConfig | None = None):
        self.config = config or RangeCacheConfig()
        self._entries: OrderedDict[CacheKey, bool] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: CacheKey) -> Optional[bool]:
        """
        Получение результата по ключу.

        Returns:
            Сохранённый bool или None при промахе
        """
        with self._lock:
            try:
                result = self._entries[key]
            except KeyError:
                self._misses += 1
                return None
            self._entries.move_to_end(key)
            self._hits += 1
            return result

    def put(self, key: CacheKey, result: bool) -> None:
        """Сохранение результата с LRU вытеснением."""
        with self._lock:
            self._entries[key] = result
            self._entries.move_to_end(key)
            max_entries = self.config.max_entries
            if max_entries is not None and len(self._entries) > max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Range cache full (%d), evicted %r", max_entries, evicted)

    def clear(self) -> None:
        """Полная очистка кэша и счётчиков."""
        with self._lock:
            size = len(self._entries)
            self._entries.clear()
            self._hits = 0
            self._misses = 0
        logger.debug("Range cache cleared (%d entries dropped)", size)

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                size=len(self._entries),
                max_entries=self.config.max_entries,
                hits=self._hits,
                misses=self._misses,
                entries=tuple(self._entries.items()),
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries


# =============================================================================
# PROCESS DEFAULT
# =============================================================================


# Глобальный экземпляр для вызовов с options.cache=True без явного кэша
_DEFAULT_CACHE = RangeCache()


def default_cache() -> RangeCache:
    return _DEFAULT_CACHE


def clear_cache() -> None:
    """Очистка кэша по умолчанию."""
    _DEFAULT_CACHE.clear()


def get_cache_stats() -> CacheStats:
    """Статистика кэша по умолчанию."""
    return _DEFAULT_CACHE.stats()
