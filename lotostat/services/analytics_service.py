"""Business logic for ball frequency and co-occurrence statistics."""

from __future__ import annotations

from dataclasses import dataclass

from lotostat.repositories.draw_store import DrawStore
from lotostat.repositories.records import BALL_MAX, BALL_MIN, Category, Draw


@dataclass(frozen=True)
class FrequencyRecord:
    ball_number: int
    frequency: int


@dataclass(frozen=True)
class StatisticsResult:
    top_frequent: list[FrequencyRecord]
    least_frequent: list[FrequencyRecord]
    all_frequencies: list[FrequencyRecord]


@dataclass(frozen=True)
class ConsultResult:
    simultaneous: list[FrequencyRecord]
    subsequent: list[FrequencyRecord]
    draw_history: list[Draw]


def _empty_counts() -> dict[int, int]:
    return {n: 0 for n in range(BALL_MIN, BALL_MAX + 1)}


def _ranked(counts: dict[int, int]) -> list[FrequencyRecord]:
    """Non-zero counts, most frequent first; ties keep ascending ball order."""

    records = [FrequencyRecord(n, c) for n, c in counts.items() if c > 0]
    return sorted(records, key=lambda r: r.frequency, reverse=True)


class AnalyticsService:
    """Derive statistics from the draws of one category.

    Nothing is cached: every query reads the store's current snapshot and
    counts into a local dict.
    """

    def __init__(self, store: DrawStore) -> None:
        self._store = store

    def _draws(self, category: Category) -> list[Draw]:
        return self._store.list_by_category(category)

    def get_all_ball_frequencies(self, category: Category) -> list[FrequencyRecord]:
        counts = _empty_counts()
        for draw in self._draws(category):
            for ball in draw.balls:
                if ball in counts:
                    counts[ball] += 1

        return [FrequencyRecord(n, c) for n, c in counts.items()]

    def get_top_frequent_balls(self, category: Category, limit: int) -> list[FrequencyRecord]:
        frequencies = self.get_all_ball_frequencies(category)
        ordered = sorted(frequencies, key=lambda r: r.frequency, reverse=True)
        return ordered[: max(0, int(limit))]

    def get_least_frequent_balls(self, category: Category, limit: int) -> list[FrequencyRecord]:
        frequencies = self.get_all_ball_frequencies(category)
        ordered = sorted(frequencies, key=lambda r: r.frequency)
        return ordered[: max(0, int(limit))]

    def get_ball_frequency(self, category: Category, ball_number: int) -> int:
        return sum(1 for draw in self._draws(category) if ball_number in draw.balls)

    def get_simultaneous_occurrences(self, category: Category, ball_number: int) -> list[FrequencyRecord]:
        """Count the balls drawn together with ``ball_number``."""

        counts = _empty_counts()
        counts.pop(ball_number, None)

        for draw in self._draws(category):
            balls = draw.balls
            if ball_number not in balls:
                continue
            for ball in balls:
                if ball != ball_number and ball in counts:
                    counts[ball] += 1

        return _ranked(counts)

    def get_subsequent_occurrences(self, category: Category, ball_number: int) -> list[FrequencyRecord]:
        """Count the balls of each draw that follows a draw containing ``ball_number``.

        Draws are walked oldest first. Adjacency is positional: the next
        recorded draw counts whatever the calendar gap. The newest draw has no
        successor.
        """

        # The store lists newest first; re-sort ascending. Stable, so equal
        # dates keep insertion order.
        ordered = sorted(self._draws(category), key=lambda d: d.draw_date)

        counts = _empty_counts()
        for current, following in zip(ordered, ordered[1:]):
            if ball_number not in current.balls:
                continue
            for ball in following.balls:
                if ball in counts:
                    counts[ball] += 1

        return _ranked(counts)

    def get_draws_with_ball(self, category: Category, ball_number: int) -> list[Draw]:
        return [draw for draw in self._draws(category) if ball_number in draw.balls]

    def get_statistics(self, category: Category, limit: int = 5) -> StatisticsResult:
        return StatisticsResult(
            top_frequent=self.get_top_frequent_balls(category, limit),
            least_frequent=self.get_least_frequent_balls(category, limit),
            all_frequencies=self.get_all_ball_frequencies(category),
        )

    def consult(self, category: Category, ball_number: int) -> ConsultResult:
        return ConsultResult(
            simultaneous=self.get_simultaneous_occurrences(category, ball_number),
            subsequent=self.get_subsequent_occurrences(category, ball_number),
            draw_history=self.get_draws_with_ball(category, ball_number),
        )

