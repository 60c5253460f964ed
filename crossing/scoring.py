"""Score sinks: where the player's counters are published."""

from __future__ import annotations

from typing import Protocol


class ScoreSink(Protocol):
    def set_score(self, counter: str, value: int) -> None:
        ...


class ScoreBoard:
    """
    Fans score updates out to every registered sink.

    The board also remembers the last published value of each counter so
    late-registered sinks and tests can read it back.
    """

    def __init__(self, sinks: list[ScoreSink] | None = None) -> None:
        self.sinks: list[ScoreSink] = list(sinks) if sinks else []
        self.scores: dict[str, int] = {}

    def add_sink(self, sink: ScoreSink) -> None:
        self.sinks.append(sink)
        for counter, value in self.scores.items():
            sink.set_score(counter, value)

    def set_score(self, counter: str, value: int) -> None:
        self.scores[counter] = value
        for sink in self.sinks:
            sink.set_score(counter, value)

    def get(self, counter: str) -> int:
        return self.scores.get(counter, 0)
