# agent_parser/aggregator.py

from threading import Lock
from typing import Dict, Iterable
from agent_parser.schemas import FacetSummary, ParsedAgent
import logging

logger = logging.getLogger(__name__)


def summarize(agents: Iterable[ParsedAgent]) -> FacetSummary:
    """Count labels per facet for one batch of classifications"""
    counter = FacetCounter()
    for agent in agents:
        counter.add(agent)
    return counter.snapshot()


class FacetCounter:
    """
    Running label counts per facet.
    Thread-safe for concurrent requests.
    """

    def __init__(self):
        self._lock = Lock()
        self._total: int = 0
        self._by_browser: Dict[str, int] = {}
        self._by_os: Dict[str, int] = {}
        self._by_device_type: Dict[str, int] = {}

    def add(self, agent: ParsedAgent) -> None:
        with self._lock:
            self._total += 1
            increment(self._by_browser, agent.browser.value)
            increment(self._by_os, agent.os.value)
            increment(self._by_device_type, agent.device_type.value)

    def snapshot(self) -> FacetSummary:
        with self._lock:
            return self._summary()

    def get_and_reset(self) -> FacetSummary:
        """Get counts collected so far and start over"""
        with self._lock:
            summary = self._summary()

            self._total = 0
            self._by_browser.clear()
            self._by_os.clear()
            self._by_device_type.clear()

        logger.info(f"Facet counters reset after {summary.total} classifications")
        return summary

    def _summary(self) -> FacetSummary:
        return FacetSummary(
            total=self._total,
            by_browser=dict(self._by_browser),
            by_os=dict(self._by_os),
            by_device_type=dict(self._by_device_type),
        )


def increment(counts: Dict[str, int], key: str) -> None:
    counts[key] = counts.get(key, 0) + 1


# Global singleton
facet_counter = FacetCounter()
