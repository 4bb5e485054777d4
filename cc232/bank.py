"""Bank queue simulation: customers join the shortest window queue."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from .linear import Queue

DEFAULT_SEED = 20260406


class _MT19937:
    """32-bit Mersenne Twister with the standard single-integer seeding."""

    _N = 624
    _M = 397

    def __init__(self, seed: int) -> None:
        state = [seed & 0xFFFFFFFF]
        for i in range(1, self._N):
            prev = state[-1]
            state.append((1812433253 * (prev ^ (prev >> 30)) + i) & 0xFFFFFFFF)
        self._state = state
        self._index = self._N

    def _twist(self) -> None:
        mt = self._state
        n = self._N
        for i in range(n):
            y = (mt[i] & 0x80000000) | (mt[(i + 1) % n] & 0x7FFFFFFF)
            value = mt[(i + self._M) % n] ^ (y >> 1)
            if y & 1:
                value ^= 0x9908B0DF
            mt[i] = value
        self._index = 0

    def __call__(self) -> int:
        if self._index >= self._N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & 0xFFFFFFFF

    def uniform(self, low: int, high: int) -> int:
        """Uniform integer in [low, high] by multiply-and-shift rejection."""
        span = high - low + 1
        product = self() * span
        low_bits = product & 0xFFFFFFFF
        if low_bits < span:
            threshold = ((1 << 32) - span) % span
            while low_bits < threshold:
                product = self() * span
                low_bits = product & 0xFFFFFFFF
        return low + (product >> 32)


@dataclass
class Customer:
    window: int = -1
    time: int = 0


@dataclass
class BankSimulationStep:
    now: int = 0
    queues: List[List[int]] = field(default_factory=list)


@dataclass
class BankSimulationResult:
    windows: int = 0
    service_time: int = 0
    total_arrivals: int = 0
    total_served: int = 0
    timeline: List[BankSimulationStep] = field(default_factory=list)


def best_window(windows: Sequence[Queue[Customer]]) -> int:
    """Index of the shortest queue; the first one wins ties."""
    if not windows:
        raise ValueError("windows must not be empty")
    return min(range(len(windows)), key=lambda i: len(windows[i]))


def simulate(n_win: int, serv_time: int, seed: int = DEFAULT_SEED) -> BankSimulationResult:
    """Run the simulation for serv_time ticks with n_win service windows."""
    if n_win <= 0 or serv_time < 0:
        raise ValueError("invalid simulation parameters")

    windows: List[Queue[Customer]] = [Queue() for _ in range(n_win)]
    rng = _MT19937(seed)
    result = BankSimulationResult(windows=n_win, service_time=serv_time)

    for now in range(serv_time):
        if rng.uniform(0, n_win) != 0:
            service = rng.uniform(1, 98)
            customer = Customer(window=best_window(windows), time=service)
            windows[customer.window].enqueue(customer)
            result.total_arrivals += 1

        for queue in windows:
            if not queue.empty():
                front = queue.front()
                front.time -= 1
                if front.time == 0:
                    queue.dequeue()
                    result.total_served += 1

        result.timeline.append(
            BankSimulationStep(
                now=now,
                queues=[[customer.time for customer in queue] for queue in windows],
            )
        )

    return result