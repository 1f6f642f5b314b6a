"""Finite impulse response filter running over circular buffers."""

from __future__ import annotations

import struct
from array import array
from collections.abc import Iterable

from ringfilter.buffer import CircularBuffer


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class FirFilter:
    """FIR filter reading from an input ring and pushing results to an output ring."""

    def __init__(
        self,
        input_buffer: CircularBuffer,
        order: int,
        output_buffer: CircularBuffer | None = None,
    ) -> None:
        if order <= 0:
            raise ValueError("filter order must be greater than zero")
        if input_buffer is None:
            raise ValueError("input buffer must not be None")
        self.input_buffer = input_buffer
        self.output_buffer = output_buffer if output_buffer is not None else CircularBuffer(order)
        self.order = order
        self._coefficients = array("f", bytes(order * array("f").itemsize))

    @property
    def coefficients(self) -> list[float]:
        """The filter taps, newest sample first."""
        return list(self._coefficients)

    @coefficients.setter
    def coefficients(self, values: Iterable[float]) -> None:
        taps = array("f", values)
        if len(taps) != self.order:
            raise ValueError(f"expected {self.order} coefficients, got {len(taps)}")
        self._coefficients = taps

    def update(self) -> float:
        """Compute one output sample, push it to the output buffer and return it."""
        result = 0.0
        usable = min(self.order, self.input_buffer.size)
        for offset, coefficient in enumerate(self._coefficients[:usable]):
            sample = self.input_buffer.get_newest(offset)
            result = _f32(result + _f32(coefficient * sample))
        self.output_buffer.push(result)
        return result