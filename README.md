# ringfilter

Fixed-size circular buffers of 32-bit floats, plus a simple FIR filter that
reads from one buffer and writes its results into another.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Circular buffers

`ringfilter.buffer.CircularBuffer` holds a fixed number of float32 slots,
all starting at `0.0`. The size must be a positive power of two; anything
else raises `ValueError`.

```python
from ringfilter.buffer import CircularBuffer

buf = CircularBuffer(16)

for value in range(20):
    buf.push(value)          # writes at the head and advances it, wrapping around

buf.get_newest(1)            # 19.0: one step behind the head
buf.get_oldest(0)            # 4.0: the slot at the head, the oldest still held
buf.pop()                    # read at the tail and advance it
```

The buffer keeps separate `head` (write) and `tail` (read) positions and does
not track how full it is: once the head wraps around it simply overwrites the
oldest slot, and popping never fails for lack of data.

Slots can also be read and written directly with `get(index)` and
`set(index, value)`; values are stored rounded to float32. The raw bytes of
the storage are reachable with `get_byte(index)` and `set_byte(index, value)`,
where `byte_size` gives the number of bytes. Out-of-range indices and offsets
raise `IndexError`; a byte value outside 0–255 raises `ValueError`.

`next_index(i)` and `prev_index(i)` give the neighbouring slot positions with
wrap-around. `len(buf)` is the number of slots and iterating over the buffer
yields the slots in storage order. `format()` (also what `str(buf)` gives)
returns a text dump of the first sixteen slots with head (`H>`) and tail
(`<T`) markers; slots past the end of a smaller buffer are shown as `0.00`.

## FIR filtering

`ringfilter.filter.FirFilter` combines the newest `order` samples of an input
buffer with its coefficients and pushes the sum into an output buffer.

```python
from ringfilter.buffer import CircularBuffer
from ringfilter.filter import FirFilter

samples = CircularBuffer(16)
results = CircularBuffer(16)

fir = FirFilter(samples, 4, results)
fir.coefficients = [0.25, 0.25, 0.25, 0.25]

samples.push(1.0)
fir.update()                 # pushes one filtered value into `results` and returns it
```

The order must be greater than zero, and the input buffer must be given;
otherwise `ValueError` is raised. When no output buffer is given, one is
created with `order` slots (so `order` must then be a power of two).

Coefficients start at zero. Assigning `coefficients` requires exactly `order`
values, otherwise `ValueError` is raised; the first coefficient applies to the
newest sample. Arithmetic in `update()` is rounded to float32 at each step. If
the order exceeds the input buffer's size, only as many taps as the buffer has
slots are used.

## What it does not do

The package is a library only: it has no command-line program. It offers FIR
filtering alone; there is no IIR filter and no coefficient design.