"""Period-8 bit schedule shared by the encoder and decoder.

Five bytes hold exactly eight 5-bit symbols, so the alignment between symbols
and bytes repeats every eight symbols. Each phase describes where its symbol
sits inside a 16-bit window made of the cursor byte (high half) and the byte
after it (low half)::

    byte:   0         1         2         3         4
    bits:   01234567  01234567  01234567  01234567  01234567
    phase:  00000111  11222223  33334444  45555566  66677777

Encoding reads ``(window >> shift) & mask``; decoding ORs ``value << shift``
back into the same window. After a phase the cursor moves forward by
``advance`` bytes.
"""

from __future__ import annotations

from typing import NamedTuple


class Phase(NamedTuple):
    """Position of one symbol within the 16-bit window at the byte cursor."""

    shift: int
    mask: int
    advance: int


SYMBOL_MASK = 0x1F

PHASES: tuple[Phase, ...] = (
    Phase(shift=11, mask=SYMBOL_MASK, advance=0),  # byte 0 bits 0-4
    Phase(shift=6, mask=SYMBOL_MASK, advance=1),  # byte 0 bits 5-7, byte 1 bits 0-1
    Phase(shift=9, mask=SYMBOL_MASK, advance=0),  # byte 1 bits 2-6
    Phase(shift=4, mask=SYMBOL_MASK, advance=1),  # byte 1 bit 7, byte 2 bits 0-3
    Phase(shift=7, mask=SYMBOL_MASK, advance=1),  # byte 2 bits 4-7, byte 3 bit 0
    Phase(shift=10, mask=SYMBOL_MASK, advance=0),  # byte 3 bits 1-5
    Phase(shift=5, mask=SYMBOL_MASK, advance=1),  # byte 3 bits 6-7, byte 4 bits 0-2
    Phase(shift=8, mask=SYMBOL_MASK, advance=1),  # byte 4 bits 3-7
)

PERIOD_SYMBOLS = len(PHASES)
PERIOD_BYTES = sum(phase.advance for phase in PHASES)


def phase_for(position: int) -> Phase:
    """Return the phase for the symbol at the given position."""
    return PHASES[position % PERIOD_SYMBOLS]
