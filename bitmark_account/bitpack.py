#
# Python-bitmark-account -- Bitmark Account Seed, Recovery Phrase and Account Number support
#
# Copyright (c) 2022, Dominion Research & Development Corp.
#
# Python-bitmark-account is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or (at your option) any later
# version.  It is also available under alternative (eg. Commercial) licenses, at
# your option.  See the LICENSE file at the top of the source tree.
#
# Python-bitmark-account is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
#
from __future__		import annotations

from typing		import Iterable, List, Tuple

from .defaults		import WORD_BITS, WORD_COUNT

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

"""
Conversion between bytes and 11-bit dictionary indices, most-significant bit first.

Neither direction requires the bit count to divide evenly; the leftover (remainder, bits) is
returned, for each Recovery Phrase format to dispose of in its own way.
"""

__all__				= ( "pack", "unpack", "MASKS" )

# 0..10 bit masks
MASKS				= tuple( ( 1 << n ) - 1 for n in range( WORD_BITS ))


def pack( indices: Iterable[int] ) -> Tuple[bytes, int, int]:
    """Pack 11-bit indices into bytes.  Returns the bytes, plus the remaining (< 8) bits not yet
    filling a byte, as (data, remainder, bits).

    """
    data			= bytearray()
    accumulator			= 0
    bits			= 0
    for index in indices:
        if not 0 <= index < WORD_COUNT:
            raise ValueError( f"Index {index} is not an {WORD_BITS}-bit value" )
        accumulator		= accumulator << WORD_BITS | index
        bits		       += WORD_BITS
        while bits >= 8:
            data.append( accumulator >> ( bits - 8 ) & 0xFF )
            bits	       -= 8
        accumulator	       &= MASKS[bits]
    return bytes( data ), accumulator, bits


def unpack( data: bytes ) -> Tuple[List[int], int, int]:
    """Unpack bytes into 11-bit indices.  Returns the indices, plus the remaining (< 11) bits not
    filling an index, as (indices, remainder, bits).

    """
    indices			= []
    accumulator			= 0
    bits			= 0
    for byte in data:
        accumulator		= accumulator << 8 | byte
        bits		       += 8
        if bits >= WORD_BITS:
            bits	       -= WORD_BITS
            indices.append( accumulator >> bits )
            accumulator	       &= MASKS[bits]
    return indices, accumulator, bits
