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

import hashlib

from typing		import Tuple

import base58

from .defaults		import CHECKSUM_LENGTH, VARINT64_MAXIMUM_BYTES

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= ( "to_base58", "from_base58", "checksum", "to_varint64", "from_varint64" )


def to_base58( data: bytes ) -> str:
    return base58.b58encode( data ).decode( 'ascii' )


def from_base58( text: str ) -> bytes:
    """Decode Bitcoin-alphabet base58 text; raises a ValueError for any character outside the
    alphabet (including non-ASCII).

    """
    return base58.b58decode( text )


def checksum( data: bytes ) -> bytes:
    """The truncated SHA3-256 digest appended to Seeds and Account Numbers."""
    return hashlib.sha3_256( data ).digest()[:CHECKSUM_LENGTH]


#
# varint64 -- the unsigned integer encoding used in packed (signed) Bitmark records
#
#     Groups of 7 bits, least-significant first, with the top bit of each byte set if more follow.
# A 64-bit value needs at most 9 bytes: the first 8 carry 56 bits, and the 9th carries a full 8.
#
def to_varint64( value: int ) -> bytes:
    if not 0 <= value < 1 << 64:
        raise ValueError( f"varint64 value out of range: {value}" )
    result			= bytearray()
    for i in range( VARINT64_MAXIMUM_BYTES ):
        if i == VARINT64_MAXIMUM_BYTES - 1:
            result.append( value & 0xFF )
            break
        if value < 0x80:
            result.append( value )
            break
        result.append( value & 0x7F | 0x80 )
        value		      >>= 7
    return bytes( result )


def from_varint64( data: bytes ) -> Tuple[int, int]:
    """Decode a varint64 from the start of data, returning the value and the number of bytes consumed."""
    value			= 0
    for i,byte in enumerate( data[:VARINT64_MAXIMUM_BYTES] ):
        if i == VARINT64_MAXIMUM_BYTES - 1:
            return value | byte << ( 7 * i ), i + 1
        value		       |= ( byte & 0x7F ) << ( 7 * i )
        if byte < 0x80:
            return value, i + 1
    raise ValueError( f"varint64 truncated after {len( data )} bytes" )
