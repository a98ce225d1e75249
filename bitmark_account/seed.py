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

import logging

from typing		import Optional, Tuple, Union

from .defaults		import (
    SEED_HEADER_V1, SEED_HEADER_V2, SEED_HEADER_LENGTH, SEED_PREFIX_LENGTH, SEED_PREFIX_LIVENET, SEED_PREFIX_TESTNET,
    SEED_CORE_V1_LENGTH, SEED_CORE_V2_LENGTH, SEED_CHECKSUM_LENGTH, SEED_V1_LENGTH, SEED_V2_LENGTH,
    SEED_ENTROPY_LENGTH,
)
from .encoding		import to_base58, from_base58, checksum
from .errors		import (
    InvalidSeedError, InvalidSeedLengthError, InvalidSeedHeaderError, InvalidSeedChecksumError, WrongNetworkError,
)
from .types		import Network, SeedVersion

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= (
    "encode_seed", "decode_seed", "core_version", "core_mode", "core_network", "extend_entropy", "check_network",
)

log				= logging.getLogger( __package__ )


def core_version( core: bytes ) -> SeedVersion:
    """Identify the seed core version by its length."""
    if len( core ) == SEED_CORE_V1_LENGTH:
        return SeedVersion.V1
    if len( core ) == SEED_CORE_V2_LENGTH:
        return SeedVersion.V2
    raise InvalidSeedLengthError(
        f"Seed core of {len( core )} bytes; expected {SEED_CORE_V1_LENGTH} (V1) or {SEED_CORE_V2_LENGTH} (V2)" )


def core_mode( core: bytes ) -> int:
    """The 4-bit network "mode" pattern carried in the top bits of the first 4 bytes of a V2 core."""
    return core[0] & 0x80 | core[1] & 0x40 | core[2] & 0x20 | core[3] & 0x10


def core_network( core: bytes ) -> Network:
    """Deduce the Network from a V2 seed core's own bit pattern: the mode is repeated in the high
    nibble of byte 15 for livenet, or inverted for testnet.  Any other relation is malformed.

    """
    mode			= core_mode( core )
    if mode == core[15] & 0xF0:
        return Network.Livenet
    if mode == core[15] & 0xF0 ^ 0xF0:
        return Network.Testnet
    raise InvalidSeedError( "Seed core network mode is neither livenet nor testnet" )


def extend_entropy( entropy: bytes, network: Network ) -> bytes:
    """Extend 128 bits of entropy into a 17-byte V2 seed core: append the high nibble of byte 15
    (w/ a zero low nibble), and then overwrite the high nibble of byte 15 with the network mode.

    """
    if len( entropy ) != SEED_ENTROPY_LENGTH:
        raise ValueError( f"Entropy length: {len( entropy )} expected: {SEED_ENTROPY_LENGTH}" )
    core			= bytearray( entropy )
    core.append( core[15] & 0xF0 )  # bits 7654xxxx  where x=zero
    mode			= core_mode( core )
    if network is Network.Testnet:
        mode		       ^= 0xF0
    core[15]			= mode | core[15] & 0x0F
    return bytes( core )


def check_network( network: Network, expected: Network, what: str ):
    """Reject well-formed data intended for another network."""
    if network is not expected:
        log.warning( f"Rejected {what} for {network}; expected {expected}" )
        raise WrongNetworkError( f"Wrong network: {what} is for {network}, not {expected}", network=network, expected=expected )


def encode_seed( core: bytes, network: Union[Network,str] ) -> str:
    """Encode a V1 (32-byte) or V2 (17-byte) seed core as base58 Seed text.  V1 Seeds carry an
    explicit network prefix byte; V2 Seeds carry the network in the core itself.

    """
    network			= Network.of( network )
    version			= core_version( core )
    if version is SeedVersion.V1:
        prefix			= SEED_PREFIX_TESTNET if network is Network.Testnet else SEED_PREFIX_LIVENET
        data			= SEED_HEADER_V1 + bytes([ prefix ]) + core
    else:
        data			= SEED_HEADER_V2 + core
    return to_base58( data + checksum( data ))


def decode_seed(
    seed: str,
    network: Optional[Union[Network,str]] = None,   # default: defaults.NETWORK
) -> Tuple[SeedVersion, Network, bytes]:
    """Decode base58 Seed text, returning its (version, network, core).

    The checks are made in order, and the first failure raised: base58 encoding, length, checksum,
    header, the network prefix or core network mode, and finally that the Seed is for the expected
    network (a WrongNetworkError).

    """
    network			= Network.of( network )
    try:
        data			= from_base58( seed.strip() )
    except ValueError as exc:
        raise InvalidSeedError( f"Seed is not valid base58: {exc}" ) from None

    if len( data ) not in ( SEED_V1_LENGTH, SEED_V2_LENGTH ):
        raise InvalidSeedLengthError(
            f"Seed of {len( data )} bytes; expected {SEED_V1_LENGTH} (V1) or {SEED_V2_LENGTH} (V2)" )

    body,check			= data[:-SEED_CHECKSUM_LENGTH],data[-SEED_CHECKSUM_LENGTH:]
    if checksum( body ) != check:
        raise InvalidSeedChecksumError( "Seed checksum invalid" )

    header			= body[:SEED_HEADER_LENGTH]
    if header == SEED_HEADER_V1 and len( body ) == SEED_HEADER_LENGTH + SEED_PREFIX_LENGTH + SEED_CORE_V1_LENGTH:
        version			= SeedVersion.V1
        prefix			= body[SEED_HEADER_LENGTH]
        if prefix not in ( SEED_PREFIX_LIVENET, SEED_PREFIX_TESTNET ):
            raise InvalidSeedError( f"Seed network prefix {prefix:#04x} not recognized" )
        found			= Network.Testnet if prefix == SEED_PREFIX_TESTNET else Network.Livenet
        core			= body[SEED_HEADER_LENGTH + SEED_PREFIX_LENGTH:]
    elif header == SEED_HEADER_V2 and len( body ) == SEED_HEADER_LENGTH + SEED_CORE_V2_LENGTH:
        version			= SeedVersion.V2
        core			= body[SEED_HEADER_LENGTH:]
        found			= core_network( core )
    else:
        raise InvalidSeedHeaderError( f"Seed header {header.hex()} not recognized for a {len( data )}-byte Seed" )

    check_network( found, network, f"{version} Seed" )
    return version, found, core
