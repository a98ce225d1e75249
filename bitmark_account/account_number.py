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
    ALGORITHM_ED25519, ALGORITHM_SHIFT, PUBKEY_MASK, TESTNET_MASK, CHECKSUM_LENGTH, ACCOUNT_NUMBER_LENGTH, KEY_SIZE,
)
from .encoding		import to_base58, from_base58, checksum
from .errors		import InvalidAccountNumberEncodingError, InvalidChecksumError
from .keys		import verify_signature
from .seed		import check_network
from .types		import Network

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= (
    "key_variant", "account_bytes", "encode_account_number", "decode_account_number", "account_number_network",
    "extract_public_key", "validate_account_number", "verify",
)

log				= logging.getLogger( __package__ )


def key_variant( network: Union[Network,str], algorithm: int = ALGORITHM_ED25519 ) -> int:
    """The leading Account Number byte: the signing algorithm, a public key marker and the network."""
    variant			= algorithm << ALGORITHM_SHIFT | PUBKEY_MASK
    if Network.of( network ) is Network.Testnet:
        variant		       |= TESTNET_MASK
    return variant


def account_bytes( public_key: bytes, network: Union[Network,str], algorithm: int = ALGORITHM_ED25519 ) -> bytes:
    """The key variant byte followed by the auth public key; what the Account Number encodes."""
    if len( public_key ) != KEY_SIZE:
        raise ValueError( f"Public key length: {len( public_key )} expected: {KEY_SIZE}" )
    return bytes([ key_variant( network, algorithm ) ]) + public_key


def encode_account_number( public_key: bytes, network: Union[Network,str], algorithm: int = ALGORITHM_ED25519 ) -> str:
    data			= account_bytes( public_key, network, algorithm )
    return to_base58( data + checksum( data ))


def decode_account_number( account_number: str ) -> Tuple[Network, int, bytes]:
    """Decode and validate the encoding and checksum of an Account Number, returning the network it
    is intended for, its signing algorithm and the public key.  No network policy is applied.

    """
    try:
        data			= from_base58( account_number.strip() )
    except ValueError as exc:
        raise InvalidAccountNumberEncodingError( f"Account Number is not valid base58: {exc}" ) from None
    if not data:
        raise InvalidAccountNumberEncodingError( "Account Number is empty" )
    if len( data ) != ACCOUNT_NUMBER_LENGTH:
        raise InvalidAccountNumberEncodingError(
            f"Account Number of {len( data )} bytes; expected {ACCOUNT_NUMBER_LENGTH}" )

    variant_and_pubkey,check	= data[:-CHECKSUM_LENGTH],data[-CHECKSUM_LENGTH:]
    if checksum( variant_and_pubkey ) != check:
        raise InvalidChecksumError( "Account Number checksum invalid" )

    variant			= variant_and_pubkey[0]
    network			= Network.Testnet if variant & TESTNET_MASK else Network.Livenet
    return network, variant >> ALGORITHM_SHIFT, variant_and_pubkey[1:]


def account_number_network( account_number: str ) -> Network:
    """Which network an (otherwise valid) Account Number is for."""
    network,_,_			= decode_account_number( account_number )
    return network


def extract_public_key(
    account_number: str,
    network: Optional[Union[Network,str]] = None,  # default: defaults.NETWORK
) -> bytes:
    """Return the auth public key from an Account Number, if it is valid for the network."""
    found,_,public_key		= decode_account_number( account_number )
    check_network( found, Network.of( network ), "Account Number" )
    return public_key


def validate_account_number(
    account_number: str,
    network: Optional[Union[Network,str]] = None,
):
    """Raises an AccountError if the Account Number is not valid for the network."""
    extract_public_key( account_number, network=network )


def verify(
    account_number: str,
    message: bytes,
    signature: bytes,
    network: Optional[Union[Network,str]] = None,
):
    """Verify that the signature over message was made by the Account with account_number; raises an
    InvalidSignatureError if not, or another AccountError if the Account Number itself is invalid.

    """
    public_key			= extract_public_key( account_number, network=network )
    verify_signature( public_key, message, signature )
