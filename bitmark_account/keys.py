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
import logging

from typing		import List, Tuple

import nacl.exceptions
import nacl.public
import nacl.secret
import nacl.signing

from .defaults		import (
    SEED_CORE_V1_LENGTH, SEED_CORE_V2_LENGTH, SEED_CORE_V2_ABSORB, KEY_COUNT, KEY_SIZE,
    SEED_NONCE, AUTH_SEED_COUNT, ENCR_SEED_COUNT, ALGORITHM_ED25519,
)
from .errors		import InvalidSeedError, InvalidSeedLengthError, InvalidSignatureError
from .types		import SeedVersion

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= ( "AuthKey", "EncrKey", "derive_keys", "seed_core_v1_entropy", "seed_core_v2_entropy" )

log				= logging.getLogger( __package__ )


class AuthKey:
    """An Ed25519 signing (authentication) keypair, deterministically generated from 32 bytes of
    entropy.  The public key identifies the Account (see account_number).

    """
    algorithm			= ALGORITHM_ED25519

    def __init__( self, entropy: bytes ):
        if len( entropy ) != KEY_SIZE:
            raise ValueError( f"Auth key entropy length: {len( entropy )} expected: {KEY_SIZE}" )
        self.signing_key	= nacl.signing.SigningKey( entropy )

    @property
    def public_key( self ) -> bytes:
        return bytes( self.signing_key.verify_key )

    @property
    def private_key( self ) -> bytes:
        """The 64-byte Ed25519 private key: the 32-byte seed, followed by the public key."""
        return bytes( self.signing_key ) + self.public_key

    def sign( self, message: bytes ) -> bytes:
        return self.signing_key.sign( message ).signature

    def verify( self, message: bytes, signature: bytes ):
        verify_signature( self.public_key, message, signature )


class EncrKey:
    """A Curve25519 (NaCl box) encryption keypair; the 32 bytes of entropy are the private key."""

    def __init__( self, entropy: bytes ):
        if len( entropy ) != KEY_SIZE:
            raise ValueError( f"Encr key entropy length: {len( entropy )} expected: {KEY_SIZE}" )
        self.box_key		= nacl.public.PrivateKey( entropy )

    @property
    def public_key( self ) -> bytes:
        return bytes( self.box_key.public_key )

    @property
    def private_key( self ) -> bytes:
        return bytes( self.box_key )


def verify_signature( public_key: bytes, message: bytes, signature: bytes ):
    """Verify an Ed25519 signature, raising an InvalidSignatureError on failure."""
    try:
        nacl.signing.VerifyKey( public_key ).verify( message, signature )
    except nacl.exceptions.BadSignatureError:
        raise InvalidSignatureError( "Invalid signature" ) from None
    except ( nacl.exceptions.ValueError, nacl.exceptions.TypeError ) as exc:
        raise InvalidSignatureError( f"Invalid signature: {exc}" ) from None


def seed_core_v1_entropy( core: bytes ) -> Tuple[bytes, bytes]:
    """Derive the auth and encr key entropy from a 32-byte V1 seed core.

    Each of two fixed 16-byte counters is sealed (XSalsa20-Poly1305, w/ an all-zero nonce) using
    the core as the secret key; the 32-byte authenticator + ciphertext is the key entropy.  This
    must remain bit-for-bit identical to recover existing V1 Accounts.

    """
    if len( core ) != SEED_CORE_V1_LENGTH:
        raise InvalidSeedLengthError( f"V1 seed core length: {len( core )} expected: {SEED_CORE_V1_LENGTH}" )
    box				= nacl.secret.SecretBox( core )
    auth			= box.encrypt( AUTH_SEED_COUNT, SEED_NONCE ).ciphertext
    encr			= box.encrypt( ENCR_SEED_COUNT, SEED_NONCE ).ciphertext
    return auth, encr


def seed_core_v2_entropy( core: bytes, key_count: int = KEY_COUNT, key_size: int = KEY_SIZE ) -> List[bytes]:
    """Derive key_count keys of key_size bytes from a 17-byte V2 seed core.  The core is written 4
    times into a single SHAKE-256 state, and the keys are squeezed out in sequence.

    """
    if len( core ) != SEED_CORE_V2_LENGTH:
        raise InvalidSeedLengthError( f"V2 seed core length: {len( core )} expected: {SEED_CORE_V2_LENGTH}" )
    if core[-1] & 0x0F:
        raise InvalidSeedError( "V2 seed core's reserved final nibble is not zero" )
    if key_count <= 0:
        raise ValueError( f"Invalid key count: {key_count}" )

    shake			= hashlib.shake_256()
    for _ in range( SEED_CORE_V2_ABSORB ):
        shake.update( core )
    output			= shake.digest( key_count * key_size )
    return [ output[i * key_size:( i + 1 ) * key_size] for i in range( key_count ) ]


def derive_keys( core: bytes, version: SeedVersion ) -> Tuple[AuthKey, EncrKey]:
    """Derive the (auth, encr) keypairs from a seed core; fully deterministic."""
    if version is SeedVersion.V1:
        auth,encr		= seed_core_v1_entropy( core )
    else:
        auth,encr		= seed_core_v2_entropy( core )
    log.debug( f"Derived auth and encr keys from {len( core ) * 8}-bit {version} seed core" )
    return AuthKey( auth ), EncrKey( encr )
