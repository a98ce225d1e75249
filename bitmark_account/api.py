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
import secrets

from typing		import List, Optional, Sequence, Union

from .account_number	import account_bytes, encode_account_number
from .defaults		import SEED_ENTROPY_LENGTH, SEED_PREFIX_LIVENET, SEED_PREFIX_TESTNET
from .errors		import EntropySourceError, InvalidRecoveryPhraseError
from .keys		import AuthKey, EncrKey, derive_keys
from .phrase		import produce_phrase, recover_phrase
from .seed		import core_version, core_network, extend_entropy, encode_seed, decode_seed, check_network
from .types		import Language, Network, PhraseFormat, SeedVersion

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= ( "Account", "account", "RANDOM_BYTES" )

# The secure entropy source for new Accounts; substitute it (eg. in testing) here
RANDOM_BYTES			= secrets.token_bytes

log				= logging.getLogger( __package__ )


class Account:
    """A Bitmark Account: a seed core, the network it is for, and the auth (signing) and encr
    (encryption) keys deterministically derived from the core.

    There are two seed core versions, which must both continue to be recovered bit-exactly:

    | Version | Core     | Network            | Recovery Phrase      |
    |---------+----------+--------------------+----------------------|
    | V1      | 32 bytes | prefix byte 0x00/1 | 24 words             |
    | V2      | 17 bytes | bits of the core   | 13 (or 12) words     |

    New Accounts are always V2.  Create Accounts via:

      .new			-- from fresh random entropy
      .from_seed		-- from base58 Seed text
      .from_recovery_phrase	-- from a 24-, 12- or 13-word Recovery Phrase

    Every decode is checked against the expected network (default: defaults.NETWORK); a Seed or
    Recovery Phrase for the other network raises a WrongNetworkError.

    An Account is immutable; construction either produces a fully valid Account, or raises.

    """
    def __init__( self, core: bytes, network: Union[Network,str] ):
        version			= core_version( core )
        network			= Network.of( network )
        if version is SeedVersion.V2:
            check_network( core_network( core ), network, "V2 seed core" )
        auth_key,encr_key	= derive_keys( core, version )
        self._core		= bytes( core )
        self._version		= version
        self._network		= network
        self._auth_key		= auth_key
        self._encr_key		= encr_key

    @classmethod
    def new( cls, network: Optional[Union[Network,str]] = None ) -> Account:
        """Create a new V2 Account for the network, from 128 bits of fresh secure entropy."""
        network			= Network.of( network )
        try:
            entropy		= RANDOM_BYTES( SEED_ENTROPY_LENGTH )
        except Exception as exc:
            raise EntropySourceError( f"Failed to obtain {SEED_ENTROPY_LENGTH} bytes of entropy: {exc}" ) from exc
        if not isinstance( entropy, bytes ) or len( entropy ) != SEED_ENTROPY_LENGTH:
            raise EntropySourceError(
                f"Only got: {len( entropy ) if entropy else 0} bytes of entropy, expected: {SEED_ENTROPY_LENGTH}" )
        acct			= cls( extend_entropy( entropy, network ), network )
        log.info( f"Created new {acct.version} {acct.network} Account" )
        return acct

    @classmethod
    def from_seed(
        cls,
        seed: str,
        network: Optional[Union[Network,str]] = None,  # default: defaults.NETWORK
    ) -> Account:
        version,network,core	= decode_seed( seed, network=network )
        acct			= cls( core, network )
        log.info( f"Recovered {len( core ) * 8}-bit {version} {network} Account from Seed" )
        return acct

    @classmethod
    def from_recovery_phrase(
        cls,
        phrase: Union[str,Sequence[str]],
        language: Optional[Union[Language,str]] = None,  # default: defaults.LANGUAGE
        network: Optional[Union[Network,str]] = None,    # default: defaults.NETWORK
    ) -> Account:
        """Recover an Account from its Recovery Phrase; the word count selects the format:

            24 words: V1; a network byte + 32-byte core
            12 words: V2; a 17-byte core
            13 words: V2; a 17-byte core + 7 check bits

        """
        network			= Network.of( network )
        format,data		= recover_phrase( phrase, language=language )
        if format is PhraseFormat.W24:
            prefix,core		= data[0],data[1:]
            if prefix not in ( SEED_PREFIX_LIVENET, SEED_PREFIX_TESTNET ):
                raise InvalidRecoveryPhraseError( f"Recovery Phrase network indicator {prefix:#04x} not recognized" )
            found		= Network.Testnet if prefix == SEED_PREFIX_TESTNET else Network.Livenet
        else:
            core		= data
            found		= core_network( core )
        check_network( found, network, f"{format.value}-word Recovery Phrase" )
        acct			= cls( core, found )
        log.info( f"Recovered {len( core ) * 8}-bit {acct.version} {found} Account from {format.value}-word Recovery Phrase" )
        return acct

    @property
    def version( self ) -> SeedVersion:
        return self._version

    @property
    def network( self ) -> Network:
        return self._network

    @property
    def auth_key( self ) -> AuthKey:
        return self._auth_key

    @property
    def encr_key( self ) -> EncrKey:
        return self._encr_key

    @property
    def seed( self ) -> str:
        return encode_seed( self._core, self._network )

    def recovery_phrase(
        self,
        language: Optional[Union[Language,str]] = None,
        format: Optional[PhraseFormat] = None,  # default: W24 for V1, W13 for V2
    ) -> List[str]:
        """Produce the Recovery Phrase words.  A V1 Account has only the 24-word format; a V2 Account
        produces 13 words (w/ check bits) by default, or 12 words if format=PhraseFormat.W12.

        """
        if format is None:
            format		= PhraseFormat.W24 if self._version is SeedVersion.V1 else PhraseFormat.W13
        format			= PhraseFormat( format )
        if format.version is not self._version:
            raise ValueError( f"A {self._version} Account cannot produce a {format.value}-word Recovery Phrase" )
        if self._version is SeedVersion.V1:
            prefix		= SEED_PREFIX_TESTNET if self._network is Network.Testnet else SEED_PREFIX_LIVENET
            data		= bytes([ prefix ]) + self._core
        else:
            data		= self._core
        return produce_phrase( data, format, language=language )

    @property
    def account_number( self ) -> str:
        return encode_account_number( self._auth_key.public_key, self._network, self._auth_key.algorithm )

    def __bytes__( self ):
        return account_bytes( self._auth_key.public_key, self._network, self._auth_key.algorithm )

    def sign( self, message: bytes ) -> bytes:
        return self._auth_key.sign( message )

    def __repr__( self ):
        return f"<{self.__class__.__name__} {self._version} {self._network} {self.account_number}>"

    def __eq__( self, other ):
        if not isinstance( other, Account ):
            return NotImplemented
        return self._core == other._core and self._network is other._network

    def __hash__( self ):
        return hash( (self._core, self._network) )


def account(
    secret: Union[str,Sequence[str]],
    network: Optional[Union[Network,str]] = None,    # default: defaults.NETWORK
    language: Optional[Union[Language,str]] = None,  # default: defaults.LANGUAGE; for Recovery Phrases
) -> Account:
    """Recover an Account from either its base58 Seed text, or its Recovery Phrase.

    A Recovery Phrase is recognized by the whitespace between its words (or by being supplied as a
    sequence of words); this is the only valid use of whitespace within a secret.

    """
    if isinstance( secret, str ):
        secret			= secret.strip()
        if not any( c.isspace() for c in secret ):
            return Account.from_seed( secret, network=network )
    return Account.from_recovery_phrase( secret, language=language, network=network )
