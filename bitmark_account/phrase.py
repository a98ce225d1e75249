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

from typing		import List, Optional, Sequence, Tuple, Union

from .bitpack		import pack, unpack
from .defaults		import (
    SEED_PREFIX_LENGTH, SEED_CORE_V1_LENGTH, SEED_CORE_V2_LENGTH,
    PHRASE_V1_LENGTH, PHRASE_V2_LENGTH, PHRASE_V2_CHECKED_LENGTH,
)
from .dictionary	import Dictionary
from .errors		import InvalidRecoveryPhraseError, InvalidRecoveryPhraseChecksumError, InvalidWordError
from .types		import Language, PhraseFormat
from .util		import commas, ordinal

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= ( "produce_phrase", "recover_phrase", "words_of" )

log				= logging.getLogger( __package__ )

PHRASE_V1_BYTES			= SEED_PREFIX_LENGTH + SEED_CORE_V1_LENGTH  # 33


def words_of( phrase: Union[str,Sequence[str]] ) -> List[str]:
    """Split (if necessary) and normalize a Recovery Phrase, which is often recovered as user input:
    removes excess whitespace and down-cases.

    """
    if isinstance( phrase, str ):
        phrase			= phrase.split()
    return [ w.strip().lower() for w in phrase if w.strip() ]


def indices_of( words: Sequence[str], dictionary: Dictionary ) -> List[int]:
    indices			= []
    for i,word in enumerate( words ):
        try:
            indices.append( dictionary.index( word ))
        except InvalidWordError:
            raise InvalidWordError(
                f"Invalid {ordinal( i+1 )} {dictionary.language.value} word: {word!r}", word=word, index=i ) from None
    return indices


def bytes_to_twenty_four_words( data: bytes, dictionary: Dictionary ) -> List[str]:
    """Convert 33 bytes (V1 network prefix + 32-byte core) to a phrase of 24 words."""
    if len( data ) != PHRASE_V1_BYTES:
        raise ValueError( f"Input length: {len( data )} expected: {PHRASE_V1_BYTES}" )
    indices,_,bits		= unpack( data )
    assert len( indices ) == PHRASE_V1_LENGTH and bits == 0
    return [ dictionary.word( i ) for i in indices ]


def twenty_four_words_to_bytes( words: Sequence[str], dictionary: Dictionary ) -> bytes:
    data,_,bits			= pack( indices_of( words, dictionary ))
    if len( data ) != PHRASE_V1_BYTES or bits:
        raise InvalidRecoveryPhraseError( f"Only converted: {len( data )} bytes expected: {PHRASE_V1_BYTES}" )
    return data


def bytes_to_twelve_words( core: bytes, dictionary: Dictionary ) -> List[str]:
    """Convert a 17-byte V2 core to 12 words.  Only the high nibble of the final byte is encoded; the
    low nibble is reserved, and must be zero.

    """
    if len( core ) != SEED_CORE_V2_LENGTH or core[-1] & 0x0F:
        raise ValueError( f"Input must be a {SEED_CORE_V2_LENGTH}-byte V2 seed core w/ a zero final nibble" )
    indices,_,bits		= unpack( core )
    assert len( indices ) == PHRASE_V2_LENGTH and bits == 4
    return [ dictionary.word( i ) for i in indices ]


def twelve_words_to_bytes( words: Sequence[str], dictionary: Dictionary ) -> bytes:
    data,remainder,bits		= pack( indices_of( words, dictionary ))
    # 16 whole bytes are converted, and the final nibble remains to be packed
    if bits != 4 or len( data ) != SEED_CORE_V2_LENGTH - 1:
        raise InvalidRecoveryPhraseError( f"Only converted: {len( data )} bytes expected: {SEED_CORE_V2_LENGTH - 1}.5" )
    # justify final 4 bits to high nibble; low nibble is zero
    return data + bytes([ remainder << 4 ])


def bytes_to_thirteen_words( core: bytes, dictionary: Dictionary ) -> List[str]:
    """Convert a 17-byte V2 core to 13 words.  The last 7 bits of the 13th word are the top 7 bits
    of the SHA-256 digest of the core.

    """
    if len( core ) != SEED_CORE_V2_LENGTH:
        raise ValueError( f"Input length: {len( core )} expected: {SEED_CORE_V2_LENGTH}" )
    digest			= hashlib.sha256( core ).digest()
    indices,_,_			= unpack( core + digest[:2] )
    return [ dictionary.word( i ) for i in indices[:PHRASE_V2_CHECKED_LENGTH] ]


def thirteen_words_to_bytes( words: Sequence[str], dictionary: Dictionary ) -> bytes:
    data,remainder,bits		= pack( indices_of( words, dictionary ))
    # 17 whole bytes are converted, and 7 check bits remain
    if bits != 7 or len( data ) != SEED_CORE_V2_LENGTH:
        raise InvalidRecoveryPhraseError( f"Only converted: {len( data )} bytes expected: {SEED_CORE_V2_LENGTH}" )
    check			= remainder << 1
    digest			= hashlib.sha256( data ).digest()
    # only the top 7 bits of the check byte are actually stored
    if digest[0] & 0xFE != check:
        raise InvalidRecoveryPhraseChecksumError( f"Recovery Phrase check fails: {digest[0] & 0xFE:02x} != {check:02x}" )
    return data


PHRASE_PRODUCERS		= {
    PhraseFormat.W24:	bytes_to_twenty_four_words,
    PhraseFormat.W12:	bytes_to_twelve_words,
    PhraseFormat.W13:	bytes_to_thirteen_words,
}

PHRASE_RECOVERERS		= {
    PhraseFormat.W24:	twenty_four_words_to_bytes,
    PhraseFormat.W12:	twelve_words_to_bytes,
    PhraseFormat.W13:	thirteen_words_to_bytes,
}


def produce_phrase(
    data: bytes,
    format: PhraseFormat,
    language: Optional[Union[Language,str]] = None,  # default: english
) -> List[str]:
    """Produce the Recovery Phrase words for the supplied seed material in the designated format:

        W24: 33 bytes; the V1 network prefix byte + 32-byte core
        W12: a 17-byte V2 core (w/ a zero final nibble)
        W13: a 17-byte V2 core

    """
    dictionary			= Dictionary.of( language )
    return PHRASE_PRODUCERS[PhraseFormat( format )]( data, dictionary )


def recover_phrase(
    phrase: Union[str,Sequence[str]],
    language: Optional[Union[Language,str]] = None,  # default: english
) -> Tuple[PhraseFormat, bytes]:
    """Recover the seed material from a Recovery Phrase, returning its format (deduced from the
    number of words) and the bytes encoded; the inverse of produce_phrase.

    Validates the phrase: every word must be in the language's dictionary, the words must convert
    to exactly the expected number of bits, and any check bits must match.  No partial or "best
    effort" result is ever produced.

    """
    dictionary			= Dictionary.of( language )
    words			= words_of( phrase )
    try:
        format			= PhraseFormat( len( words ))
    except ValueError:
        raise InvalidRecoveryPhraseError(
            f"Recovery Phrase of {len( words )} words; expected {commas( sorted( f.value for f in PhraseFormat ), final='or' )}" ) from None
    data			= PHRASE_RECOVERERS[format]( words, dictionary )
    log.debug( f"Recovered {len( data )} bytes from {len( words )}-word {dictionary.language.value} Recovery Phrase" )
    return format, data
