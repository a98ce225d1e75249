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

from typing		import Dict, Optional, Union

from mnemonic		import Mnemonic

from .defaults		import WORD_COUNT
from .errors		import InvalidWordError
from .types		import Language

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= ( "Dictionary", )

log				= logging.getLogger( __package__ )


class Dictionary:
    """The ordered 2048-word BIP-39 list for a Language, w/ index <--> word lookup.  The lists are
    those shipped with python-mnemonic; Bitmark Recovery Phrases use the standard BIP-39 words, but
    not the BIP-39 checksum or seed stretching.

    Use Dictionary.of( language ) to obtain the (shared, immutable) instance.

    """
    _loaded: Dict[Language, Dictionary] = {}

    def __init__( self, language: Language ):
        self.language		= language
        self.words		= tuple( Mnemonic( language.value ).wordlist )
        assert len( self.words ) == WORD_COUNT, \
            f"{language.value} dictionary contains {len( self.words )} words, not {WORD_COUNT}"
        self.indices		= { w: i for i,w in enumerate( self.words ) }

    @classmethod
    def of( cls, language: Optional[Union[Language,str]] = None ) -> Dictionary:
        language		= Language.of( language )
        dictionary		= cls._loaded.get( language )
        if dictionary is None:
            dictionary = cls._loaded[language] = cls( language )
            log.debug( f"Loaded {len( dictionary )}-word {language.value} dictionary" )
        return dictionary

    def __len__( self ):
        return len( self.words )

    def __contains__( self, word ):
        return word in self.indices

    def word( self, index: int ) -> str:
        return self.words[index]

    def index( self, word: str ) -> int:
        try:
            return self.indices[word]
        except KeyError:
            raise InvalidWordError( f"Invalid {self.language.value} word: {word!r}", word=word ) from None
