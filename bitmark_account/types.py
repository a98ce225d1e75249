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

from enum		import Enum
from typing		import Optional, Union

from .defaults		import NETWORK, LANGUAGE
from .errors		import LanguageNotSupportedError
from .util		import commas

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= ( "Network", "SeedVersion", "PhraseFormat", "Language" )


class Network( Enum ):
    Livenet		= 'livenet'
    Testnet		= 'testnet'

    @classmethod
    def of( cls, network: Optional[Union[Network,str]] = None ) -> Network:
        """Normalize the supplied network (a Network, or a case-insensitive name), defaulting to
        defaults.NETWORK.  Raises a ValueError for anything else.

        """
        if isinstance( network, cls ):
            return network
        name			= ( network or NETWORK ).strip().lower()
        try:
            return cls( name )
        except ValueError:
            raise ValueError( f"Network {network!r} not recognized; specify one of {commas( n.value for n in cls )}" )

    def __str__( self ):
        return self.value


class SeedVersion( Enum ):
    V1			= 'v1'		# 32-byte core, explicit network prefix (deprecated)
    V2			= 'v2'		# 17-byte core, network encoded in the core's own bits

    def __str__( self ):
        return self.value


class PhraseFormat( Enum ):
    """The Recovery Phrase encodings, identified by their word count."""
    W24			= 24		# V1: network + core
    W12			= 12		# V2: core, w/o check bits
    W13			= 13		# V2: core + 7 check bits

    @property
    def version( self ) -> SeedVersion:
        return SeedVersion.V1 if self is PhraseFormat.W24 else SeedVersion.V2


class Language( Enum ):
    """The supported Recovery Phrase dictionaries; the value is the python-mnemonic wordlist name."""
    English		= 'english'
    ChineseTraditional	= 'chinese_traditional'

    @classmethod
    def of( cls, language: Optional[Union[Language,str]] = None ) -> Language:
        """Normalize a Language, its wordlist name or a language tag (eg. 'en-US', 'zh-TW'),
        defaulting to defaults.LANGUAGE.

        """
        if isinstance( language, cls ):
            return language
        name			= ( language or LANGUAGE ).strip().lower().replace( '_', '-' )
        found			= LANGUAGE_ALIASES.get( name )
        if found is None:
            raise LanguageNotSupportedError(
                f"Language {language!r} not supported; specify one of {commas( LANGUAGE_ALIASES.keys(), final='or' )}" )
        return found


LANGUAGE_ALIASES		= {
    'english':			Language.English,
    'en':			Language.English,
    'en-us':			Language.English,
    'chinese-traditional':	Language.ChineseTraditional,
    'traditional-chinese':	Language.ChineseTraditional,
    'zh-tw':			Language.ChineseTraditional,
    'zh-hant':			Language.ChineseTraditional,
}
