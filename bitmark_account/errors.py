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

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

"""
Bitmark Account exceptions.

Every failure to decode a Seed, Recovery Phrase or Account Number raises an AccountError; those
caused by malformed input are also ValueErrors.  A WrongNetworkError is raised for well-formed input
intended for the other network, and is never confused with a corruption (checksum, encoding) error:
the remedy (switch networks vs. re-enter the data) differs.
"""


class AccountError( Exception ):
    pass


class InvalidChecksumError( AccountError, ValueError ):
    pass


class InvalidSeedError( AccountError, ValueError ):
    pass


class InvalidSeedLengthError( InvalidSeedError ):
    pass


class InvalidSeedHeaderError( InvalidSeedError ):
    pass


class InvalidSeedChecksumError( InvalidSeedError, InvalidChecksumError ):
    pass


class InvalidRecoveryPhraseError( AccountError, ValueError ):
    pass


class InvalidWordError( InvalidRecoveryPhraseError ):
    def __init__( self, message, word=None, index=None ):
        super().__init__( message )
        self.word		= word
        self.index		= index


class InvalidRecoveryPhraseChecksumError( InvalidRecoveryPhraseError, InvalidChecksumError ):
    pass


class InvalidAccountNumberEncodingError( AccountError, ValueError ):
    pass


class WrongNetworkError( AccountError ):
    def __init__( self, message, network=None, expected=None ):
        super().__init__( message )
        self.network		= network
        self.expected		= expected


class LanguageNotSupportedError( AccountError, ValueError ):
    pass


class InvalidSignatureError( AccountError ):
    pass


class EntropySourceError( AccountError, RuntimeError ):
    pass
