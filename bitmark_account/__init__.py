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

from .version		import __version__  # noqa F401
from .api		import Account, account  # noqa F401
from .account_number	import (  # noqa F401
    encode_account_number, decode_account_number, account_number_network, extract_public_key,
    validate_account_number, verify,
)
from .seed		import encode_seed, decode_seed  # noqa F401
from .phrase		import produce_phrase, recover_phrase  # noqa F401
from .keys		import AuthKey, EncrKey, derive_keys  # noqa F401
from .encoding		import to_varint64, from_varint64  # noqa F401
from .dictionary	import Dictionary  # noqa F401
from .types		import Network, SeedVersion, PhraseFormat, Language  # noqa F401
from .errors		import (  # noqa F401
    AccountError, InvalidChecksumError, InvalidSeedError, InvalidSeedLengthError, InvalidSeedHeaderError,
    InvalidSeedChecksumError, InvalidRecoveryPhraseError, InvalidWordError, InvalidRecoveryPhraseChecksumError,
    InvalidAccountNumberEncodingError, WrongNetworkError, LanguageNotSupportedError, InvalidSignatureError,
    EntropySourceError,
)

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"
