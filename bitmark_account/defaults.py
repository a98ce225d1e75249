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

#
# Bitmark Account defaults and wire-format constants
#
#     The Seed, Recovery Phrase and Account Number formats are fixed by the Bitmark network;
# changing any of the constants below produces different (incompatible) Accounts.
#

# The network against which all decoded Seeds, Phrases and Account Numbers are checked, unless the
# caller supplies network=...
NETWORK				= 'livenet'

# The default Recovery Phrase dictionary
LANGUAGE			= 'english'

#
# Seeds: header(3) [+ V1 network prefix(1)] + core + checksum(4), base58 encoded
#
SEED_HEADER			= b'\x5a\xfe'
SEED_HEADER_V1			= SEED_HEADER + b'\x01'
SEED_HEADER_V2			= SEED_HEADER + b'\x02'
SEED_HEADER_LENGTH		= 3
SEED_PREFIX_LENGTH		= 1
SEED_PREFIX_LIVENET		= 0x00
SEED_PREFIX_TESTNET		= 0x01
SEED_CORE_V1_LENGTH		= 32
SEED_CORE_V2_LENGTH		= 17
SEED_CHECKSUM_LENGTH		= 4

SEED_V1_LENGTH			= SEED_HEADER_LENGTH + SEED_PREFIX_LENGTH + SEED_CORE_V1_LENGTH + SEED_CHECKSUM_LENGTH  # 40
SEED_V2_LENGTH			= SEED_HEADER_LENGTH + SEED_CORE_V2_LENGTH + SEED_CHECKSUM_LENGTH                       # 24

# Bytes of fresh entropy drawn for a new (V2) Account; extended to SEED_CORE_V2_LENGTH
SEED_ENTROPY_LENGTH		= 16

#
# Recovery Phrases: 11 bits per word, from a 2048-word dictionary
#
WORD_BITS			= 11
WORD_COUNT			= 1 << WORD_BITS
PHRASE_V1_LENGTH		= 24		# network(1) + V1 core(32): 264 bits == 24 words
PHRASE_V2_LENGTH		= 12		# V2 core(17), less the reserved nibble: 132 bits == 12 words
PHRASE_V2_CHECKED_LENGTH	= 13		# V2 core(17) + 7 check bits: 143 bits == 13 words

#
# Key derivation
#
KEY_COUNT			= 2		# auth (signing) and encr (encryption)
KEY_SIZE			= 32
SEED_CORE_V2_ABSORB		= 4		# The V2 core is written this many times into the SHAKE-256 state

# V1 Accounts "seal" these counters w/ the 32-byte core to obtain the auth and encr key entropy
SEED_NONCE			= bytes( 24 )
AUTH_SEED_COUNT			= bytes( 14 ) + b'\x03\xe7'
ENCR_SEED_COUNT			= bytes( 14 ) + b'\x03\xe8'

#
# Account Numbers: keyVariant(1) + auth public key(32) + checksum(4), base58 encoded
#
ALGORITHM_ED25519		= 0x01
PUBKEY_MASK			= 0x01
TESTNET_MASK			= 0x01 << 1
ALGORITHM_SHIFT			= 4
CHECKSUM_LENGTH			= 4
ACCOUNT_NUMBER_LENGTH		= 1 + KEY_SIZE + CHECKSUM_LENGTH  # 37

# varint64: up to 8 groups of 7 bits, plus a final full 8-bit byte
VARINT64_MAXIMUM_BYTES		= 9
