import os

from setuptools import setup

# 
# All platforms
# 
HERE				= os.path.dirname( os.path.abspath( __file__ ))


def requirements( name ):
    """Read a requirements file; remove whitespace, elide blank lines and comments."""
    return list(
        ''.join( r.split() )
        for r in open( os.path.join( HERE, name )).readlines()
        if r.strip() and not r.strip().startswith( '#' )
    )


install_requires		= requirements( "requirements.txt" )
tests_require			= requirements( "requirements-tests.txt" )

# Since setuptools is retiring tests_require, add it as an option
extras_require			= {
    'tests':			tests_require,
}

# Must work if setup.py is run in the source distribution context, or from
# within the packaged distribution directory.
__version__			= None
try:
    exec( open( 'bitmark_account/version.py', 'r' ).read() )
except FileNotFoundError:
    exec( open( 'version.py', 'r' ).read() )

package_dir			= {
    "bitmark_account":		"./bitmark_account",
}

long_description_content_type	= 'text/markdown'
long_description		= """\
A Bitmark Account is identified by its Account Number, and controlled by a secret Seed.

The Seed may also be written down and recovered as a Recovery Phrase of 12 or 13 words (or 24
words, for deprecated V1 Accounts), in English or Traditional Chinese.  From the Seed, an Ed25519
signing (auth) key and a Curve25519 encryption (encr) key are derived; the auth public key is
encoded (w/ its network) as the base58 Account Number.

# Creating and Recovering Accounts

    >>> from bitmark_account import Account
    >>> acct = Account.new( network='testnet' )
    >>> words = acct.recovery_phrase()                  # 13 words
    >>> Account.from_recovery_phrase( words, network='testnet' ) == acct
    True
    >>> Account.from_seed( acct.seed, network='testnet' ).account_number == acct.account_number
    True

A Seed, Recovery Phrase or Account Number for one network is never accepted for another; a
WrongNetworkError is raised.

# Verifying Signatures

Anyone holding an Account Number may verify a signature made by its Account:

    >>> from bitmark_account import verify
    >>> verify( acct.account_number, b'message', acct.sign( b'message' ), network='testnet' )

An InvalidSignatureError is raised if the signature was not made by that Account.
"""

classifiers			= [
    "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
    "License :: Other/Proprietary License",
    "Programming Language :: Python :: 3",
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Topic :: Security :: Cryptography",
    "Topic :: Office/Business :: Financial",
]
setup(
    name			= "bitmark-account",
    version			= __version__,
    install_requires		= install_requires,
    tests_require		= tests_require,
    extras_require		= extras_require,
    packages			= package_dir.keys(),
    package_dir			= package_dir,
    include_package_data	= True,
    zip_safe			= True,
    author			= "Perry Kundert",
    author_email		= "perry@dominionrnd.com",
    description			= "Bitmark Account Seed, Recovery Phrase and Account Number generation and recovery",
    long_description		= long_description,
    long_description_content_type = long_description_content_type,
    license			= "Dual License; GPLv3 and Proprietary",
    keywords			= "Bitmark account seed recovery phrase BIP-39 Ed25519 Curve25519 base58",
    classifiers			= classifiers,
    python_requires		= ">=3.9",
)
