"""
phonics - Phonetic encoding for sound-alike string matching

A Python library that turns English words into short phonetic codes, so
that names spelled differently but pronounced alike can be matched during
deduplication and record linkage.

Example usage:
    >>> import phonics

    # Single words
    >>> phonics.soundex("Robert"), phonics.soundex("Rupert")
    ('R163', 'R163')
    >>> phonics.refined_soundex("Braz")
    'B1905'
    >>> phonics.metaphone("Knight")
    'NFT'

    # Sound-alike test
    >>> phonics.metaphone_match("Stephen", "Steven")
    True

    # Lists, keeping missing values
    >>> phonics.batch.soundex(["Smith", None, "Smyth"])
    ['S530', None, 'S530']
"""

import logging
from importlib.metadata import version as _get_version

# Register the .phonics expression namespace
import phonics.expr  # noqa: F401

# Import submodules for `phonics.batch` / `from phonics import polars` style
from phonics import batch, polars
from phonics._config import get_check_interval, set_check_interval
from phonics.encoders import (
    encode,
    get_encoder,
    metaphone_match,
    refined_soundex_match,
    sounds_like,
    soundex_match,
)
from phonics.enums import PhoneticAlgorithm
from phonics.exceptions import (
    AlgorithmError,
    EncodingCancelled,
    PhonicsError,
    ValidationError,
)
from phonics.index import PhoneticIndex, PhoneticMatch
from phonics.metaphone import metaphone
from phonics.normalize import NormalizedWord, normalize_word
from phonics.soundex import refined_soundex, soundex

# -----------------------------------------------------------------------------
# Polars Integration - Column API (polars_api)
# -----------------------------------------------------------------------------
from phonics.polars_api import (
    batch_sounds_like,
    encode_series,
    phonetic_blocks,
)

# -----------------------------------------------------------------------------
# Polars Integration - DataFrame API (polars_ext)
# -----------------------------------------------------------------------------
from phonics.polars_ext import (
    dedupe_rows,
    dedupe_series,
    phonetic_join,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = _get_version("phonics")
__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "PhonicsError",
    "ValidationError",
    "AlgorithmError",
    "EncodingCancelled",
    # Enums
    "PhoneticAlgorithm",
    # Encoders
    "soundex",
    "refined_soundex",
    "metaphone",
    "encode",
    "get_encoder",
    # Sound-alike tests
    "sounds_like",
    "soundex_match",
    "refined_soundex_match",
    "metaphone_match",
    # Normalization
    "NormalizedWord",
    "normalize_word",
    # Configuration
    "get_check_interval",
    "set_check_interval",
    # Index
    "PhoneticIndex",
    "PhoneticMatch",
    # Polars Integration - Column API
    "encode_series",
    "batch_sounds_like",
    "phonetic_blocks",
    # Polars Integration - DataFrame API
    "dedupe_series",
    "dedupe_rows",
    "phonetic_join",
    # Submodules
    "batch",
    "polars",
]
