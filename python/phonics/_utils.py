"""Internal utilities for phonics."""

from typing import Union

from phonics.enums import PhoneticAlgorithm
from phonics.exceptions import AlgorithmError, ValidationError

# Valid algorithm names (lowercase)
VALID_ALGORITHMS = frozenset(a.value for a in PhoneticAlgorithm)

# Default maximum code length per algorithm
DEFAULT_MAX_CODE_LEN = {
    "soundex": 4,
    "refined_soundex": 10,
    "metaphone": 10,
}


def normalize_algorithm(algorithm: Union[str, PhoneticAlgorithm]) -> str:
    """Convert PhoneticAlgorithm enum to string, or validate string algorithm name.

    Args:
        algorithm: Either a PhoneticAlgorithm enum value or a string algorithm name.

    Returns:
        Lowercase string algorithm name.

    Raises:
        AlgorithmError: If the algorithm name is not recognized.
        TypeError: If algorithm is not a string or PhoneticAlgorithm enum.

    Example:
        >>> normalize_algorithm(PhoneticAlgorithm.METAPHONE)
        'metaphone'
        >>> normalize_algorithm("Soundex")
        'soundex'
    """
    if isinstance(algorithm, PhoneticAlgorithm):
        return algorithm.value

    if isinstance(algorithm, str):
        algo_lower = algorithm.lower()
        if algo_lower in VALID_ALGORITHMS:
            return algo_lower
        raise AlgorithmError(
            f"Unknown algorithm: '{algorithm}'. Valid options: {sorted(VALID_ALGORITHMS)}"
        )

    raise TypeError(
        f"algorithm must be str or PhoneticAlgorithm enum, got {type(algorithm).__name__}"
    )


def validate_max_code_len(max_code_len: int) -> int:
    """Check that a maximum code length is a non-negative integer."""
    if isinstance(max_code_len, bool) or not isinstance(max_code_len, int):
        raise ValidationError(
            f"max_code_len must be an int, got {type(max_code_len).__name__}"
        )
    if max_code_len < 0:
        raise ValidationError(f"max_code_len must be >= 0, got {max_code_len}")
    return max_code_len


def resolve_max_code_len(algorithm: str, max_code_len: Union[int, None]) -> int:
    """Return the algorithm default when ``max_code_len`` is None, else validate it."""
    if max_code_len is None:
        return DEFAULT_MAX_CODE_LEN[algorithm]
    return validate_max_code_len(max_code_len)


__all__ = [
    "normalize_algorithm",
    "validate_max_code_len",
    "resolve_max_code_len",
    "VALID_ALGORITHMS",
    "DEFAULT_MAX_CODE_LEN",
]
