from typing import Dict, List, Optional

def language_shares(language_bytes: Dict[str, int]) -> Dict[str, float]:
    """
    Convert a GitHub language breakdown (language -> bytes of code) into
    shares of the total. Languages with no bytes are dropped.
    """
    counted = {lang: count for lang, count in language_bytes.items() if count and count > 0}
    total = sum(counted.values())

    if total > 0:
        return {lang: count / total for lang, count in counted.items()}
    else:
        return {}

def primary_language(language_bytes: Dict[str, int]) -> Optional[str]:
    """Language with the most bytes; ties go to the alphabetically first name."""
    shares = language_shares(language_bytes)
    if not shares:
        return None
    return min(shares, key=lambda lang: (-shares[lang], lang))

def technologies_from_languages(language_bytes: Dict[str, int]) -> List[str]:
    """List languages ordered by share, largest first."""
    shares = language_shares(language_bytes)
    return sorted(shares, key=lambda lang: (-shares[lang], lang))
