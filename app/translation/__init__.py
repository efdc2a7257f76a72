"""City name resolution: machine translation with transliteration fallback."""
