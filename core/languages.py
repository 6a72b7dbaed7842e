"""Language constants and utilities.

Centralizes language codes used by the language-aware parts of the pipeline:
- stop-word tables
- NLTK and wordfreq tokenizers
- spaCy lemmatization

IMPORTANT: Unsupported languages raise UnsupportedLanguageError - never silently ignored!
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Language:
    """Language definition with all naming variants."""
    code: str                    # Internal code used in project
    name: str                    # Human-readable name
    nltk_name: str               # NLTK tokenizer/corpus language name
    wordfreq_code: str           # wordfreq library code
    spacy_model: Optional[str]   # Small spaCy pipeline, if one exists


# === Language Constants ===

ENGLISH = Language(
    code="en",
    name="English",
    nltk_name="english",
    wordfreq_code="en",
    spacy_model="en_core_web_sm",
)

ENGLISH_GB = Language(
    code="en-GB",
    name="British English",
    nltk_name="english",
    wordfreq_code="en",
    spacy_model="en_core_web_sm",
)

RUSSIAN = Language(
    code="ru",
    name="Russian",
    nltk_name="russian",
    wordfreq_code="ru",
    spacy_model="ru_core_news_sm",
)

# European Spanish (Spain)
SPANISH = Language(
    code="es",
    name="Spanish (Spain)",
    nltk_name="spanish",
    wordfreq_code="es",
    spacy_model="es_core_news_sm",
)

# Latin American Spanish - same tables and models as European Spanish
SPANISH_LATAM = Language(
    code="es-latam",
    name="Spanish (Latin America)",
    nltk_name="spanish",
    wordfreq_code="es",
    spacy_model="es_core_news_sm",
)

PORTUGUESE_BR = Language(
    code="pt-BR",
    name="Portuguese (Brazil)",
    nltk_name="portuguese",
    wordfreq_code="pt",
    spacy_model="pt_core_news_sm",
)

GERMAN = Language(
    code="de",
    name="German",
    nltk_name="german",
    wordfreq_code="de",
    spacy_model="de_core_news_sm",
)

FRENCH = Language(
    code="fr",
    name="French",
    nltk_name="french",
    wordfreq_code="fr",
    spacy_model="fr_core_news_sm",
)


# === Registry ===

# All supported languages
ALL_LANGUAGES = [
    ENGLISH,
    ENGLISH_GB,
    RUSSIAN,
    SPANISH,
    SPANISH_LATAM,
    PORTUGUESE_BR,
    GERMAN,
    FRENCH,
]

# Lookup by lowercase code
_LANGUAGE_MAP = {lang.code.lower(): lang for lang in ALL_LANGUAGES}

# Aliases for common variations (keys are lowercase)
_ALIASES = {
    "es-ar": SPANISH_LATAM,
    "es-419": SPANISH_LATAM,  # UN M.49 code for Latin America
    "es-us": SPANISH_LATAM,
    "es-es": SPANISH,
    "en-us": ENGLISH,
    "ru-ru": RUSSIAN,
    "pt": PORTUGUESE_BR,
}


def get_language(code: str) -> Optional[Language]:
    """Get Language by code or alias.

    Examples:
        get_language("en") -> ENGLISH
        get_language("es-latam") -> SPANISH_LATAM
        get_language("es-AR") -> SPANISH_LATAM (alias)
    """
    code_lower = code.lower()

    if code_lower in _LANGUAGE_MAP:
        return _LANGUAGE_MAP[code_lower]

    return _ALIASES.get(code_lower)


# === Validation (MUST be after ALL_LANGUAGES) ===

class UnsupportedLanguageError(ValueError):
    """Raised when an unsupported language code is used.

    Use this to fail fast - never silently ignore wrong language codes!
    """

    def __init__(self, code: str, context: str = ""):
        self.code = code
        self.context = context
        supported = ", ".join(lang.code for lang in ALL_LANGUAGES)
        message = f"Unsupported language code: '{code}'"
        if context:
            message += f" in {context}"
        message += f". Supported: {supported}"
        super().__init__(message)


def require_language(code: str, context: str = "") -> Language:
    """Get Language by code, raising error if not found.

    Args:
        code: Language code to look up
        context: Context for error message (e.g. "StopWordFilter", "NltkWordTokenizer")

    Returns:
        Language object

    Raises:
        UnsupportedLanguageError: If language code is not supported
    """
    lang = get_language(code)
    if lang is None:
        raise UnsupportedLanguageError(code, context)
    return lang


def is_supported(code: str) -> bool:
    """Check if language code is supported (without raising)."""
    return get_language(code) is not None
