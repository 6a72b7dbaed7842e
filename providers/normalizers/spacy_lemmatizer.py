"""spaCy lemmatizing normalizer ("running" -> "run", "mice" -> "mouse").

Needs the `lemma` extra and a downloaded pipeline, e.g.:
    python -m spacy download en_core_web_sm
"""

from config import InvalidConfigurationError
from core.languages import ENGLISH, require_language
from core.normalizers import BaseNormalizer

# Loaded spaCy pipelines, keyed by model name
_SPACY_MODELS = {}


def get_spacy_model(model_name: str):
    """Get spaCy pipeline by name (lazy-loaded, cached)."""
    if model_name in _SPACY_MODELS:
        return _SPACY_MODELS[model_name]

    try:
        import spacy
    except ImportError:
        raise ImportError("spacy not installed. Run: pip install 'wordcloud-freq[lemma]'")

    try:
        nlp = spacy.load(model_name, disable=["ner", "parser"])  # Faster without NER/parser
    except OSError:
        raise InvalidConfigurationError(
            "normalizer",
            "SpacyLemmaNormalizer",
            f"spaCy model '{model_name}' not found. Run: python -m spacy download {model_name}",
        ) from None

    _SPACY_MODELS[model_name] = nlp
    return nlp


class SpacyLemmaNormalizer(BaseNormalizer):
    """Replaces a token with its lemma."""

    def __init__(self, language: str = ENGLISH.code):
        lang = require_language(language, "SpacyLemmaNormalizer")
        if lang.spacy_model is None:
            raise InvalidConfigurationError("language", language, "no spaCy model available")
        self.language = lang.code
        self._nlp = get_spacy_model(lang.spacy_model)

    def normalize(self, token: str) -> str:
        if not token:
            return token
        doc = self._nlp(token)
        if not doc:
            return token
        return "".join(t.lemma_ for t in doc)
