"""Built-in stop word tables.

Tables are lowercase. Stop word filtering matches raw tokens exactly, so with
the default whitespace tokenizer "The" is not removed by the "the" entry;
use case_variants=True to also get capitalized forms.
"""

from core.languages import (
    RUSSIAN, ENGLISH, SPANISH, SPANISH_LATAM, GERMAN, FRENCH, PORTUGUESE_BR,
    require_language,
)


# Common stopwords (very basic lists)
STOPWORDS = {
    RUSSIAN.code: {"и", "в", "на", "с", "по", "за", "к", "от", "из", "у", "о", "а", "но", "что", "как", "это", "он", "она", "они", "мы", "вы", "я", "ты", "не", "да", "же", "бы", "ли", "то", "так", "все", "для", "до", "при", "его", "её", "их", "мой", "твой", "наш", "ваш", "свой", "этот", "тот", "такой", "который", "когда", "где", "если", "чтобы", "потому", "только", "уже", "ещё", "очень", "можно", "нужно", "быть", "есть", "был", "была", "были", "будет"},
    ENGLISH.code: {"the", "a", "an", "is", "are", "was", "were", "be", "been", "being", "have", "has", "had", "do", "does", "did", "will", "would", "could", "should", "may", "might", "must", "shall", "can", "to", "of", "in", "for", "on", "with", "at", "by", "from", "as", "into", "through", "during", "before", "after", "above", "below", "between", "under", "again", "further", "then", "once", "here", "there", "when", "where", "why", "how", "all", "each", "few", "more", "most", "other", "some", "such", "no", "nor", "not", "only", "own", "same", "so", "than", "too", "very", "just", "and", "but", "if", "or", "because", "until", "while", "it", "its", "this", "that", "these", "those", "i", "me", "my", "myself", "we", "our", "ours", "ourselves", "you", "your", "yours", "yourself", "yourselves", "he", "him", "his", "himself", "she", "her", "hers", "herself", "they", "them", "their", "theirs", "themselves", "what", "which", "who", "whom", "am"},
    SPANISH.code: {"el", "la", "los", "las", "un", "una", "unos", "unas", "y", "o", "de", "del", "en", "con", "por", "para", "a", "al", "que", "es", "son", "está", "están", "fue", "fueron", "ser", "estar", "tener", "hacer", "como", "pero", "más", "ya", "muy", "también", "solo", "sin", "sobre", "entre", "hasta", "desde", "durante", "si", "no", "sí", "yo", "tú", "él", "ella", "nosotros", "vosotros", "ellos", "ellas", "mi", "tu", "su", "nuestro", "vuestro", "este", "esta", "estos", "estas", "ese", "esa", "esos", "esas", "aquel", "aquella", "aquellos", "aquellas", "qué", "quién", "cuál", "cuándo", "dónde", "cómo", "cuánto", "hay", "había", "ha", "han", "he", "hemos", "me", "te", "se", "le", "les", "lo", "nos", "os"},
    GERMAN.code: {"der", "die", "das", "den", "dem", "des", "ein", "eine", "einen", "einem", "einer", "und", "oder", "aber", "in", "im", "auf", "an", "am", "mit", "von", "vom", "zu", "zum", "zur", "für", "bei", "aus", "nach", "über", "unter", "ist", "sind", "war", "waren", "sein", "hat", "haben", "wird", "werden", "nicht", "auch", "noch", "nur", "schon", "sehr", "wie", "als", "so", "dass", "wenn", "ich", "du", "er", "sie", "es", "wir", "ihr", "mich", "dich", "sich", "uns", "euch", "mein", "dein", "kein", "keine", "was", "wer", "wo"},
    FRENCH.code: {"le", "la", "les", "un", "une", "des", "du", "de", "et", "ou", "mais", "en", "dans", "sur", "sous", "avec", "pour", "par", "sans", "au", "aux", "est", "sont", "était", "être", "avoir", "a", "ont", "ne", "pas", "plus", "que", "qui", "quoi", "ce", "cet", "cette", "ces", "il", "elle", "ils", "elles", "je", "tu", "nous", "vous", "on", "se", "me", "te", "lui", "leur", "mon", "ton", "son", "ma", "ta", "sa", "mes", "tes", "ses", "très", "aussi", "comme", "si", "y"},
    PORTUGUESE_BR.code: {"o", "a", "os", "as", "um", "uma", "uns", "umas", "e", "ou", "mas", "de", "do", "da", "dos", "das", "em", "no", "na", "nos", "nas", "com", "por", "para", "pelo", "pela", "que", "é", "são", "foi", "ser", "estar", "ter", "não", "sim", "se", "eu", "você", "ele", "ela", "nós", "eles", "elas", "meu", "seu", "sua", "este", "esta", "esse", "essa", "isso", "isto", "muito", "mais", "também", "como", "quando", "onde"},
}
# es-latam uses same stopwords as es
STOPWORDS[SPANISH_LATAM.code] = STOPWORDS[SPANISH.code]


def get_stop_words(language: str, case_variants: bool = False) -> set[str]:
    """
    Get the built-in stop words for a language.

    Args:
        language: Language code (en, en-GB, ru, es, es-latam, de, fr, pt-BR)
        case_variants: Also include Capitalized and UPPERCASE forms

    Returns:
        New set of stop words (safe to modify)

    Raises:
        UnsupportedLanguageError: If language is not supported
    """
    lang = require_language(language, "get_stop_words")
    # Use base code for regional variants (en-GB -> en)
    base_code = lang.code.split("-")[0]
    words = set(STOPWORDS.get(lang.code, STOPWORDS.get(base_code, set())))

    if case_variants:
        words |= {w.capitalize() for w in words} | {w.upper() for w in words}
    return words
