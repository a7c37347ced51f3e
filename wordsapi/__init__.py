from .client import API_BASE, MASHAPE_HOST, Client
from .config import Settings, load_settings
from .errors import RequestError, ResultParseError, WordsApiError
from .models import (
    Antonyms,
    Definition,
    Definitions,
    Entry,
    Examples,
    Frequency,
    FrequencyScores,
    RelatedWords,
    Rhymes,
    Syllables,
    Synonyms,
    WordRecord,
    model_for,
)
from .relations import RelationKind, suffix_for
from .response import Response, rate_limits_from_headers, try_parse

__version__ = "0.3.0"
