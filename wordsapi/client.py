import logging
from typing import Optional, Type, TypeVar
from urllib.parse import quote

import requests

from .errors import RequestError
from .models import Antonyms, Definitions, Examples, Frequency, Record, Rhymes, Synonyms, WordRecord
from .relations import RelationKind
from .response import Response, rate_limits_from_headers

logger = logging.getLogger(__name__)

API_BASE = "https://wordsapiv1.p.mashape.com/words/"
MASHAPE_HOST = "wordsapiv1.p.mashape.com"

X_MASHAPE_KEY = "x-mashape-key"
X_MASHAPE_HOST = "x-mashape-host"

R = TypeVar("R", bound=Record)


class Client:
    """A Words API client.

    looking up a word at it returns a :class:`Response` holding the raw JSON
    body and the rate-limit counters, which can then be decoded into one of the
    records in :mod:`wordsapi.models`. Configuration is fixed at construction.
    """

    def __init__(
        self,
        token: str,
        api_base: str = API_BASE,
        mashape_host: str = MASHAPE_HOST,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        if timeout is not None and timeout <= 0:
            raise ValueError("timeout must be positive")
        self._api_token = token
        self._api_base = api_base if api_base.endswith("/") else api_base + "/"
        self._mashape_host = mashape_host
        self._timeout = timeout
        self._session = session or requests.Session()

    @property
    def api_token(self) -> str:
        return self._api_token

    @property
    def api_base(self) -> str:
        return self._api_base

    @property
    def mashape_host(self) -> str:
        return self._mashape_host

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    @property
    def _headers(self) -> dict:
        return {
            X_MASHAPE_KEY: self._api_token,
            X_MASHAPE_HOST: self._mashape_host,
        }

    def request_url(self, word: str, kind: RelationKind = RelationKind.WORD) -> str:
        if not word:
            raise ValueError("word must not be empty")
        return f"{self._api_base}{quote(word, safe='')}{kind.suffix}"

    def _fetch_page(self, url: str) -> requests.Response:
        return self._session.get(url, headers=self._headers, timeout=self._timeout)

    def look_up(self, word: str, kind: RelationKind = RelationKind.WORD) -> Response:
        url = self.request_url(word, kind)
        logger.debug("looking up %s", url)
        try:
            resp = self._fetch_page(url)
        except requests.RequestException as e:
            logger.error("api error for %r: %s", word, e)
            raise RequestError(f"WordsAPI request failed: {e}") from e

        remaining, allowed = rate_limits_from_headers(resp.headers)
        logger.debug(
            "the api responded %s (%s of %s requests left)",
            resp.status_code,
            remaining,
            allowed,
        )
        response = Response(
            word=word,
            kind=kind,
            body=resp.text,
            status_code=resp.status_code,
            rate_limit_remaining=remaining,
            rate_limit_requests_limit=allowed,
        )
        if not response.ok:
            logger.warning("api returned %s for %r", resp.status_code, word)
            raise RequestError(
                f"WordsAPI returned HTTP {resp.status_code}",
                status_code=resp.status_code,
                response=response,
            )
        return response

    def fetch(self, word: str, model: Type[R], kind: Optional[RelationKind] = None) -> R:
        """Look ``word`` up and decode it into ``model`` in one go.

        ``kind`` defaults to the relation the model is tied to; it must be
        given for :class:`~wordsapi.models.RelatedWords`.
        """
        if kind is None:
            kind = getattr(model, "relation", None)
            if kind is None:
                raise ValueError(f"{model.__name__} needs an explicit relation kind")
        return self.look_up(word, kind).decode(model)

    def word(self, word: str) -> WordRecord:
        return self.fetch(word, WordRecord)

    def definitions(self, word: str) -> Definitions:
        return self.fetch(word, Definitions)

    def synonyms(self, word: str) -> Synonyms:
        return self.fetch(word, Synonyms)

    def antonyms(self, word: str) -> Antonyms:
        return self.fetch(word, Antonyms)

    def examples(self, word: str) -> Examples:
        return self.fetch(word, Examples)

    def rhymes(self, word: str) -> Rhymes:
        return self.fetch(word, Rhymes)

    def frequency(self, word: str) -> Frequency:
        return self.fetch(word, Frequency)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
