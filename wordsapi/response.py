import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Type, TypeVar

from pydantic import ValidationError

from .errors import ResultParseError
from .models import Record, model_for
from .relations import RelationKind

logger = logging.getLogger(__name__)

RATE_LIMIT_REMAINING = "x-ratelimit-requests-remaining"
RATE_LIMIT_REQUESTS_LIMIT = "x-ratelimit-requests-limit"

R = TypeVar("R", bound=Record)


def _header_count(headers: Mapping, name: str) -> int:
    value = headers.get(name)
    if value is None:
        # plain dicts are not case-insensitive
        value = next(
            (v for k, v in headers.items() if str(k).lower() == name), None
        )
    if value is None:
        return 0
    try:
        count = int(str(value).strip())
    except ValueError:
        logger.debug("ignoring unparsable %s header %r", name, value)
        return 0
    return count if count >= 0 else 0


def rate_limits_from_headers(headers: Mapping) -> Tuple[int, int]:
    """Return ``(remaining, limit)``; absent or garbled values count as 0."""
    return (
        _header_count(headers, RATE_LIMIT_REMAINING),
        _header_count(headers, RATE_LIMIT_REQUESTS_LIMIT),
    )


def try_parse(body: str, model: Type[R], kind: Optional[RelationKind] = None) -> R:
    """Decode a raw JSON body into ``model``.

    Raises :class:`ResultParseError` (keeping ``body``) when the text is not
    JSON or does not have the shape ``model`` expects.
    """
    context = {"relation": kind or getattr(model, "relation", None)}
    try:
        return model.model_validate_json(body, context=context)
    except ValidationError as e:
        logger.debug("could not decode %s: %s", model.__name__, e)
        raise ResultParseError(body, str(e)) from e


@dataclass(frozen=True)
class Response:
    """What came back for one lookup, before any typed decoding."""

    word: str
    kind: RelationKind
    body: str
    status_code: int = 200
    rate_limit_remaining: int = 0
    rate_limit_requests_limit: int = 0

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def decode(self, model: Optional[Type[R]] = None) -> R:
        if model is None:
            model = model_for(self.kind)
        return try_parse(self.body, model, self.kind)

    def json(self) -> Any:
        try:
            return json.loads(self.body)
        except (ValueError, RecursionError) as e:
            raise ResultParseError(self.body, str(e)) from e
