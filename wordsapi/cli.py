import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import load_settings
from .errors import RequestError, ResultParseError
from .relations import RelationKind
from .response import Response


def init_logging(level: int = logging.WARNING, format_str: Optional[str] = None) -> None:
    if format_str is None:
        format_str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


class SimpleTemplate:
    """Renders a decoded record (as a dict) into readable lines."""

    _labels = {
        "part_of_speech": "part of speech",
        "per_million": "per million",
        "relation_key": None,
    }

    def __init__(self, item: dict):
        self.item = item

    def _label(self, key: str) -> Optional[str]:
        if key in self._labels:
            return self._labels[key]
        return key.replace("_", " ")

    def _flatten_list(self, key: str, list_: list):
        if all(isinstance(item, str) for item in list_):
            yield f"{self._label(key)}: {', '.join(list_)}"
            return
        for item in list_:
            if isinstance(item, dict):
                yield from self._flatten_dict(item)
            elif isinstance(item, list):
                yield from self._flatten_list(key, item)
            else:
                yield str(item)

    def _flatten_dict(self, dict_: dict):
        for key, value in dict_.items():
            if value is None or value == "" or value == [] or value == {}:
                continue

            label = self._label(key)
            if label is None:
                continue

            if key == "word":
                yield f"{value}"
            elif key == "definition":
                yield f"\ndefinition: {value}"
            elif isinstance(value, list):
                yield from self._flatten_list(key, value)
            elif isinstance(value, dict):
                yield f"{label}:"
                yield from (f"  {line}" for line in self._flatten_dict(value))
            else:
                yield f"{label}: {value}"

    def render(self) -> str:
        assert isinstance(self.item, dict)
        return "\n".join(self._flatten_dict(self.item))


def render_response(response: Response, raw: bool = False) -> str:
    if raw:
        text = response.body
    else:
        text = SimpleTemplate(response.decode().model_dump(exclude_none=True)).render()
    return (
        f"{text}\n"
        f"(rate limit: {response.rate_limit_remaining} of "
        f"{response.rate_limit_requests_limit} requests remaining)"
    )


def _look_up(client, word: str, kind: RelationKind, raw: bool) -> bool:
    try:
        response = client.look_up(word, kind)
        print(render_response(response, raw=raw))
    except RequestError as e:
        print(f"{word}: {e}", file=sys.stderr)
        if e.response is not None and e.response.body:
            print(e.response.body, file=sys.stderr)
        return False
    except ResultParseError as e:
        print(f"{word}: {e}", file=sys.stderr)
        print(e.body, file=sys.stderr)
        return False
    except ValueError as e:
        print(f"{word!r}: {e}", file=sys.stderr)
        return False
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wordsapi", description="Look words up in the Words API.")
    parser.add_argument("words", nargs="*", help="Words to look up; prompts when omitted.")
    parser.add_argument(
        "-r",
        "--relation",
        default=RelationKind.WORD.value,
        help="Relation to request, e.g. synonyms, hasTypes or IS_A_TYPE_OF.",
    )
    parser.add_argument("--raw", action="store_true", help="Print the JSON body as received.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests to stderr.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    init_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        kind = RelationKind.from_name(args.relation)
        settings = load_settings()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    ok = True
    with settings.client() as client:
        if args.words:
            for word in args.words:
                ok = _look_up(client, word, kind, args.raw) and ok
            return 0 if ok else 1

        print("A Words API CLI")
        print("=" * 30)
        while True:
            try:
                word = input("query a word: ").strip()
            except EOFError:
                print("\nquit the program ~")
                break
            if not word:
                continue
            print("-" * 30)
            ok = _look_up(client, word, kind, args.raw) and ok
            print("-" * 30)
    return 0 if ok else 1
