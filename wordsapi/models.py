from typing import Annotated, ClassVar, Optional, Type, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    Strict,
    ValidationInfo,
    field_validator,
    model_validator,
)

from .relations import RelationKind


def _drop_empty(value):
    # the API omits absent relations; an empty list means the same thing
    if isinstance(value, list) and not value:
        return None
    return value


# scalars are not coerced: "4.83" is not a float, "3" is not an int
Text = Annotated[str, Strict()]
Number = Annotated[float, Strict()]
Count = Annotated[int, Strict()]

WordList = Annotated[Optional[list[Text]], BeforeValidator(_drop_empty)]


class Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Syllables(Record):
    count: Optional[Count] = None
    items: WordList = Field(validation_alias="list", default=None)


class Entry(Record):
    """One sense of a word."""

    definition: Text
    part_of_speech: Optional[Text] = Field(validation_alias="partOfSpeech", default=None)
    synonyms: WordList = None
    antonyms: WordList = None
    derivation: WordList = None
    examples: WordList = None
    type_of: WordList = Field(validation_alias="typeOf", default=None)
    has_types: WordList = Field(validation_alias="hasTypes", default=None)
    part_of: WordList = Field(validation_alias="partOf", default=None)
    has_parts: WordList = Field(validation_alias="hasParts", default=None)
    member_of: WordList = Field(validation_alias="memberOf", default=None)
    has_members: WordList = Field(validation_alias="hasMembers", default=None)
    substance_of: WordList = Field(validation_alias="substanceOf", default=None)
    has_substances: WordList = Field(validation_alias="hasSubstances", default=None)
    instance_of: WordList = Field(validation_alias="instanceOf", default=None)
    has_instances: WordList = Field(validation_alias="hasInstances", default=None)
    in_category: WordList = Field(validation_alias="inCategory", default=None)
    has_categories: WordList = Field(validation_alias="hasCategories", default=None)
    usage_of: WordList = Field(validation_alias="usageOf", default=None)
    has_usages: WordList = Field(validation_alias="hasUsages", default=None)
    in_region: WordList = Field(validation_alias="inRegion", default=None)
    region_of: WordList = Field(validation_alias="regionOf", default=None)
    similar_to: WordList = Field(validation_alias="similarTo", default=None)
    pertains_to: WordList = Field(validation_alias="pertainsTo", default=None)
    verb_group: WordList = Field(validation_alias="verbGroup", default=None)
    attribute: WordList = None
    entails: WordList = None
    also: WordList = None


class WordRecord(Record):
    """The full entry the API returns for ``/words/<word>``."""

    relation: ClassVar[RelationKind] = RelationKind.WORD

    word: Text
    frequency: Optional[Number] = None
    pronunciation: Optional[dict[str, Text]] = None
    syllables: Optional[Syllables] = None
    entries: list[Entry] = Field(validation_alias="results")

    @field_validator("pronunciation", mode="before")
    @classmethod
    def _pronunciation_mapping(cls, value):
        if isinstance(value, str):
            return {"all": value}
        return value


class Synonyms(Record):
    relation: ClassVar[RelationKind] = RelationKind.SYNONYMS

    word: Text
    synonyms: WordList = None


# {"word":"silence","antonyms":["sound"]}
class Antonyms(Record):
    relation: ClassVar[RelationKind] = RelationKind.ANTONYMS

    word: Text
    antonyms: WordList = None


class Examples(Record):
    relation: ClassVar[RelationKind] = RelationKind.EXAMPLES

    word: Text
    examples: WordList = None


class Definition(Record):
    definition: Text
    part_of_speech: Optional[Text] = Field(validation_alias="partOfSpeech", default=None)


class Definitions(Record):
    relation: ClassVar[RelationKind] = RelationKind.DEFINITIONS

    word: Text
    definitions: Annotated[Optional[list[Definition]], BeforeValidator(_drop_empty)] = None


class Rhymes(Record):
    relation: ClassVar[RelationKind] = RelationKind.RHYMES

    word: Text
    rhymes: Optional[dict[str, list[Text]]] = None

    def all_rhymes(self) -> list[str]:
        if not self.rhymes:
            return []
        if "all" in self.rhymes:
            return list(self.rhymes["all"])
        return [word for words in self.rhymes.values() for word in words]


class FrequencyScores(Record):
    zipf: Optional[Number] = None
    per_million: Optional[Number] = Field(validation_alias="perMillion", default=None)
    diversity: Optional[Number] = None


class Frequency(Record):
    relation: ClassVar[RelationKind] = RelationKind.FREQUENCY

    word: Text
    frequency: Optional[FrequencyScores] = None

    @field_validator("frequency", mode="before")
    @classmethod
    def _bare_score(cls, value):
        # older payloads carry just the zipf score
        if isinstance(value, (int, float)):
            return {"zipf": value}
        return value


class RelatedWords(Record):
    """Word plus the single list returned by one of the narrow endpoints.

    The list is looked up under the relation's own key when the decoder is
    told which relation was requested, otherwise the first list in the body
    is taken. ``relation_key`` records where it was found.
    """

    word: Text
    relation_key: Optional[Text] = None
    words: WordList = None

    @model_validator(mode="before")
    @classmethod
    def _pick_list(cls, data, info: ValidationInfo):
        if not isinstance(data, dict) or "words" in data:
            return data
        key = None
        relation = (info.context or {}).get("relation")
        if relation is not None and isinstance(data.get(relation.value), list):
            key = relation.value
        if key is None:
            key = next(
                (name for name, value in data.items() if isinstance(value, list)),
                None,
            )
        return {
            "word": data.get("word"),
            "relation_key": key,
            "words": data.get(key) if key else None,
        }


_MODELS: dict[RelationKind, Type[Record]] = {
    model.relation: model
    for model in (WordRecord, Synonyms, Antonyms, Examples, Definitions, Rhymes, Frequency)
}


def model_for(kind: RelationKind) -> Type[Record]:
    """Record class a response for ``kind`` decodes into by default."""
    return _MODELS.get(kind, RelatedWords)


AnyRecord = Union[
    WordRecord, Synonyms, Antonyms, Examples, Definitions, Rhymes, Frequency, RelatedWords
]
