from enum import Enum


class RelationKind(str, Enum):
    """The lexical relations the Words API can return for a word.

    Each member's value is the camelCase name the API uses for it, which is
    also the last path segment of its endpoint (the full ``WORD`` record has
    no segment).
    """

    WORD = "word"
    DEFINITIONS = "definitions"
    SYNONYMS = "synonyms"
    ANTONYMS = "antonyms"
    EXAMPLES = "examples"
    RHYMES = "rhymes"
    FREQUENCY = "frequency"
    IS_A_TYPE_OF = "isATypeOf"
    HAS_TYPES = "hasTypes"
    PART_OF = "partOf"
    HAS_PARTS = "hasParts"
    IS_AN_INSTANCE_OF = "isAnInstanceOf"
    HAS_INSTANCES = "hasInstances"
    IN_REGION = "inRegion"
    REGION_OF = "regionOf"
    USAGE_OF = "usageOf"
    HAS_USAGES = "hasUsages"
    IS_A_MEMBER_OF = "isAMemberOf"
    HAS_MEMBERS = "hasMembers"
    IS_A_SUBSTANCE_OF = "isASubstanceOf"
    HAS_SUBSTANCES = "hasSubstances"
    HAS_ATTRIBUTE = "hasAttribute"
    IN_CATEGORY = "inCategory"
    HAS_CATEGORIES = "hasCategories"
    ALSO = "also"
    PERTAINS_TO = "pertainsTo"
    SIMILAR_TO = "similarTo"
    ENTAILS = "entails"

    @property
    def suffix(self) -> str:
        return _SUFFIXES[self]

    @classmethod
    def from_name(cls, text: str) -> "RelationKind":
        """Resolve ``IS_A_TYPE_OF`` / ``is_a_type_of`` or ``isATypeOf``."""
        try:
            return cls[text.strip().upper()]
        except KeyError:
            pass
        try:
            return cls(text.strip())
        except ValueError:
            valid = ", ".join(kind.value for kind in cls)
            raise ValueError(f"unknown relation {text!r}, expected one of: {valid}") from None


_SUFFIXES = {
    RelationKind.WORD: "",
    RelationKind.DEFINITIONS: "/definitions",
    RelationKind.SYNONYMS: "/synonyms",
    RelationKind.ANTONYMS: "/antonyms",
    RelationKind.EXAMPLES: "/examples",
    RelationKind.RHYMES: "/rhymes",
    RelationKind.FREQUENCY: "/frequency",
    RelationKind.IS_A_TYPE_OF: "/isATypeOf",
    RelationKind.HAS_TYPES: "/hasTypes",
    RelationKind.PART_OF: "/partOf",
    RelationKind.HAS_PARTS: "/hasParts",
    RelationKind.IS_AN_INSTANCE_OF: "/isAnInstanceOf",
    RelationKind.HAS_INSTANCES: "/hasInstances",
    RelationKind.IN_REGION: "/inRegion",
    RelationKind.REGION_OF: "/regionOf",
    RelationKind.USAGE_OF: "/usageOf",
    RelationKind.HAS_USAGES: "/hasUsages",
    RelationKind.IS_A_MEMBER_OF: "/isAMemberOf",
    RelationKind.HAS_MEMBERS: "/hasMembers",
    RelationKind.IS_A_SUBSTANCE_OF: "/isASubstanceOf",
    RelationKind.HAS_SUBSTANCES: "/hasSubstances",
    RelationKind.HAS_ATTRIBUTE: "/hasAttribute",
    RelationKind.IN_CATEGORY: "/inCategory",
    RelationKind.HAS_CATEGORIES: "/hasCategories",
    RelationKind.ALSO: "/also",
    RelationKind.PERTAINS_TO: "/pertainsTo",
    RelationKind.SIMILAR_TO: "/similarTo",
    RelationKind.ENTAILS: "/entails",
}

_missing = set(RelationKind) - set(_SUFFIXES)
if _missing:
    raise RuntimeError(f"no URL suffix for {sorted(kind.name for kind in _missing)}")
del _missing


def suffix_for(kind: RelationKind) -> str:
    return _SUFFIXES[kind]
