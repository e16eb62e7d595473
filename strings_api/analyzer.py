import hashlib
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone

from .exceptions import InvalidType, ValueTooLong

DEFAULT_MAX_LENGTH = 10000


def content_hash(value: str) -> str:
    """Compute the SHA-256 hex digest of the UTF-8 encoded string."""
    return hashlib.sha256(value.encode('utf-8')).hexdigest()


def _simple_lower(value: str) -> str:
    # one codepoint per codepoint; no special casing (U+0130, final sigma)
    return ''.join(ch.lower()[0] for ch in value)


def _without_whitespace(value: str) -> str:
    return ''.join(ch for ch in value if not ch.isspace())


def is_palindrome(value: str) -> bool:
    """Check if string reads the same forward and backward, ignoring case and whitespace."""
    normalized = _without_whitespace(_simple_lower(value))
    return normalized == normalized[::-1]


def count_unique_characters(value: str) -> int:
    return len(set(_without_whitespace(value)))


def count_words(value: str) -> int:
    # str.split() with no separator trims and never yields empty tokens
    return len(value.split())


@dataclass(frozen=True)
class StringProperties:
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: dict

    def to_dict(self):
        return {
            'length': self.length,
            'is_palindrome': self.is_palindrome,
            'unique_characters': self.unique_characters,
            'word_count': self.word_count,
            'sha256_hash': self.sha256_hash,
            'character_frequency_map': dict(self.character_frequency_map),
        }


@dataclass(frozen=True)
class AnalyzedString:
    id: str
    value: str
    properties: StringProperties
    created_at: datetime = field(compare=False)

    def to_dict(self):
        return {
            'id': self.id,
            'value': self.value,
            'properties': self.properties.to_dict(),
            'created_at': self.created_at.isoformat(),
        }


class StringAnalyzer:
    """
    Derives the stored properties of a string.

    The analyzer holds only its length bound, so one instance can be shared
    freely between threads and requests.
    """

    def __init__(self, max_length: int = DEFAULT_MAX_LENGTH):
        if max_length < 0:
            raise ValueError("max_length must not be negative")
        self.max_length = max_length

    def check(self, value) -> str:
        if not isinstance(value, str):
            raise InvalidType(value)
        if len(value) > self.max_length:
            raise ValueTooLong(len(value), self.max_length)
        return value

    def analyze(self, value) -> AnalyzedString:
        """Compute all properties of ``value`` and stamp the analysis time."""
        value = self.check(value)
        sha256_hash = content_hash(value)

        properties = StringProperties(
            length=len(value),
            is_palindrome=is_palindrome(value),
            unique_characters=count_unique_characters(value),
            word_count=count_words(value),
            sha256_hash=sha256_hash,
            character_frequency_map=dict(Counter(value)),
        )
        return AnalyzedString(
            id=sha256_hash,
            value=value,
            properties=properties,
            created_at=datetime.now(timezone.utc),
        )
