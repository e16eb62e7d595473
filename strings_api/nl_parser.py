"""
Natural-language filter parsing.

A phrase such as "single word palindromic strings longer than 3" is
matched against a fixed, ordered table of rules. Every rule that matches
writes one or two fields of a :class:`FilterSet`; when several rules of the
same category match, the one listed last in ``RULES`` wins.
"""
import re
from dataclasses import dataclass, fields, replace
from typing import Callable, NamedTuple, Optional

from .exceptions import ConflictingFilters, Unparsable


@dataclass(frozen=True)
class FilterSet:
    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    def to_dict(self):
        """Only the fields that were set; absent filters are omitted, not null."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def is_empty(self):
        return not self.to_dict()

    def has_length_conflict(self):
        return (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        )


class Rule(NamedTuple):
    category: str
    pattern: "re.Pattern"
    effect: Callable[[re.Match], dict]


def _rule(category, regex, effect, flags=0):
    return Rule(category, re.compile(regex, re.IGNORECASE | flags), effect)


def _number(match, group=1):
    # The patterns only capture [0-9]+, so int() cannot fail silently here.
    return int(match.group(group), 10)


def _constant(**values):
    return lambda match: values


VOWELS = ['a', 'e', 'i', 'o', 'u']
ORDINALS = ['first', 'second', 'third', 'fourth', 'fifth']

RULES = (
    _rule('palindrome', r'palindrom(?:e|ic)', _constant(is_palindrome=True)),

    _rule('word_count', r'\b(?:single|one|1)[\s-]+word', _constant(word_count=1)),
    _rule('word_count', r'\b(?:two|2)[\s-]+word', _constant(word_count=2)),
    _rule('word_count', r'\b(?:three|3)[\s-]+word', _constant(word_count=3)),

    _rule('length', r'longer\s+than\s+([0-9]+)',
          lambda m: {'min_length': _number(m) + 1}),
    _rule('length', r'shorter\s+than\s+([0-9]+)',
          lambda m: {'max_length': _number(m) - 1}),
    _rule('length', r'at\s+least\s+([0-9]+)\s+character',
          lambda m: {'min_length': _number(m)}),
    _rule('length', r'at\s+most\s+([0-9]+)\s+character',
          lambda m: {'max_length': _number(m)}),
    _rule('length', r'exactly\s+([0-9]+)\s+character',
          lambda m: {'min_length': _number(m), 'max_length': _number(m)}),

    _rule('character', r'(?:containing|contains|with)\s+(?:the\s+)?letter\s+([a-z])\b',
          lambda m: {'contains_character': m.group(1).lower()}, re.ASCII),
    _rule('character', r'(?:containing|contains|with)\s+(?:the\s+)?character\s+([a-z])\b',
          lambda m: {'contains_character': m.group(1).lower()}, re.ASCII),
) + tuple(
    # fifth..first, so that "first vowel" has the last word
    _rule('character', r'\b%s\s+vowel' % ordinal, _constant(contains_character=vowel))
    for ordinal, vowel in reversed(list(zip(ORDINALS, VOWELS)))
)


class FilterParser:
    """Turns an English phrase into a :class:`FilterSet`."""

    def __init__(self, rules=RULES):
        self.rules = tuple(rules)

    def parse(self, phrase: str) -> FilterSet:
        filters = FilterSet()
        for rule in self.rules:
            match = rule.pattern.search(phrase)
            if match:
                filters = replace(filters, **rule.effect(match))
        return filters

    def validate(self, filters: FilterSet) -> FilterSet:
        if filters.is_empty():
            raise Unparsable(
                "Unable to parse natural language query into valid filters",
                filters=filters,
            )
        if filters.has_length_conflict():
            raise ConflictingFilters(
                "Conflicting length filters: min_length cannot be greater than max_length",
                filters=filters,
            )
        return filters

    def parse_and_validate(self, phrase: str) -> FilterSet:
        return self.validate(self.parse(phrase))
