from django.test import SimpleTestCase

from strings_api.exceptions import ConflictingFilters, Unparsable
from strings_api.nl_parser import FilterParser, FilterSet


class FilterParserTests(SimpleTestCase):
    def setUp(self):
        self.parser = FilterParser()

    def parse(self, phrase):
        return self.parser.parse(phrase).to_dict()

    def test_palindrome_and_longer_than(self):
        self.assertEqual(
            self.parse("strings that are palindromic and longer than 5"),
            {"is_palindrome": True, "min_length": 6},
        )

    def test_single_word_palindromic(self):
        self.assertEqual(
            self.parse("all single word palindromic strings"),
            {"is_palindrome": True, "word_count": 1},
        )

    def test_word_count_cues(self):
        self.assertEqual(self.parse("one word strings"), {"word_count": 1})
        self.assertEqual(self.parse("1 word strings"), {"word_count": 1})
        self.assertEqual(self.parse("two words"), {"word_count": 2})
        self.assertEqual(self.parse("2 word strings"), {"word_count": 2})
        self.assertEqual(self.parse("three word phrases"), {"word_count": 3})
        self.assertEqual(self.parse("3 words"), {"word_count": 3})

    def test_word_count_last_rule_wins(self):
        self.assertEqual(self.parse("two word or three word strings"), {"word_count": 3})
        self.assertEqual(self.parse("three word or one word strings"), {"word_count": 3})

    def test_length_cues(self):
        self.assertEqual(self.parse("shorter than 10"), {"max_length": 9})
        self.assertEqual(self.parse("at least 4 characters"), {"min_length": 4})
        self.assertEqual(self.parse("at most 1 character"), {"max_length": 1})
        self.assertEqual(
            self.parse("exactly 7 characters long"),
            {"min_length": 7, "max_length": 7},
        )

    def test_length_rules_are_case_insensitive(self):
        self.assertEqual(self.parse("LONGER THAN 2"), {"min_length": 3})

    def test_contains_letter(self):
        self.assertEqual(
            self.parse("strings containing the letter z"),
            {"contains_character": "z"},
        )
        self.assertEqual(self.parse("words that contain letter q"), {})
        self.assertEqual(self.parse("contains the letter Q"), {"contains_character": "q"})
        self.assertEqual(self.parse("with character x"), {"contains_character": "x"})

    def test_contains_letter_only_matches_ascii_letters(self):
        # U+0130 and the Kelvin sign would otherwise match [a-z] case-insensitively
        self.assertEqual(self.parse("containing the letter \u0130"), {})
        self.assertEqual(self.parse("containing the letter \u212a"), {})
        self.assertEqual(self.parse("with character \u212a"), {})
        self.assertEqual(self.parse("containing the letter K"), {"contains_character": "k"})

    def test_vowel_ordinals(self):
        self.assertEqual(self.parse("contain the first vowel"), {"contains_character": "a"})
        self.assertEqual(self.parse("second vowel"), {"contains_character": "e"})
        self.assertEqual(self.parse("third vowel"), {"contains_character": "i"})
        self.assertEqual(self.parse("fourth vowel"), {"contains_character": "o"})
        self.assertEqual(self.parse("fifth vowel"), {"contains_character": "u"})

    def test_first_vowel_wins_over_other_ordinals(self):
        self.assertEqual(
            self.parse("second vowel or first vowel"), {"contains_character": "a"}
        )

    def test_vowel_overrides_letter(self):
        self.assertEqual(
            self.parse("containing the letter z and the first vowel"),
            {"contains_character": "a"},
        )

    def test_categories_combine(self):
        self.assertEqual(
            self.parse("palindromic two word strings longer than 3 containing the letter b"),
            {"is_palindrome": True, "word_count": 2, "min_length": 4, "contains_character": "b"},
        )

    def test_unmatched_phrase_is_empty(self):
        self.assertEqual(self.parse("banana"), {})
        with self.assertRaises(Unparsable):
            self.parser.parse_and_validate("banana")

    def test_conflicting_bounds(self):
        filters = self.parser.parse("shorter than 3 characters and at least 10 characters")
        self.assertEqual(filters.to_dict(), {"min_length": 10, "max_length": 2})
        with self.assertRaises(ConflictingFilters) as ctx:
            self.parser.validate(filters)
        self.assertEqual(ctx.exception.filters, filters)

    def test_equal_bounds_are_valid(self):
        filters = self.parser.parse_and_validate("longer than 4 and shorter than 6")
        self.assertEqual(filters, FilterSet(min_length=5, max_length=5))

    def test_validate_returns_filters(self):
        filters = FilterSet(is_palindrome=True)
        self.assertIs(self.parser.validate(filters), filters)


class FilterSetTests(SimpleTestCase):
    def test_to_dict_omits_unset_fields(self):
        self.assertEqual(FilterSet().to_dict(), {})
        self.assertEqual(
            FilterSet(is_palindrome=False, word_count=0).to_dict(),
            {"is_palindrome": False, "word_count": 0},
        )

    def test_is_empty(self):
        self.assertTrue(FilterSet().is_empty())
        self.assertFalse(FilterSet(min_length=0).is_empty())
