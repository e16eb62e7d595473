import django_filters

from .models import StringRecord


class StringRecordFilter(django_filters.FilterSet):
    """
    Predicates the ORM backend evaluates in the database.
    contains_character is not handled here; callers apply it to the results.
    """
    is_palindrome = django_filters.BooleanFilter(field_name='is_palindrome')
    min_length = django_filters.NumberFilter(field_name='length', lookup_expr='gte')
    max_length = django_filters.NumberFilter(field_name='length', lookup_expr='lte')
    word_count = django_filters.NumberFilter(field_name='word_count')

    class Meta:
        model = StringRecord
        fields = ['is_palindrome', 'word_count']
