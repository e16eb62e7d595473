from rest_framework import serializers

from .nl_parser import FilterSet


class PropertiesSerializer(serializers.Serializer):
    """
    Serializer for the computed properties of a string
    """
    length = serializers.IntegerField()
    is_palindrome = serializers.BooleanField()
    unique_characters = serializers.IntegerField()
    word_count = serializers.IntegerField()
    sha256_hash = serializers.CharField()
    character_frequency_map = serializers.DictField(child=serializers.IntegerField())


class AnalyzedStringSerializer(serializers.Serializer):
    """
    Read-only representation of an AnalyzedString
    """
    id = serializers.CharField()
    value = serializers.CharField(trim_whitespace=False)
    properties = PropertiesSerializer()
    created_at = serializers.DateTimeField()

    def to_representation(self, instance):
        # AnalyzedString renders itself; keep the field list above for the docs
        return instance.to_dict()


class StringCreateSerializer(serializers.Serializer):
    value = serializers.CharField(trim_whitespace=False, help_text="The string to analyze")


class StringListQuerySerializer(serializers.Serializer):
    """
    Query parameters accepted by GET /strings
    """
    is_palindrome = serializers.BooleanField(required=False)
    min_length = serializers.IntegerField(required=False, min_value=0)
    max_length = serializers.IntegerField(required=False, min_value=0)
    word_count = serializers.IntegerField(required=False, min_value=0)
    contains_character = serializers.CharField(
        required=False, min_length=1, max_length=1, trim_whitespace=False
    )

    def validate_is_palindrome(self, value):
        raw = self.initial_data.get('is_palindrome')
        if str(raw).lower() not in ('true', 'false'):
            raise serializers.ValidationError("Must be true or false")
        return value

    def validate(self, data):
        min_length = data.get('min_length')
        max_length = data.get('max_length')
        if min_length is not None and max_length is not None and min_length > max_length:
            raise serializers.ValidationError(
                "min_length cannot be greater than max_length"
            )
        return data

    def to_filter_set(self) -> FilterSet:
        return FilterSet(**self.validated_data)


class InterpretedQuerySerializer(serializers.Serializer):
    original = serializers.CharField()
    parsed_filters = serializers.DictField()


class StringListResponseSerializer(serializers.Serializer):
    data = AnalyzedStringSerializer(many=True)
    count = serializers.IntegerField()
    filters_applied = serializers.DictField()


class NaturalLanguageResponseSerializer(serializers.Serializer):
    data = AnalyzedStringSerializer(many=True)
    count = serializers.IntegerField()
    interpreted_query = InterpretedQuerySerializer()


class ErrorResponseSerializer(serializers.Serializer):
    """
    Serializer for error responses
    """
    error = serializers.CharField()
    details = serializers.JSONField(required=False)
