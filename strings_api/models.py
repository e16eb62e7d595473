from django.db import models
from django.utils import timezone

from .analyzer import AnalyzedString, StringProperties


class StringRecord(models.Model):
    """
    One analyzed string, keyed by the SHA-256 of its value
    """
    id = models.CharField(max_length=64, primary_key=True, editable=False)  # sha256 hex length = 64
    value = models.TextField(unique=True)
    length = models.PositiveIntegerField(db_index=True)
    is_palindrome = models.BooleanField(db_index=True)
    unique_characters = models.PositiveIntegerField()
    word_count = models.PositiveIntegerField(db_index=True)
    sha256_hash = models.CharField(max_length=64)
    character_frequency_map = models.JSONField()
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'strings'
        ordering = ['-created_at']
        verbose_name = 'String'
        verbose_name_plural = 'Strings'

    def __str__(self):
        return f"{self.value[:30]} - {self.id[:12]}"

    @classmethod
    def from_analyzed(cls, analyzed: AnalyzedString):
        props = analyzed.properties
        return cls(
            id=analyzed.id,
            value=analyzed.value,
            length=props.length,
            is_palindrome=props.is_palindrome,
            unique_characters=props.unique_characters,
            word_count=props.word_count,
            sha256_hash=props.sha256_hash,
            character_frequency_map=props.character_frequency_map,
            created_at=analyzed.created_at,
        )

    def to_analyzed(self) -> AnalyzedString:
        return AnalyzedString(
            id=self.id,
            value=self.value,
            properties=StringProperties(
                length=self.length,
                is_palindrome=self.is_palindrome,
                unique_characters=self.unique_characters,
                word_count=self.word_count,
                sha256_hash=self.sha256_hash,
                character_frequency_map=self.character_frequency_map,
            ),
            created_at=self.created_at,
        )
