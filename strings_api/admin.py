from django.contrib import admin

from .models import StringRecord


@admin.register(StringRecord)
class StringRecordAdmin(admin.ModelAdmin):
    """
    Admin configuration for StringRecord model
    """
    list_display = [
        'value',
        'length',
        'is_palindrome',
        'unique_characters',
        'word_count',
        'created_at',
    ]
    list_filter = ['is_palindrome', 'word_count', 'created_at']
    search_fields = ['value', 'id']
    ordering = ['-created_at']
    readonly_fields = [
        'id',
        'sha256_hash',
        'length',
        'is_palindrome',
        'unique_characters',
        'word_count',
        'character_frequency_map',
        'created_at',
    ]

    fieldsets = (
        ('String', {
            'fields': ('id', 'value')
        }),
        ('Properties', {
            'fields': ('length', 'is_palindrome', 'unique_characters', 'word_count', 'character_frequency_map')
        }),
        ('Metadata', {
            'fields': ('sha256_hash', 'created_at'),
            'classes': ('collapse',)
        }),
    )

    def has_change_permission(self, request, obj=None):
        # records are immutable; a new value means delete + create
        return False
