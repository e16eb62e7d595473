"""
Persistence for analyzed strings.

Two backends implement the same small interface: the Django ORM (default)
and a hosted Supabase table reached through its PostgREST HTTP API. Both
evaluate is_palindrome, length and word_count predicates themselves;
contains_character is left to :func:`apply_residual_filters`.
"""
import logging

import requests
from django.conf import settings
from django.db import IntegrityError, transaction
from django.utils.dateparse import parse_datetime

from .analyzer import AnalyzedString, StringProperties, content_hash
from .exceptions import DuplicateString, RecordStoreError
from .filters import StringRecordFilter
from .models import StringRecord
from .nl_parser import FilterSet

logger = logging.getLogger(__name__)

PUSHDOWN_FIELDS = ('is_palindrome', 'min_length', 'max_length', 'word_count')


def pushdown_params(filters: FilterSet) -> dict:
    params = filters.to_dict()
    return {key: params[key] for key in PUSHDOWN_FIELDS if key in params}


def apply_residual_filters(records, filters: FilterSet, ignore_case=False):
    """Apply the predicates no backend evaluates (contains_character)."""
    char = filters.contains_character
    if char is None:
        return list(records)
    if ignore_case:
        char = char.lower()
        return [r for r in records if char in r.value.lower()]
    return [r for r in records if char in r.value]


class RecordStore:
    def insert(self, record: AnalyzedString) -> AnalyzedString:
        raise NotImplementedError

    def get_by_value(self, value: str):
        raise NotImplementedError

    def list_where(self, filters: FilterSet):
        raise NotImplementedError

    def delete_by_value(self, value: str) -> bool:
        raise NotImplementedError


class DjangoRecordStore(RecordStore):

    def insert(self, record):
        try:
            with transaction.atomic():
                instance = StringRecord.from_analyzed(record)
                instance.save(force_insert=True)
        except IntegrityError as exc:
            raise DuplicateString("String already exists") from exc
        return instance.to_analyzed()

    def get_by_value(self, value):
        try:
            return StringRecord.objects.get(pk=content_hash(value)).to_analyzed()
        except StringRecord.DoesNotExist:
            return None

    def list_where(self, filters):
        filterset = StringRecordFilter(
            data=pushdown_params(filters), queryset=StringRecord.objects.all()
        )
        if not filterset.is_valid():
            raise RecordStoreError(f"Invalid store filters: {filterset.errors}")
        return [instance.to_analyzed() for instance in filterset.qs]

    def delete_by_value(self, value):
        deleted, _ = StringRecord.objects.filter(pk=content_hash(value)).delete()
        return deleted > 0


def record_to_row(record: AnalyzedString) -> dict:
    props = record.properties
    return {
        'id': record.id,
        'value': record.value,
        'length': props.length,
        'is_palindrome': props.is_palindrome,
        'unique_characters': props.unique_characters,
        'word_count': props.word_count,
        'sha256_hash': props.sha256_hash,
        'character_frequency_map': props.character_frequency_map,
        'created_at': record.created_at.isoformat(),
    }


def row_to_record(row: dict) -> AnalyzedString:
    created_at = row.get('created_at')
    if isinstance(created_at, str):
        created_at = parse_datetime(created_at)
    return AnalyzedString(
        id=row['id'],
        value=row['value'],
        properties=StringProperties(
            length=row['length'],
            is_palindrome=row['is_palindrome'],
            unique_characters=row['unique_characters'],
            word_count=row['word_count'],
            sha256_hash=row['sha256_hash'],
            character_frequency_map=row['character_frequency_map'],
        ),
        created_at=created_at,
    )


class SupabaseRecordStore(RecordStore):
    """
    Stores rows in a Supabase table through PostgREST.

    Lookups go through the id column (the content hash) so values never
    have to be escaped into PostgREST filter syntax.
    """

    def __init__(self, url, key, table='strings', timeout=10, session=None):
        if not url or not key:
            logger.warning(
                "Supabase settings missing. Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY"
            )
        self.endpoint = f"{(url or '').rstrip('/')}/rest/v1/{table}"
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'apikey': key or '',
            'Authorization': f"Bearer {key or ''}",
            'Content-Type': 'application/json',
            'Accept': 'application/json',
        })

    def _request(self, method, params=None, json=None, prefer=None):
        headers = {'Prefer': prefer} if prefer else None
        try:
            response = self.session.request(
                method,
                self.endpoint,
                params=params,
                json=json,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout:
            raise RecordStoreError("Request to Supabase timed out")
        except requests.exceptions.RequestException as e:
            raise RecordStoreError(f"Could not reach Supabase: {str(e)}")
        return response

    @staticmethod
    def _raise_for_status(response, action):
        if response.status_code >= 400:
            raise RecordStoreError(
                f"Supabase failed to {action} ({response.status_code}): {response.text}"
            )

    def insert(self, record):
        response = self._request(
            'POST', json=[record_to_row(record)], prefer='return=representation'
        )
        if response.status_code == 409:
            raise DuplicateString("String already exists")
        self._raise_for_status(response, 'store string')
        rows = response.json()
        return row_to_record(rows[0]) if rows else record

    def get_by_value(self, value):
        response = self._request(
            'GET', params={'select': '*', 'id': f"eq.{content_hash(value)}"}
        )
        self._raise_for_status(response, 'fetch string')
        rows = response.json()
        return row_to_record(rows[0]) if rows else None

    def list_where(self, filters):
        params = [('select', '*'), ('order', 'created_at.desc')]
        pushed = pushdown_params(filters)
        if 'is_palindrome' in pushed:
            params.append(('is_palindrome', f"eq.{str(pushed['is_palindrome']).lower()}"))
        if 'min_length' in pushed:
            params.append(('length', f"gte.{pushed['min_length']}"))
        if 'max_length' in pushed:
            params.append(('length', f"lte.{pushed['max_length']}"))
        if 'word_count' in pushed:
            params.append(('word_count', f"eq.{pushed['word_count']}"))

        response = self._request('GET', params=params)
        self._raise_for_status(response, 'fetch strings')
        return [row_to_record(row) for row in response.json()]

    def delete_by_value(self, value):
        response = self._request(
            'DELETE',
            params={'id': f"eq.{content_hash(value)}"},
            prefer='return=representation',
        )
        self._raise_for_status(response, 'delete string')
        return bool(response.json())


def get_record_store() -> RecordStore:
    backend = getattr(settings, 'STRING_STORE_BACKEND', 'django')
    if backend == 'django':
        return DjangoRecordStore()
    if backend == 'supabase':
        return SupabaseRecordStore(
            url=settings.SUPABASE_URL,
            key=settings.SUPABASE_SERVICE_ROLE_KEY,
            table=settings.SUPABASE_TABLE,
            timeout=settings.SUPABASE_TIMEOUT,
        )
    raise RecordStoreError(f"Unknown record store backend: {backend!r}")
