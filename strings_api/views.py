import logging

from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from . import services
from .exceptions import (
    ConflictingFilters,
    DuplicateString,
    InvalidType,
    StringNotFound,
    Unparsable,
    ValueTooLong,
)
from .serializers import (
    AnalyzedStringSerializer,
    ErrorResponseSerializer,
    NaturalLanguageResponseSerializer,
    StringCreateSerializer,
    StringListQuerySerializer,
    StringListResponseSerializer,
)

logger = logging.getLogger(__name__)


class HealthView(APIView):
    @swagger_auto_schema(operation_summary="Health check", tags=['Health'])
    def get(self, request):
        return Response({'status': 'ok'}, status=status.HTTP_200_OK)


# POST & GET /strings

class StringAnalyzerView(APIView):

    @swagger_auto_schema(
        request_body=StringCreateSerializer,
        operation_summary="Analyze and store a new string",
        responses={
            201: AnalyzedStringSerializer,
            400: ErrorResponseSerializer,
            409: ErrorResponseSerializer,
            413: ErrorResponseSerializer,
            422: ErrorResponseSerializer,
        },
        tags=['Strings'],
    )
    def post(self, request):
        data = request.data
        if not hasattr(data, 'get') or 'value' not in data:
            return Response(
                {'error': 'Missing required field: value'},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            record = services.create_string(data.get('value'))
        except InvalidType as e:
            return Response(
                {'error': 'Invalid data type for "value" (must be string)', 'details': str(e)},
                status=status.HTTP_422_UNPROCESSABLE_ENTITY,
            )
        except ValueTooLong as e:
            logger.warning("Rejected value of %s characters (max %s)", e.length, e.max_length)
            return Response(
                {'error': 'Value too long', 'details': str(e)},
                status=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            )
        except DuplicateString:
            return Response(
                {'error': 'String already exists in the system'},
                status=status.HTTP_409_CONFLICT,
            )

        return Response(AnalyzedStringSerializer(record).data, status=status.HTTP_201_CREATED)

    @swagger_auto_schema(
        operation_summary="List all analyzed strings",
        query_serializer=StringListQuerySerializer,
        responses={
            200: StringListResponseSerializer,
            400: ErrorResponseSerializer,
        },
        tags=['Strings'],
    )
    def get(self, request):
        query = StringListQuerySerializer(data=request.query_params.dict())
        if not query.is_valid():
            return Response(
                {'error': 'Invalid query parameter values or types', 'details': query.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        filters = query.to_filter_set()
        try:
            records = services.list_strings(filters)
        except ConflictingFilters as e:
            return Response(
                {'error': 'Invalid query parameter values or types', 'details': str(e)},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return Response({
            'data': AnalyzedStringSerializer(records, many=True).data,
            'count': len(records),
            'filters_applied': filters.to_dict(),
        }, status=status.HTTP_200_OK)


# GET & DELETE /strings/{string_value}

class StringDetailView(APIView):

    @swagger_auto_schema(
        operation_summary="Get one analyzed string by its value",
        responses={200: AnalyzedStringSerializer, 404: ErrorResponseSerializer},
        tags=['Strings'],
    )
    def get(self, request, value):
        try:
            record = services.get_string(value)
        except StringNotFound:
            return Response(
                {'error': 'String does not exist in the system'},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(AnalyzedStringSerializer(record).data, status=status.HTTP_200_OK)

    @swagger_auto_schema(
        operation_summary="Delete an analyzed string by its value",
        responses={204: 'String deleted', 404: ErrorResponseSerializer},
        tags=['Strings'],
    )
    def delete(self, request, value):
        try:
            services.delete_string(value)
        except StringNotFound:
            return Response(
                {'error': 'String does not exist in the system'},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(status=status.HTTP_204_NO_CONTENT)


# GET /strings/filter-by-natural-language

class NaturalLanguageFilterView(APIView):

    @swagger_auto_schema(
        operation_summary="Filter analyzed strings using natural language queries",
        manual_parameters=[
            openapi.Parameter(
                "query",
                openapi.IN_QUERY,
                description="Natural language query, e.g. 'all single word palindromic strings'",
                type=openapi.TYPE_STRING,
                required=True,
            )
        ],
        responses={
            200: NaturalLanguageResponseSerializer,
            400: ErrorResponseSerializer,
            422: ErrorResponseSerializer,
        },
        tags=['Strings'],
    )
    def get(self, request):
        query = request.query_params.get('query', '').strip()
        if not query:
            return Response(
                {'error': 'Missing or invalid query parameter'},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            records, filters = services.filter_by_natural_language(query)
        except Unparsable as e:
            return Response(
                {'error': 'Unable to parse natural language query', 'details': str(e)},
                status=status.HTTP_400_BAD_REQUEST,
            )
        except ConflictingFilters as e:
            return Response({
                'error': 'Conflicting filters detected',
                'details': {
                    'message': str(e),
                    'interpreted_query': {
                        'original': query,
                        'parsed_filters': e.filters.to_dict(),
                    },
                },
            }, status=status.HTTP_422_UNPROCESSABLE_ENTITY)

        return Response({
            'data': AnalyzedStringSerializer(records, many=True).data,
            'count': len(records),
            'interpreted_query': {
                'original': query,
                'parsed_filters': filters.to_dict(),
            },
        }, status=status.HTTP_200_OK)
