import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from .exceptions import RecordStoreError

logger = logging.getLogger(__name__)


def exception_handler(exc, context):
    """
    DRF exception handler that renders store failures and anything the
    views did not translate with the same {"error", "details"} body.
    """
    response = drf_exception_handler(exc, context)
    if response is not None:
        return response

    if isinstance(exc, RecordStoreError):
        logger.error("Record store failure: %s", exc, exc_info=exc)
        return Response(
            {'error': 'Record store unavailable', 'details': str(exc)},
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    logger.error("Unhandled error in %s: %s", context.get("view"), exc, exc_info=exc)
    return Response(
        {'error': 'Internal server error', 'details': str(exc)},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
