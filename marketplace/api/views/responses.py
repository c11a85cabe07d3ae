from rest_framework import status
from rest_framework.response import Response

from marketplace.services.base import ErrorCodes, ServiceResult

ERROR_STATUS_CODES = {
    ErrorCodes.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.PERMISSION_DENIED: status.HTTP_403_FORBIDDEN,
    ErrorCodes.NOT_STORE_OWNER: status.HTTP_403_FORBIDDEN,
    ErrorCodes.SELLER_ACCOUNT_REQUIRED: status.HTTP_403_FORBIDDEN,
    ErrorCodes.STORE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.PRODUCT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.STORE_INACTIVE: status.HTTP_409_CONFLICT,
    ErrorCodes.TRANSACTION_FAILED: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCodes.PERSISTENCE_CONTRACT_VIOLATION: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCodes.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def service_error_response(result: ServiceResult) -> Response:
    """Render a failed ServiceResult as the standard error body with its HTTP status."""
    body = {"error": result.error, "message": result.error_detail}
    if result.field_errors:
        body["field_errors"] = result.field_errors
    if result.retryable:
        body["retryable"] = True
    return Response(body, status=ERROR_STATUS_CODES.get(result.error, status.HTTP_500_INTERNAL_SERVER_ERROR))
