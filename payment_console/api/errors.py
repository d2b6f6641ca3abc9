"""Translation of gateway failures into HTTP errors"""

import logging
from fastapi import HTTPException
from payment_console.domain.exceptions import GatewayAPIError


def gateway_http_error(e: GatewayAPIError, fallback: str, request_id: str) -> HTTPException:
    """
    Build the HTTPException for a failed gateway call.

    The gateway's own message is passed through verbatim when it sent one;
    otherwise `fallback` is used. Gateway 4xx statuses are kept, anything
    else becomes 502.
    """
    logging.error(f"Payment gateway error: {e}", extra={"request_id": request_id})

    status_code = 502
    if e.status_code is not None and 400 <= e.status_code < 500:
        status_code = e.status_code

    return HTTPException(status_code=status_code, detail=e.server_message or fallback)
