"""
Middleware for request context and logging
"""

import json
import re
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import clear_request_context, get_logger, set_request_context

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Query-string keys carrying GraphQL payloads; never logged verbatim.
GRAPHQL_PAYLOAD_PARAMS = ("query", "variables", "extensions")

_OPERATION_RE = re.compile(r"\b(query|mutation)\s+(\w+)")


def _operation_name_from_payload(data: dict[str, Any]) -> str | None:
    op = data.get("operationName")
    if isinstance(op, str) and op:
        return op

    q = data.get("query", "")
    if not isinstance(q, str) or not q:
        return None
    if "__schema" in q or "IntrospectionQuery" in q:
        return "__introspection"

    match = _OPERATION_RE.search(q)
    if match:
        kind = "mutation:" if match.group(1) == "mutation" else ""
        return f"{kind}{match.group(2)}"
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request) -> str | None:
    """Best-effort operation name for a GraphQL request, for logging only."""
    if request.url.path != "/graphql":
        return None

    if request.method == "GET":
        return _operation_name_from_payload(dict(request.query_params))

    if request.method == "POST":
        try:
            body = await request.body()
            if not body:
                return None
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        if not isinstance(data, dict):
            return None
        return _operation_name_from_payload(data)

    return None


def redact_graphql_params(path: str, params: dict[str, Any]) -> dict[str, Any]:
    """Replace GraphQL payload query parameters with a placeholder."""
    if path != "/graphql":
        return params
    return {k: ("[REDACTED]" if k in GRAPHQL_PAYLOAD_PARAMS else v) for k, v in params.items()}


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set logging context for each request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and set logging context."""
        request_id = set_request_context(request.headers.get(REQUEST_ID_HEADER))

        try:
            query_params = None
            if request.query_params:
                query_params = redact_graphql_params(
                    request.url.path, dict(request.query_params)
                )

            graphql_operation = await extract_graphql_operation_name(request)

            log_data = {
                "method": request.method,
                "path": request.url.path,
                "query_params": query_params,
                "user_agent": request.headers.get("user-agent"),
                "remote_addr": request.client.host if request.client else None,
            }
            if graphql_operation:
                log_data["graphql_operation"] = graphql_operation

            logger.info("Request started", **log_data)

            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
                graphql_operation=graphql_operation,
            )

            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise

        finally:
            clear_request_context()
