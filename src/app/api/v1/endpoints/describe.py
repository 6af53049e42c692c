"""This module defines the FastAPI endpoints for parsing free-form soil descriptions."""

import time

from app.common.log import get_app_logger
from app.common.schemas import DescribeRequest, DescriptionResponse, OrderedTermsRequest, OrderedTermsResponse
from fastapi import Request
from soil_description.description import classify, extract_ordered_terms

logger = get_app_logger()


def log_request(http_request: Request, start_time: float, description: str) -> None:
    """Logs the method, path and duration of a request together with the parsed description."""
    duration = time.perf_counter() - start_time
    logger.info(f"{http_request.method}: {http_request.url.path} ({duration:.4f}s): {description}")


def describe(request: DescribeRequest, http_request: Request) -> DescriptionResponse:
    """Parse a soil description into a structured description.

    Args:
        request (DescribeRequest): The description and the extraction strategy.
        http_request (Request): The incoming HTTP request, used for logging.

    Returns:
        DescriptionResponse: The structured description.
    """
    start_time = time.perf_counter()
    description = classify(request.description, request.strategy)
    log_request(http_request, start_time, request.description)
    return DescriptionResponse.from_description(description)


def ordered_terms(request: OrderedTermsRequest, http_request: Request) -> OrderedTermsResponse:
    """Return the constituents of a soil description in precedence order.

    Args:
        request (OrderedTermsRequest): The description.
        http_request (Request): The incoming HTTP request, used for logging.

    Returns:
        OrderedTermsResponse: The constituent terms, the most important first.
    """
    start_time = time.perf_counter()
    ordered = extract_ordered_terms(request.description)
    log_request(http_request, start_time, request.description)
    return OrderedTermsResponse(ordered=ordered)
