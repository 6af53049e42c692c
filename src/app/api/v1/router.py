"""Main router for the app."""

from app.api.v1.endpoints.describe import describe, ordered_terms
from app.common.schemas import DescribeRequest, DescriptionResponse, OrderedTermsRequest, OrderedTermsResponse
from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter(prefix="/api/V1")


class BadRequestResponse(BaseModel):
    """Response schema for the soil description endpoints."""

    detail: str


####################################################################################################
### Describe
####################################################################################################
@router.post(
    "/describe",
    tags=["describe"],
    responses={
        400: {"model": BadRequestResponse, "description": "Bad request"},
        500: {"model": BadRequestResponse, "description": "Internal server error"},
    },
)
def post_describe(request: DescribeRequest, http_request: Request) -> DescriptionResponse:
    """Parse a free-form soil description into a structured description.

    The description is scanned for known soil and rock terms, consistency terms (loose, soft, firm, compact,
    hard, dense) and moisture terms (very dry, very wet, dry, damp, moist, wet; "water bearing" counts as wet).

    ### Request Body
    - **request** (`DescribeRequest`): Contains the `description` to parse and optionally the `strategy` used to
    fill the fields (`unified` by default).

    ### Returns
    - **DescriptionResponse**: The original description, the primary and secondary constituents, the
    consistency, the moisture and all constituents ordered by importance. Fields that are not mentioned in the
    description are empty strings.

    ### Status Codes
    - **200 OK**: The description was parsed. A description without any known term is not an error.
    - **400 Bad Request**: The request is invalid, e.g. the `description` is missing or too long.
    - **500 Internal Server Error**: An error occurred on the server while parsing the description.
    """
    return describe(request, http_request)


####################################################################################################
### Ordered terms
####################################################################################################
@router.post(
    "/ordered_terms",
    tags=["ordered_terms"],
    responses={
        400: {"model": BadRequestResponse, "description": "Bad request"},
        500: {"model": BadRequestResponse, "description": "Internal server error"},
    },
)
def post_ordered_terms(request: OrderedTermsRequest, http_request: Request) -> OrderedTermsResponse:
    """Return the soil and rock constituents of a description, the most important first.

    Uppercase constituents come first, unless the whole description is written in uppercase. Then come the
    unqualified constituents, and finally the qualified ones ("some clay", "trace gravel", "silty").

    ### Request Body
    - **request** (`OrderedTermsRequest`): Contains the `description` to parse.

    ### Returns
    - **OrderedTermsResponse**: The canonical constituent terms (e.g. `silt` for "silty"), without duplicates.

    ### Status Codes
    - **200 OK**: The constituents were extracted. The list is empty if none were found.
    - **400 Bad Request**: The request is invalid, e.g. the `description` is missing or too long.
    - **500 Internal Server Error**: An error occurred on the server while parsing the description.
    """
    return ordered_terms(request, http_request)
