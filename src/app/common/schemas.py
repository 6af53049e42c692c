"""Schemas of the requests and responses of the soil description endpoints."""

########################################################################################################################
### Describe schema
########################################################################################################################

from app.common.config import config
from pydantic import BaseModel, ConfigDict, Field, field_validator
from soil_description.description import Description, ExtractionStrategy


def validate_description(value: str) -> str:
    """Ensure the description fits in the storage of the original text.

    Args:
        value (str): The description to validate.

    Returns:
        str: The validated description.

    Raises:
        ValueError: If the description is too long.
    """
    if len(value) > config.max_description_length:
        raise ValueError(f"Description must not be longer than {config.max_description_length} characters.")
    return value


class DescribeRequest(BaseModel):
    """Request schema for the describe endpoint."""

    description: str = Field(
        ...,
        description="""Free-form soil description, as written in a field log. Any text is accepted, a description 
        without known terms results in empty fields.""",
    )
    strategy: ExtractionStrategy = Field(
        ExtractionStrategy.UNIFIED,
        description="""How to fill the fields: `unified` orders constituents by precedence (uppercase, unqualified, 
        then qualified terms), `field` keeps the first match of each field in description order.""",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"description": "compact silty sand, some clay, wet", "strategy": "unified"},
        },
    )

    @field_validator("description")
    @classmethod
    def validate_description(cls, value: str) -> str:
        """Ensure the description is not too long."""
        return validate_description(value)


class DescriptionResponse(BaseModel):
    """Response schema for the describe endpoint.

    Empty strings mean that the description does not mention the property.
    """

    original: str = Field(..., description="The description, exactly as it was sent.")
    primary: str = Field(..., description="The dominant soil or rock constituent, e.g. `sand`.")
    secondary: str = Field(..., description="A subordinate constituent, e.g. `silt` for `silty sand`.")
    consistency: str = Field(..., description="Firmness or looseness of the material, e.g. `compact`.")
    moisture: str = Field(..., description="Water content of the material, e.g. `wet`.")
    ordered: list[str] = Field(..., description="All constituents found, the most important first.")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "original": "compact silty sand, some clay, wet",
                "primary": "sand",
                "secondary": "silt",
                "consistency": "compact",
                "moisture": "wet",
                "ordered": ["sand", "silt", "clay"],
            },
        }
    )

    @classmethod
    def from_description(cls, description: Description) -> "DescriptionResponse":
        """Builds the response from a parsed Description."""
        return cls(**description.to_json())


########################################################################################################################
### Ordered terms schema
########################################################################################################################


class OrderedTermsRequest(BaseModel):
    """Request schema for the ordered_terms endpoint."""

    description: str = Field(..., description="Free-form soil description.")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"description": "SAND and GRAVEL, silty"},
        },
    )

    @field_validator("description")
    @classmethod
    def validate_description(cls, value: str) -> str:
        """Ensure the description is not too long."""
        return validate_description(value)


class OrderedTermsResponse(BaseModel):
    """Response schema for the ordered_terms endpoint."""

    ordered: list[str] = Field(..., description="Canonical constituent terms, the most important first.")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"ordered": ["sand", "gravel", "silt"]},
        }
    )
