"""
ETL configuration models.
"""

from pydantic import BaseModel, Field, field_validator


class EtlsConfig(BaseModel):
    """
    Contents of the ``etls`` configuration file.

    ``etl_classes`` maps each logical ETL name to the identifier of the
    class implementing it. Key order is the order ETLs are listed in.
    """

    etl_classes: dict[str, str] = Field(
        description="Mapping of logical ETL name to class identifier"
    )

    @field_validator("etl_classes")
    @classmethod
    def validate_names(cls, v: dict[str, str]) -> dict[str, str]:
        """Reject blank logical names."""
        for name in v:
            if not name.strip():
                raise ValueError("ETL name cannot be empty")
        return v
