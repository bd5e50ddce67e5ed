"""
Settings for a configuration store.

These control how a store resolves paths and converts values. They are
plain in-process values: the store never reads them from files or the
environment.
"""

from pydantic import BaseModel, Field


class RegistrySettings(BaseModel):
    """Path resolution and typed conversion settings."""

    delimiter: str = Field(
        default=".",
        min_length=1,
        description="Separator between key segments in a configuration path"
    )
    strict_conversion: bool = Field(
        default=True,
        description="Use pydantic strict mode for typed reads unless a call overrides it"
    )
    log_conversion_failures: bool = Field(
        default=True,
        description="Report failed typed conversions on the config error logger"
    )
