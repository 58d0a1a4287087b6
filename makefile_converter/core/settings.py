"""Pydantic model for a single conversion request.

WHY: The detector, parser, engine and emitter all need a few shared
settings (paths, dialects, encoding, detection limit). Passing one typed
value through the pipeline avoids ambient global state and makes every
stage callable in isolation from tests.

HOW: ConversionConfig is a pydantic BaseModel. The CLI builds one from
argparse results; defaults come from the config module so environment
overrides apply automatically.

RULES:
- source_dialect None means "run the detector"
- target_dialect None means "use the default target policy"
- output_file None and save False means "write to stdout"
- All fields use Field(description=...) for self-documentation
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from makefile_converter.config import (
    DEFAULT_VERBOSE,
    DETECT_LINE_LIMIT,
    GENERATOR_NAME,
    SOURCE_ENCODING,
)
from makefile_converter.core.model import Dialect


class ConversionConfig(BaseModel):
    """Settings for one makefile conversion."""

    input_file: Optional[str] = Field(
        default=None,
        description="Source makefile path. None triggers auto-discovery.",
    )
    output_file: Optional[str] = Field(
        default=None,
        description="Destination path. None writes to stdout unless save is set.",
    )
    source_dialect: Optional[Dialect] = Field(
        default=None,
        description="Source dialect. None runs the format detector.",
    )
    target_dialect: Optional[Dialect] = Field(
        default=None,
        description="Target dialect. None applies the default conversion policy.",
    )
    save: bool = Field(
        default=False,
        description="Write to the target's conventional file name when no output_file is given.",
    )
    verbose: bool = Field(
        default=DEFAULT_VERBOSE,
        description="Trace parsing and conversion decisions at DEBUG level.",
    )
    encoding: str = Field(
        default=SOURCE_ENCODING,
        description="Text encoding used to read the source and write the output.",
    )
    detect_line_limit: int = Field(
        default=DETECT_LINE_LIMIT,
        ge=1,
        description="Maximum number of significant lines the detector scans.",
    )
    generator_name: str = Field(
        default=GENERATOR_NAME,
        description="Generator name written into the output header.",
    )
