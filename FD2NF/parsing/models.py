"""Pydantic result model for the parser."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from FD2NF.ir.models.dependency import FDRecord
from .errors import ParseErrorDetail


class ParseResult(BaseModel):
    """Outcome of parsing one input text, successful or not."""

    success: bool = Field(description="Whether the whole input parsed")
    dependencies: List[FDRecord] = Field(default_factory=list, description="Parsed dependencies, in input order")
    error: Optional[ParseErrorDetail] = Field(None, description="Why parsing failed")
    original_text: str = Field(description="Text that was parsed")
