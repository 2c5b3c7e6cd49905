"""Annotated integer types matching the on-chain field widths."""

from typing import Annotated

from pydantic import Field

from mmm.constants import I64_MAX, I64_MIN, U8_MAX, U16_MAX, U64_MAX

U8 = Annotated[int, Field(ge=0, le=U8_MAX)]
U16 = Annotated[int, Field(ge=0, le=U16_MAX)]
U64 = Annotated[int, Field(ge=0, le=U64_MAX)]
I64 = Annotated[int, Field(ge=I64_MIN, le=I64_MAX)]
