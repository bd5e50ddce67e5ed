"""Fixed-width integer targets for typed configuration reads."""

from typing import Annotated

from pydantic import Field

U8 = Annotated[int, Field(ge=0, le=2**8 - 1)]
U16 = Annotated[int, Field(ge=0, le=2**16 - 1)]
U32 = Annotated[int, Field(ge=0, le=2**32 - 1)]
U64 = Annotated[int, Field(ge=0, le=2**64 - 1)]

I8 = Annotated[int, Field(ge=-2**7, le=2**7 - 1)]
I16 = Annotated[int, Field(ge=-2**15, le=2**15 - 1)]
I32 = Annotated[int, Field(ge=-2**31, le=2**31 - 1)]
I64 = Annotated[int, Field(ge=-2**63, le=2**63 - 1)]
