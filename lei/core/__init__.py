"""lei.core: public API for the LEI value type, pipeline and errors."""

from lei.core.errors import (
    IncorrectCheckDigits as IncorrectCheckDigits,
)
from lei.core.errors import (
    InvalidCheckDigits as InvalidCheckDigits,
)
from lei.core.errors import (
    InvalidEntityId as InvalidEntityId,
)
from lei.core.errors import (
    InvalidEntityIdLength as InvalidEntityIdLength,
)
from lei.core.errors import (
    InvalidLength as InvalidLength,
)
from lei.core.errors import (
    InvalidLouId as InvalidLouId,
)
from lei.core.errors import (
    InvalidLouIdLength as InvalidLouIdLength,
)
from lei.core.errors import (
    InvalidPayloadLength as InvalidPayloadLength,
)
from lei.core.errors import (
    LEIError as LEIError,
)
from lei.core.identifiers import (
    LEI as LEI,
)
from lei.core.identifiers import (
    build_from_parts as build_from_parts,
)
from lei.core.identifiers import (
    build_from_payload as build_from_payload,
)
from lei.core.identifiers import (
    parse as parse,
)
from lei.core.identifiers import (
    parse_loose as parse_loose,
)
from lei.core.identifiers import (
    validate as validate,
)
from lei.core.result import (
    Err as Err,
)
from lei.core.result import (
    Ok as Ok,
)
from lei.core.result import (
    Result as Result,
)
from lei.core.result import (
    unwrap as unwrap,
)
