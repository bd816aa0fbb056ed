"""lei: validated Legal Entity Identifiers (ISO 17442-1:2020).

    >>> import lei
    >>> code = lei.parse("YZ83GD8L7GG84979J516").unwrap()
    >>> code.lou_id, code.entity_id, code.check_digits
    ('YZ83', 'GD8L7GG84979J5', '16')
"""

from lei.core import (
    LEI as LEI,
)
from lei.core import (
    Err as Err,
)
from lei.core import (
    IncorrectCheckDigits as IncorrectCheckDigits,
)
from lei.core import (
    InvalidCheckDigits as InvalidCheckDigits,
)
from lei.core import (
    InvalidEntityId as InvalidEntityId,
)
from lei.core import (
    InvalidEntityIdLength as InvalidEntityIdLength,
)
from lei.core import (
    InvalidLength as InvalidLength,
)
from lei.core import (
    InvalidLouId as InvalidLouId,
)
from lei.core import (
    InvalidLouIdLength as InvalidLouIdLength,
)
from lei.core import (
    InvalidPayloadLength as InvalidPayloadLength,
)
from lei.core import (
    LEIError as LEIError,
)
from lei.core import (
    Ok as Ok,
)
from lei.core import (
    Result as Result,
)
from lei.core import (
    build_from_parts as build_from_parts,
)
from lei.core import (
    build_from_payload as build_from_payload,
)
from lei.core import (
    parse as parse,
)
from lei.core import (
    parse_loose as parse_loose,
)
from lei.core import (
    validate as validate,
)
