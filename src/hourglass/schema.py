# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects for time-source configuration and status output.

These Pydantic models describe the raw environment input and the JSON
document printed by ``python -m hourglass``.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated

from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    TypeAdapter,
)

TEST_SOURCE = "test"
SYSTEM_SOURCE = "system"

# date-time production of RFC 3339 section 5.6: seconds and offset required.
RFC3339_PATTERN = (
    r"^\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)
_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")

_RFC3339_ADAPTER: TypeAdapter[str] = TypeAdapter(
    Annotated[str, StringConstraints(pattern=RFC3339_PATTERN)]
)
_START_ADAPTER: TypeAdapter[AwareDatetime] = TypeAdapter(AwareDatetime)


class TimeSourceConfigSchema(BaseModel):
    """Raw time-source configuration, as read from the environment.

    Attributes:
        source: ``"test"`` selects a virtual clock.  Any other value
                selects the system clock.
        start:  RFC 3339 timestamp the virtual clock starts at.  Left
                unparsed here so that a malformed value can fall back
                instead of failing validation.
    """

    model_config = ConfigDict(populate_by_name=True)

    source: str = Field(default=SYSTEM_SOURCE, validation_alias="TIME_SOURCE")
    start: str | None = Field(default=None, validation_alias="TIME_START")

    @property
    def is_test(self) -> bool:
        return self.source == TEST_SOURCE

    def parse_start(self) -> datetime:
        """Parse ``start`` as a timezone-aware timestamp.

        Only the RFC 3339 ``date-time`` form is accepted.  Unix timestamps,
        date-only values and times without seconds are rejected even though
        pydantic's datetime parsing alone would take them.  Fractions longer
        than microseconds are truncated.

        Raises:
            pydantic.ValidationError: If the value is not an RFC 3339
                timestamp with a UTC offset.
        """
        value = _RFC3339_ADAPTER.validate_python(self.start)
        value = _EXCESS_FRACTION.sub(r"\1", value.upper())
        return _START_ADAPTER.validate_python(value)


class TimeStatusSchema(BaseModel):
    """Output of the status command.

    The command always prints valid JSON matching this schema, even on
    errors.

    Attributes:
        success:    Whether the time source was resolved
        mode:       ``"system"`` or ``"test"``
        is_test:    Whether time can be controlled
        now:        The provider's current instant
        error:      Error message (if success is False)
        error_type: Exception class name (if success is False)
    """

    success: bool
    mode: str = ""
    is_test: bool = False
    now: datetime | None = None
    error: str | None = None
    error_type: str | None = None
