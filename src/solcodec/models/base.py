"""Base record classes and solcodec-specific Pydantic configuration.

Account state inherits from BaseAccount and instruction data from
BaseInstruction. Both share the BaseRecord configuration.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator, model_validator

from .fields import (
    KIND_FIXED_BYTES,
    KIND_KEY,
    KIND_UNSIGNED_INT,
    U8,
    WIDTH_KEY,
    check_fixed_bytes,
    check_uint,
)
from .roles import AccountRole


class BaseRecord(BaseModel):
    """Base class for all fixed-layout records.

    Records define fields using the helpers in ``solcodec.models.fields``.
    Declaration order is wire order.

    Attributes:
        solcodec_name: Display name (defaults to the class name)
    """

    model_config = ConfigDict(
        strict=False,
        validate_assignment=True,
        extra="forbid",
    )

    solcodec_name: ClassVar[str | None] = None

    @classmethod
    def record_name(cls) -> str:
        """Return the display name of this record type."""
        return cls.solcodec_name or cls.__name__

    @field_validator("*", mode="after")
    @classmethod
    def _check_width(cls, value: Any, info: ValidationInfo) -> Any:
        """Reject values that do not fit the field width."""
        name = info.field_name or ""
        field_info = cls.model_fields.get(name)
        extra = field_info.json_schema_extra if field_info is not None else None
        if not isinstance(extra, dict):
            return value

        kind = extra.get(KIND_KEY)
        if kind == KIND_FIXED_BYTES and isinstance(value, bytes):
            check_fixed_bytes(name, value, extra[WIDTH_KEY])
        elif kind == KIND_UNSIGNED_INT and isinstance(value, int):
            check_uint(name, value, extra[WIDTH_KEY])
        return value


class BaseAccount(BaseRecord):
    """Base class for on-chain account state.

    Example:
        >>> class Counter(BaseAccount):
        ...     count: bytes = FixedBytes(length=8)
    """


class BaseInstruction(BaseRecord):
    """Base class for instruction data.

    Every instruction starts with a ``discriminator`` field. Its value is taken
    from ``solcodec_discriminator`` unless passed explicitly, so callers only
    supply the data fields. A subclass may redeclare ``discriminator`` with a
    wider ``UInt`` for programs with more than 256 instructions.

    Example:
        >>> class Increase(BaseInstruction):
        ...     solcodec_discriminator: ClassVar[int | None] = 1
        ...     solcodec_accounts: ClassVar[tuple[AccountRole, ...]] = (
        ...         AccountRole("authority", is_signer=True, is_writable=True),
        ...         AccountRole("counter", is_writable=True),
        ...     )

    Attributes:
        solcodec_discriminator: Value identifying this instruction
        solcodec_accounts: Ordered account roles
    """

    discriminator: int = U8()

    solcodec_discriminator: ClassVar[int | None] = None
    solcodec_accounts: ClassVar[tuple[AccountRole, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def _default_discriminator(cls, data: Any) -> Any:
        if (
            isinstance(data, dict)
            and "discriminator" not in data
            and cls.solcodec_discriminator is not None
        ):
            data = {**data, "discriminator": cls.solcodec_discriminator}
        return data
