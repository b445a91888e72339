"""Record layout analysis CLI command."""

from __future__ import annotations

import importlib.util
import inspect
import sys
from pathlib import Path

from ..codec.schema import FieldKind, StructLayout
from ..models.base import BaseAccount, BaseInstruction, BaseRecord


def analyze_file(file_path: Path) -> None:
    """Analyze all account and instruction classes in a Python file.

    Args:
        file_path: Path to Python file containing record definitions
    """
    spec = importlib.util.spec_from_file_location("user_module", file_path)
    if spec is None or spec.loader is None:
        raise ValueError(f"Could not load module from {file_path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules["user_module"] = module
    spec.loader.exec_module(module)

    record_classes = []
    for _name, obj in inspect.getmembers(module, inspect.isclass):
        if obj in (BaseRecord, BaseAccount, BaseInstruction):
            continue
        if issubclass(obj, BaseRecord) and obj.__module__ == "user_module":
            record_classes.append(obj)

    if not record_classes:
        print(f"No BaseAccount or BaseInstruction classes found in {file_path}")
        return

    print("|" * 7, "solcodec: Fixed-layout account and instruction codec", "|" * 7)
    print(f"{len(record_classes)} record{'s' if len(record_classes) != 1 else ''} loaded.")
    print("Offsets and widths are in bytes.")
    print()

    for record_class in record_classes:
        analyze_record_class(record_class)


def analyze_record_class(record_class: type[BaseRecord]) -> None:
    """Print the layout of a single record class.

    Args:
        record_class: Record class to analyze
    """
    layout = StructLayout.from_model(record_class)
    kind = "instruction" if issubclass(record_class, BaseInstruction) else "account"

    print(f"{'=' * 19} {record_class.record_name()} ({kind}) {'=' * 19}")
    print(f"Total size: {layout.size()} bytes")

    if issubclass(record_class, BaseInstruction):
        print(f"Discriminator: {record_class.solcodec_discriminator}")
    print()

    print(f"{'-' * 28} Fields {'-' * 28}")
    offsets = layout.offsets()
    for i, field_schema in enumerate(layout.fields, 1):
        shape = (
            f"u{field_schema.width * 8}"
            if field_schema.kind is FieldKind.UNSIGNED_INT
            else f"[u8; {field_schema.width}]"
        )
        field_desc = f"{i}. {field_schema.name}"
        dots = "." * max(1, 40 - len(field_desc))
        print(f"        {field_desc}{dots}@{offsets[field_schema.name]:<5} {shape}")
    print()

    if issubclass(record_class, BaseInstruction) and record_class.solcodec_accounts:
        print(f"{'-' * 27} Accounts {'-' * 27}")
        for i, role in enumerate(record_class.solcodec_accounts):
            flags = ", ".join(
                flag
                for flag, enabled in (("writable", role.is_writable), ("signer", role.is_signer))
                if enabled
            )
            default = f" = {role.default}" if role.default else ""
            print(f"        {i}. {role.name} [{flags or 'readonly'}]{default}")
        print()
