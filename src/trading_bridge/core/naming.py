"""Привязка имени (name module хоста) к адресу контракта."""

from trading_bridge.core.domain.instructions import BindName, NameRecord
from trading_bridge.core.errors import InvalidFormatError


def bind_name_instruction(name: str, bind_to_address: str, restricted: bool) -> BindName:
    """
    BindName для полностью квалифицированного имени.

    "test.name.bro" → record "test" (restricted как задано),
    parent "name.bro" (всегда unrestricted, адрес тот же — это позволяет
    bind к unrestricted parent).

    Raises:
        InvalidFormatError: Если первый сегмент имени пуст
    """
    name_parts = name.split(".")
    bind = name_parts[0]
    if not bind:
        raise InvalidFormatError(f"cannot bind to an empty name string [{name}]")

    record = NameRecord(name=bind, address=bind_to_address, restricted=restricted)
    parent = None
    if len(name_parts) > 1:
        parent = NameRecord(
            name=".".join(name_parts[1:]),
            address=bind_to_address,
            restricted=False,
        )
    return BindName(record=record, parent=parent)
