"""Form sources backed by plain mappings."""

from __future__ import annotations

from collections.abc import Mapping

from examportal.interfaces.form_source import FormSource

# pylint: disable=too-few-public-methods


class MappingFormSource(FormSource):
    """Form controls held in dicts keyed by control id and by control name.

    A key present in a mapping is a control that exists, even when its value
    is empty; an absent key is a missing control.

    Args:
        by_id: Control values keyed by id.
        by_name: Control values keyed by name. Defaults to ``by_id`` so a
            single mapping can answer both kinds of lookup.
    """

    def __init__(
        self,
        by_id: Mapping[str, str],
        by_name: Mapping[str, str] | None = None,
    ) -> None:
        self._by_id = dict(by_id)
        self._by_name = dict(by_id if by_name is None else by_name)

    def lookup(self, field_id: str | None, field_name: str | None) -> str | None:
        if field_id is not None and field_id in self._by_id:
            return self._by_id[field_id]
        if field_name is not None and field_name in self._by_name:
            return self._by_name[field_name]
        return None
