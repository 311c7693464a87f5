"""Carry field values over when a card switches to another card type."""

from collections.abc import Mapping, Sequence


class ModelReconciler:
    """Stateless domain service remapping values onto a new field list.

    Values move by exact field name first. Whatever is left fills the
    remaining new positions in the old field order. This keeps the user's
    text; it does not check that a value suits the field it lands in.
    """

    @staticmethod
    def reconcile(
        new_field_names: Sequence[str],
        old_field_names: Sequence[str],
        old_values: Mapping[str, str],
    ) -> list[str]:
        """
        Build values aligned with ``new_field_names``.

        Args:
            new_field_names: Field names of the new card type, in order
            old_field_names: Field names of the current card, in order
            old_values: Current values by field name

        Returns:
            One value per new field; unfilled positions are empty strings
        """
        values: list[str | None] = [None] * len(new_field_names)
        consumed: set[str] = set()

        # Pass 1: exact name matches
        for index, name in enumerate(new_field_names):
            if name in old_values:
                values[index] = old_values[name]
                consumed.add(name)

        # Pass 2: positional fallback over the unconsumed old fields
        pointer = 0
        for index in range(len(new_field_names)):
            if values[index] is not None:
                continue
            while pointer < len(old_field_names) and old_field_names[pointer] in consumed:
                pointer += 1
            if pointer < len(old_field_names):
                old_name = old_field_names[pointer]
                values[index] = old_values.get(old_name, "")
                consumed.add(old_name)
                pointer += 1

        return [value or "" for value in values]
