"""Process-lifetime cache of the last validation errors per form."""

from form_handler.validation.outcome import FieldErrors


class ErrorStore:
    """Keeps the most recent failed submission's errors for each form.

    A new failure for a form replaces the cached map wholesale. Successful
    submissions leave the cache untouched.
    """

    def __init__(self) -> None:
        self._errors_by_form: dict[int, dict[str, FieldErrors]] = {}

    def set_errors(self, form_id: int, errors: dict[str, FieldErrors]) -> None:
        """Replace the cached errors for a form."""
        self._errors_by_form[form_id] = {slug: dict(codes) for slug, codes in errors.items()}

    def get_errors(
        self,
        form_id: int,
        slug: str | None = None,
    ) -> dict[str, FieldErrors] | FieldErrors | None:
        """Get cached errors for a form, or for one field within it.

        Args:
            form_id: The form identifier.
            slug: Optional field slug to narrow the lookup.

        Returns:
            The slug -> errors map (or one field's errors when a slug is
            given), or None if nothing is cached.
        """
        errors = self._errors_by_form.get(form_id)
        if not errors:
            return None
        if slug is not None:
            return errors.get(slug) or None
        return errors

    def clear(self, form_id: int | None = None) -> None:
        """Drop cached errors for one form, or for all forms."""
        if form_id is None:
            self._errors_by_form.clear()
        else:
            self._errors_by_form.pop(form_id, None)
