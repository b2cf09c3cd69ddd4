"""FormForge fieldsets: ordered groups of fields and nested fieldsets.

Usage:
    from formforge.fieldsets import Fieldset

    contact = Fieldset.parse({"id": "contact", "fields": [{"id": "email"}]})
    contact.add_error("email", "Please enter an email address.")
"""

from formforge.fieldsets.fieldset import CHILD_CLASS, Fieldset, is_fieldset_description

__all__ = [
    "CHILD_CLASS",
    "Fieldset",
    "is_fieldset_description",
]
