"""FormForge validation: named rules evaluated against submitted values.

Fields carry their rule descriptors in ``validation``; nothing in the
field, fieldset or form layers evaluates them. Application code does:

    from formforge.validation import Validator, validate_fields

    validator = Validator()
    for field_id in validate_fields(form.get_fields().values(), validator):
        form.add_field_error(field_id, "Please check this value.")
"""

from formforge.validation.rules import BUILTIN_RULES
from formforge.validation.types import RuleMode, RuleSet
from formforge.validation.validator import Validator, validate_fields

__all__ = [
    "BUILTIN_RULES",
    "RuleMode",
    "RuleSet",
    "Validator",
    "validate_fields",
]
