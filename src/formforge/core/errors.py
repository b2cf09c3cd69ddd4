"""Error taxonomy for FormForge.

Every error carries a machine-readable ``code``. Errors are grouped by the
level of the object graph that raises them so a caller only needs to catch
one kind per call level:

- FieldError: field type resolution, property coercion, value decoding
- FieldsetError: composing fields and child fieldsets
- FormError: composing fieldsets and buttons
- BuilderError: builder-style construction calls
- ValidatorError: rule evaluation

Parse failures at a lower level are re-raised as the parent level's error
with ``raise ... from exc``; the lower-level error stays on ``__cause__``.
"""


class FormForgeError(Exception):
    """Base class for all FormForge errors."""

    code = "FORMFORGE_ERROR"


# =============================================================================
# Level bases
# =============================================================================


class FieldError(FormForgeError):
    """Error raised while resolving, parsing or rendering a field."""

    code = "FIELD_ERROR"


class FieldsetError(FormForgeError):
    """Error raised while composing or rendering a fieldset."""

    code = "FIELDSET_ERROR"


class FormError(FormForgeError):
    """Error raised while composing or rendering a form."""

    code = "FORM_ERROR"


class BuilderError(FormForgeError):
    """Error raised by FormBuilder calls."""

    code = "BUILDER_ERROR"


class ValidatorError(FormForgeError):
    """Error raised while evaluating a validation rule."""

    code = "VALIDATOR_ERROR"


# =============================================================================
# Field errors
# =============================================================================


class UnknownFieldError(FieldError):
    """A type name could not be resolved to a registered field class."""

    code = "UNKNOWN_FIELD"


class InvalidPropertyError(FieldError):
    """A tolerant-shape property was neither a list, mapping nor string."""

    code = "INVALID_PROPERTY"


class InvalidClassesError(InvalidPropertyError, FieldsetError, FormError):
    """A classes property was neither a list, mapping nor string.

    Fields, fieldsets and forms all coerce their class lists, so this error
    belongs to every level.
    """

    code = "INVALID_CLASSES"


class InvalidFieldValueError(FieldError):
    """A composite field's value was expected to be JSON but did not decode."""

    code = "INVALID_VALUE"


class UnknownPropertyError(FieldError):
    """A class-list selector did not name a known class list."""

    code = "UNKNOWN_PROPERTY"


class OptionsRequiredError(FieldError):
    """A selection field was rendered without any options."""

    code = "OPTIONS_REQUIRED"


class OptionsTooDeepError(FieldError):
    """A selection field's options are nested deeper than it can render."""

    code = "OPTIONS_TOO_DEEP"


# =============================================================================
# Fieldset errors
# =============================================================================


class NotAFieldError(FieldsetError):
    """Something other than a Field was added where a Field was expected."""

    code = "NOT_A_FIELD"


class NotAFieldsetError(FieldsetError, FormError):
    """Something other than a Fieldset was added where one was expected."""

    code = "NOT_A_FIELDSET"


class NeitherFieldNorFieldsetError(FieldsetError):
    """A fieldset's collection holds an entry it cannot render."""

    code = "NEITHER_FIELD_NOR_FIELDSET"


# =============================================================================
# Form errors
# =============================================================================


class NotAButtonError(FormError):
    """A non-button field was added to a form's buttons."""

    code = "NOT_A_BUTTON"


# =============================================================================
# Builder errors
# =============================================================================


class MissingLegendError(BuilderError):
    """A fieldset was opened without a legend."""

    code = "MISSING_LEGEND"


class MissingFieldTypeError(BuilderError):
    """A field was added without a type."""

    code = "MISSING_FIELD_TYPE"


# =============================================================================
# Validator errors
# =============================================================================


class UnknownValidationFunctionError(ValidatorError):
    """A rule name is not in the validator's rule table."""

    code = "UNKNOWN_FUNCTION"


class InvalidReturnTypeError(ValidatorError):
    """A rule predicate returned something other than a bool."""

    code = "INVALID_RETURN_TYPE"


class UnableToValidateError(ValidatorError):
    """A rule predicate could not be applied to the value and parameters."""

    code = "UNABLE_TO_VALIDATE"


class NoExtensionError(ValidatorError):
    """An uploaded file name has no extension to check."""

    code = "NO_EXTENSION"


class MimeNotFoundError(ValidatorError):
    """No MIME type is known for an uploaded file's extension."""

    code = "MIME_NOT_FOUND"
