"""FormForge forms: the Form aggregate, a builder and a file loader.

Usage:
    from formforge.forms import Form, FormBuilder, FormConfigLoader

    loader = FormConfigLoader(Path("forms"))
    loader.load_all()
    form = loader.get_form("contact")
    if not form.add_field_error("email", "Please enter a valid email address.", submitted):
        ...
    html = form.render()
"""

from formforge.forms.builder import FIELD_KEYS, FIELDSET_KEYS, FORM_KEYS, FormBuilder
from formforge.forms.form import (
    ENCTYPE_DEFAULT,
    ENCTYPE_MULTIPART,
    ENCTYPE_TEXT,
    ENCTYPE_URLENCODED,
    ENCTYPES,
    METHODS,
    Form,
)
from formforge.forms.loader import FormConfigLoader, form_files, read_form_file

__all__ = [
    # Form
    "Form",
    "ENCTYPES",
    "ENCTYPE_DEFAULT",
    "ENCTYPE_URLENCODED",
    "ENCTYPE_MULTIPART",
    "ENCTYPE_TEXT",
    "METHODS",
    # Builder
    "FormBuilder",
    "FORM_KEYS",
    "FIELDSET_KEYS",
    "FIELD_KEYS",
    # Loader
    "FormConfigLoader",
    "form_files",
    "read_form_file",
]
