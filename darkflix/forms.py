from collections.abc import Mapping

from flask import request


def form_fields(*names):
    """Read string fields from a JSON object or form body.

    Any other body shape reads as empty, and a field that is not a string
    reads as ``''``.
    """
    data = request.get_json(silent=True)
    if data is None:
        data = request.form
    if not isinstance(data, Mapping):
        data = {}
    fields = {}
    for name in names:
        value = data.get(name)
        fields[name] = value if isinstance(value, str) else ''
    return fields
