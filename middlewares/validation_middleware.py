from functools import wraps

from flask import g, request
from pydantic import ValidationError

from errors import InvalidDataError


def _messages(exc: ValidationError):
    out = []
    for err in exc.errors():
        field = '.'.join(str(part) for part in err['loc']) or 'body'
        out.append(f'{field}: {err["msg"]}')
    return out


def validate_body(schema):
    """Parse the JSON body with ``schema`` before the view runs; the parsed
    model is left on ``g.body``."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            payload = request.get_json(silent=True)
            if not isinstance(payload, dict):
                raise InvalidDataError(details=['body: a JSON object is required'])
            try:
                g.body = schema.model_validate(payload)
            except ValidationError as exc:
                raise InvalidDataError(details=_messages(exc))
            return view(*args, **kwargs)
        return wrapper
    return decorator
