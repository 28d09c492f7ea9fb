"""Defaults, validation and normalization of find-or-create options."""

from jsonschema import ValidationError
from jsonschema import validate as schema_validate

from findorcreate.exceptions import OptionsSchemaException

# Applied underneath whatever the caller passes.
DEFAULT_OPTIONS = {
    'new': True,
    'set_defaults_on_insert': True,
}

# Options consumed here and translated to findAndModify command fields.
# Anything else is handed to the command untouched.
COMMAND_FIELDS = {
    'upsert': 'upsert',
    'new': 'new',
    'fields': 'fields',
    'sort': 'sort',
    'max_time_ms': 'maxTimeMS',
}


def _schema_projection():
    """JSON schema for the projection option."""
    return {
        'anyOf': [
            {'type': 'string'},
            {
                'type': 'array',
                'items': {'type': 'string', 'minLength': 1},
            },
            {'type': 'object'},
            {'type': 'null'},
        ]
    }


def _schema_sort():
    """JSON schema for the sort option."""
    return {
        'anyOf': [
            {'type': 'string'},
            {
                'type': 'array',
                'items': {
                    'anyOf': [
                        {'type': 'string', 'minLength': 1},
                        {
                            'type': 'array',
                            'minItems': 2,
                            'maxItems': 2,
                            'items': {
                                'anyOf': [
                                    {'type': 'string', 'minLength': 1},
                                    {'enum': [1, -1]},
                                ]
                            },
                        },
                    ]
                },
            },
            {
                'type': 'object',
                'additionalProperties': {'enum': [1, -1]},
            },
            {'type': 'null'},
        ]
    }


# JSON schema for the options mapping. Unknown keys are allowed and
# passed through to the store.
OPTIONS_SCHEMA = {
    'type': 'object',
    'properties': {
        'upsert': {'type': 'boolean'},
        'new': {'type': 'boolean'},
        'set_defaults_on_insert': {'type': 'boolean'},
        'fields': _schema_projection(),
        'sort': _schema_sort(),
        'max_time_ms': {'type': 'integer', 'minimum': 0},
    },
    'additionalProperties': True,
}


def _listify(value):
    """Turn tuples into lists so the schema sees JSON arrays."""
    if isinstance(value, (list, tuple)):
        return [_listify(item) for item in value]
    return value


def validate_options(options):
    """Check the recognized options, raising OptionsSchemaException."""
    candidate = dict(options)
    for key in ('fields', 'sort'):
        if key in candidate:
            candidate[key] = _listify(candidate[key])
    try:
        schema_validate(candidate, OPTIONS_SCHEMA)
    except ValidationError as err:
        raise OptionsSchemaException(
            'Invalid find-or-create option: {}'.format(err.message))
    return True


def merge_options(options=None, defaults=None):
    """
    Merge caller options over the defaults.

    The returned mapping always runs the store operation as an upsert; the
    caller's ``upsert`` value only chooses how the document is applied.
    """
    merged = dict(DEFAULT_OPTIONS if defaults is None else defaults)
    merged.update(options or {})
    merged['upsert'] = True
    return merged


def _split_names(spec):
    if isinstance(spec, str):
        return spec.split()
    return list(spec)


def normalize_projection(fields):
    """
    Build a MongoDB projection document.

    Accepts a mapping (used as is), a sequence of field names, or a
    space-separated string. A leading ``-`` excludes a field and a leading
    ``+`` includes it.

    >>> normalize_projection('age -name')
    {'age': 1, 'name': 0}
    """
    if fields is None:
        return None
    if isinstance(fields, dict):
        return dict(fields)
    projection = {}
    for name in _split_names(fields):
        if name.startswith('-'):
            projection[name[1:]] = 0
        elif name.startswith('+'):
            projection[name[1:]] = 1
        else:
            projection[name] = 1
    return projection


def normalize_sort(sort):
    """
    Build an ordered MongoDB sort document.

    >>> normalize_sort('name -age')
    {'name': 1, 'age': -1}
    >>> normalize_sort([('age', -1)])
    {'age': -1}
    """
    if sort is None:
        return None
    if isinstance(sort, dict):
        return dict(sort)
    ordered = {}
    for item in _split_names(sort):
        if isinstance(item, str):
            if item.startswith('-'):
                ordered[item[1:]] = -1
            else:
                ordered[item.lstrip('+')] = 1
        else:
            key, direction = item
            ordered[key] = direction
    return ordered


def build_command_options(options):
    """Translate merged options to findAndModify command fields."""
    command = {}
    for key, value in options.items():
        if key == 'set_defaults_on_insert':
            continue
        if key == 'fields':
            value = normalize_projection(value)
        elif key == 'sort':
            value = normalize_sort(value)
        if value is None and key in COMMAND_FIELDS:
            continue
        command[COMMAND_FIELDS.get(key, key)] = value
    return command
