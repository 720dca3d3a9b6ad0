from flask import request


def parse_body(schema):
    """Validate the JSON body (or form fields) against a pydantic schema."""
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict() if request.form else {}
    return schema.model_validate(data)


def query_bool(name):
    value = request.args.get(name)
    if value is None or value == "":
        return None
    return value.lower() in ("1", "true", "yes")


def query_int(name, default):
    value = request.args.get(name, type=int)
    return default if value is None else value
