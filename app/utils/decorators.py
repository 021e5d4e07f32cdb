from functools import wraps
from flask import request, jsonify

def json_body_required(f):
    """Parse the JSON request body and hand it to the view as `data`."""
    @wraps(f)
    def decorated(*args, **kwargs):
        data = request.get_json(silent=True)

        if not isinstance(data, dict):
            return jsonify({'error': 'No input data provided'}), 400

        return f(data, *args, **kwargs)

    return decorated


def query_flag(name):
    """Truthy query-string flag (?hideOccupied=1 / true / on)."""
    return request.args.get(name, '').strip().lower() in ('1', 'true', 'yes', 'on')
