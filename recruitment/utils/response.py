from flask import jsonify


def success(data=None, message="Success", status=200):
    return jsonify({"success": True, "message": message, "data": data}), status


def error(message, status=400, code=None, **extra):
    body = {"success": False, "message": message}
    if code:
        body["code"] = code
    body.update(extra)
    return jsonify(body), status
