from http import HTTPStatus

from flask import jsonify
from loguru import logger
from werkzeug.exceptions import HTTPException

from .application import ApplicationError


def handle_application_error(err: ApplicationError):
    return jsonify(err.to_dict()), err.status_code


def handle_http_exception(err: HTTPException):
    # Routing-level errors (unknown path, wrong method) keep their werkzeug code
    name = (err.name or 'HTTPException').replace(' ', '')
    return jsonify({'name': name, 'message': err.description}), err.code


def handle_unexpected_error(err: Exception):
    logger.exception('Unhandled error while serving request: {}', type(err).__name__)
    body = {'name': 'InternalServerError', 'message': 'Internal Server Error'}
    return jsonify(body), HTTPStatus.INTERNAL_SERVER_ERROR


def register_error_handlers(app):
    app.register_error_handler(ApplicationError, handle_application_error)
    app.register_error_handler(HTTPException, handle_http_exception)
    app.register_error_handler(Exception, handle_unexpected_error)
