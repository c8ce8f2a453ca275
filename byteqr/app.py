from flask import Flask, Response, abort, request

from . import config
from .logging_config import setup_logging
from .qr import generate_qr
from .render import encode_png, to_string
from .tables import InvalidVersion


def _generate():
    args = request.get_json(True)
    if not isinstance(args, dict):
        abort(400, 'Expected a JSON object')
    if not isinstance(args.get('content'), str):
        abort(400, 'content must be a string')
    return generate_qr(args['content'], args.get('version', config.DEFAULT_VERSION),
                       args.get('mask'))


def create_app():
    app = Flask(__name__)

    @app.errorhandler(InvalidVersion)
    def invalid_version(e):
        return 'Invalid version', 400

    @app.errorhandler(400)
    def bad_request(e):
        return e.description, 400

    @app.route('/ws', methods=['POST'])
    def send_qr():
        return to_string(_generate(), separator='')

    @app.route('/png', methods=['POST'])
    def send_png():
        return Response(encode_png(_generate()), mimetype='image/png')

    return app


if __name__ == '__main__':
    setup_logging(config.LOG_LEVEL)
    create_app().run(port=config.PORT)
