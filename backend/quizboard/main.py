import os

from flask import Blueprint, current_app, jsonify, send_from_directory

main = Blueprint('main', __name__)


def _client_index_dir():
    build_dir = current_app.config.get('CLIENT_BUILD_DIR')
    if build_dir and os.path.isfile(os.path.join(build_dir, 'index.html')):
        return build_dir
    return None


@main.route('/health')
def health():
    return jsonify({'status': 'ok'})


@main.route('/', defaults={'path': ''})
@main.route('/<path:path>')
def client(path):
    """Serve the prebuilt browser client; API paths never land here."""
    if path.startswith('api/'):
        return jsonify({'error': 'Not found'}), 404
    build_dir = _client_index_dir()
    if build_dir is None:
        if path:
            return jsonify({'error': 'Not found'}), 404
        return jsonify({'message': 'Welcome to the Quizboard server!'})
    if path and os.path.isfile(os.path.join(build_dir, path)):
        return send_from_directory(build_dir, path)
    return send_from_directory(build_dir, 'index.html')
