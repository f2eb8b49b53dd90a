import time
from flask import Blueprint, jsonify, current_app

main = Blueprint('main', __name__)

_started_at = time.monotonic()


@main.route('/')
def index():
    return current_app.send_static_file('index.html')


@main.route('/health')
def health():
    return jsonify({
        'status': 'healthy',
        'uptime': time.monotonic() - _started_at,
        'port': current_app.config.get('PORT'),
    })
