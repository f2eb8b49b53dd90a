import json
import logging
from flask import Flask, current_app
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from config import Config

STATS_EXTENSION = 'lightsout_stats'

socketio = SocketIO(async_mode=None)


def get_stats_tracker():
    """Return the statistics tracker owned by the current application."""
    return current_app.extensions[STATS_EXTENSION]


def create_app(config_class=Config):
    # Static assets are served from the site root, e.g. /index.html
    flask_app = Flask(__name__, static_folder='static', static_url_path='')
    flask_app.config.from_object(config_class)

    level = flask_app.config.get('LOG_LEVEL', 'INFO')
    flask_app.logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    allowed_origins = flask_app.config.get('CORS_ORIGINS') or []
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One aggregate per app; tests get a fresh one with every create_app call
    from lightsout.services.games.stats import StatsTracker
    flask_app.extensions[STATS_EXTENSION] = StatsTracker()

    # Import and register blueprints here
    from lightsout.main import main
    flask_app.register_blueprint(main)

    from lightsout.api.game import game
    flask_app.register_blueprint(game, url_prefix='/api')

    from lightsout.api.puzzle import puzzle
    flask_app.register_blueprint(puzzle, url_prefix='/api/puzzle')

    from lightsout.socketio_events import register_socketio_handlers
    register_socketio_handlers(socketio, testing=flask_app.config.get('TESTING', False))

    @click.command('lightsout-hint')
    @click.argument('grid_json')
    def hint_command(grid_json):
        """Prints the hint and shape check for a grid given as JSON."""
        from lightsout.services.games.hints import generate_hint, is_square_grid
        try:
            grid = json.loads(grid_json)
        except ValueError as exc:
            raise click.BadParameter(f'not valid JSON: {exc}', param_hint='GRID_JSON')
        square = is_square_grid(grid)
        click.echo(f'square: {square}')
        if square:
            click.echo(f'hint: {generate_hint(grid)}')

    flask_app.cli.add_command(hint_command)

    flask_app.logger.info(f"[startup] Lights Out backend configured port={flask_app.config.get('PORT')}")

    return flask_app
