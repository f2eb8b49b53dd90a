from flask import Blueprint, jsonify, request, current_app
from lightsout.api.requests import GridRequest, InvalidRequest
from lightsout.services.games.hints import generate_hint, is_square_grid


puzzle = Blueprint('puzzle', __name__)


def _parse_grid():
    data = request.get_json(silent=True)
    try:
        return GridRequest.from_json(data), None
    except InvalidRequest as exc:
        current_app.logger.warning(f"[puzzle] rejected grid body: {exc}")
        return None, (jsonify({'error': str(exc)}), 400)


@puzzle.route('/hint', methods=['POST'])
def get_hint():
    parsed, error = _parse_grid()
    if error:
        return error
    # The hint ladder indexes corners, so ragged grids never reach it
    if not is_square_grid(parsed.grid):
        current_app.logger.warning(f"[puzzle] hint requested for non-square grid rows={len(parsed.grid)}")
        return jsonify({'error': 'Invalid grid state'}), 400
    return jsonify({'hint': generate_hint(parsed.grid)})


@puzzle.route('/validate', methods=['POST'])
def validate_grid():
    parsed, error = _parse_grid()
    if error:
        return error
    # Key kept as "solvable" for the game client; this is a shape check only
    return jsonify({'solvable': is_square_grid(parsed.grid)})
