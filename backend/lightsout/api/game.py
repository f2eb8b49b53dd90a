from flask import Blueprint, jsonify, request, current_app
from lightsout import socketio, get_stats_tracker
from lightsout.api.requests import CompletionRequest, InvalidRequest


game = Blueprint('game', __name__)


@game.route('/stats', methods=['GET'])
def get_stats():
    stats = get_stats_tracker().get_statistics()
    return jsonify(stats.to_dict())


@game.route('/game/complete', methods=['POST'])
def complete_game():
    data = request.get_json(silent=True)
    try:
        completion = CompletionRequest.from_json(data)
    except InvalidRequest as exc:
        current_app.logger.warning(f"[stats] rejected completion body={data!r}: {exc}")
        return jsonify({'error': str(exc)}), 400

    stats = get_stats_tracker().record_completion(completion.moves)
    current_app.logger.info(
        f"[stats] game completed moves={completion.moves} total_games={stats.total_games} best={stats.best_score}"
    )

    # Push the new totals to every client watching the stats room
    socketio.emit('stats_update', stats.to_dict(), to='stats', namespace='/ws')

    return jsonify(stats.to_dict())
