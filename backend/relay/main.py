from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)


def _store():
    return current_app.extensions['timer_store']


@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the timer relay server!'})


@main.route('/api/statistics')
def list_statistics():
    """Live statistics for every timer with at least one connection."""
    statistics = _store().statistics()
    totals = {'mobbers': 0, 'goals': 0, 'connections': 0}
    for entry in statistics.values():
        for key in totals:
            totals[key] += entry.get(key, 0)
    return jsonify({'timers': statistics, 'totals': totals})


@main.route('/api/statistics/<string:timer_id>')
def get_statistics(timer_id):
    entry = _store().statistics().get(timer_id)
    if entry is None:
        return jsonify({'error': 'Timer not found'}), 404
    return jsonify(entry)
