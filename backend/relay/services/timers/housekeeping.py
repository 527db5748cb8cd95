import time

from .events import ElectOwner, RecomputeStatisticsFromConnections


def run_housekeeping_pass(store) -> int:
    """Re-run election and the connection count for every live timer.

    Returns the number of timers visited.
    """
    timer_ids = store.timer_ids()
    for timer_id in timer_ids:
        store.dispatch(ElectOwner(timer_id))
        store.dispatch(RecomputeStatisticsFromConnections(timer_id))
    return len(timer_ids)


def start_housekeeping(app, socketio, store) -> bool:
    """Start the periodic housekeeping worker.

    - No-ops when HOUSEKEEPING_INTERVAL_SEC is 0
    - No-ops in TESTING mode unless ENABLE_HOUSEKEEPING_IN_TESTS is set
    """
    try:
        interval = float(app.config.get('HOUSEKEEPING_INTERVAL_SEC', 0))
    except (TypeError, ValueError):
        interval = 0
    if interval <= 0:
        return False
    if app.config.get('TESTING') and not app.config.get('ENABLE_HOUSEKEEPING_IN_TESTS'):
        return False

    def _worker(delay: float):
        while True:
            time.sleep(delay)
            with app.app_context():
                visited = run_housekeeping_pass(store)
                app.logger.debug(f"[housekeeping] timers={visited}")

    app.logger.info(f"[housekeeping-set] interval={interval}s")
    socketio.start_background_task(_worker, interval)
    return True
