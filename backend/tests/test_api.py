import json

from relay.services.timers import Connect, Disconnect, Handle, PeerMessage
from relay.services.timers.housekeeping import run_housekeeping_pass, start_housekeeping


def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert 'message' in res.get_json()


def test_statistics_empty(client):
    res = client.get('/api/statistics')
    assert res.status_code == 200
    assert res.get_json() == {
        'timers': {},
        'totals': {'mobbers': 0, 'goals': 0, 'connections': 0},
    }


def test_statistics_reflect_store(client, store):
    a, b, c = Handle('a'), Handle('b'), Handle('c')
    store.dispatch(Connect(a, 'alpha'))
    store.dispatch(Connect(b, 'alpha'))
    store.dispatch(Connect(c, 'beta'))
    store.dispatch(PeerMessage(a, 'alpha', json.dumps({'type': 'mob:update', 'mob': ['x', 'y']})))
    store.dispatch(PeerMessage(c, 'beta', json.dumps({'type': 'goals:update', 'goals': ['g']})))

    data = client.get('/api/statistics').get_json()
    assert data['timers'] == {
        'alpha': {'mobbers': 2, 'goals': 0, 'connections': 2},
        'beta': {'mobbers': 0, 'goals': 1, 'connections': 1},
    }
    assert data['totals'] == {'mobbers': 2, 'goals': 1, 'connections': 3}

    res = client.get('/api/statistics/beta')
    assert res.status_code == 200
    assert res.get_json()['goals'] == 1


def test_statistics_unknown_timer(client, store):
    store.dispatch(Connect(Handle('a'), 'alpha'))
    store.dispatch(Disconnect(Handle('a'), 'alpha'))
    res = client.get('/api/statistics/alpha')
    assert res.status_code == 404
    assert res.get_json() == {'error': 'Timer not found'}


def test_housekeeping_pass_visits_live_timers(store):
    store.dispatch(Connect(Handle('a'), 'alpha'))
    store.dispatch(Connect(Handle('b'), 'beta'))
    before = store.state
    assert run_housekeeping_pass(store) == 2
    assert store.state == before


def test_housekeeping_disabled_in_testing(flask_app, store):
    from relay import socketio
    assert start_housekeeping(flask_app, socketio, store) is False
