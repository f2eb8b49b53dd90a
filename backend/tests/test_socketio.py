def test_socket_connect(sio_client):
    # Ensure we are connected to /ws
    if not sio_client.is_connected('/ws'):
        sio_client.connect(namespace='/ws')
    assert sio_client.is_connected('/ws')

    received = sio_client.get_received('/ws')
    assert any(pkt['name'] == 'connected' for pkt in received)


def test_subscribe_sends_current_stats(sio_client, client):
    client.post('/api/game/complete', json={'moves': 11})
    sio_client.get_received('/ws')  # flush

    sio_client.emit('subscribe_stats', {}, namespace='/ws')
    received = sio_client.get_received('/ws')
    stats = [pkt for pkt in received if pkt['name'] == 'stats']
    assert stats
    assert stats[0]['args'][0]['totalGames'] == 1
    assert stats[0]['args'][0]['bestScore'] == 11


def test_completion_broadcasts_to_subscribers(sio_client, client):
    sio_client.emit('subscribe_stats', {}, namespace='/ws')
    sio_client.get_received('/ws')  # flush

    client.post('/api/game/complete', json={'moves': 6})
    received = sio_client.get_received('/ws')
    updates = [pkt for pkt in received if pkt['name'] == 'stats_update']
    assert len(updates) == 1
    assert updates[0]['args'][0] == {
        'totalGames': 1,
        'totalMoves': 6,
        'bestScore': 6,
        'averageMoves': 6,
    }


def test_unsubscribed_clients_get_no_updates(sio_client, client):
    sio_client.emit('subscribe_stats', {}, namespace='/ws')
    sio_client.emit('unsubscribe_stats', {}, namespace='/ws')
    sio_client.get_received('/ws')  # flush

    client.post('/api/game/complete', json={'moves': 6})
    received = sio_client.get_received('/ws')
    assert not any(pkt['name'] == 'stats_update' for pkt in received)


def test_rejected_completion_does_not_broadcast(sio_client, client):
    sio_client.emit('subscribe_stats', {}, namespace='/ws')
    sio_client.get_received('/ws')  # flush

    client.post('/api/game/complete', json={'moves': 'many'})
    received = sio_client.get_received('/ws')
    assert not any(pkt['name'] == 'stats_update' for pkt in received)


def test_ping_pong(sio_client):
    sio_client.emit('ping', {'n': 1}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(pkt['name'] == 'pong' and pkt['args'][0] == {'n': 1} for pkt in received)
