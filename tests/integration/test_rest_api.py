from fastapi.testclient import TestClient

from api.rest_api import app


def test_health_and_diagram_endpoints():
    client = TestClient(app)

    resp = client.get('/health')
    assert resp.status_code == 200
    assert resp.json()['status'] == 'ok'

    payload = {'sgf': '(;GM[1]FF[4]SZ[9];B[ee];W[gc];B[cg])', 'move': 2}
    result = client.post('/diagram', json=payload)
    assert result.status_code == 200
    data = result.json()
    assert data['total_moves'] == 2
    assert [label['number'] for label in data['labels']] == [1, 2]
    assert data['diagram'].splitlines()[0].split() == list('ABCDEFGHJ')
