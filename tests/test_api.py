import json
import pytest
from app import create_app
from app.config import TestingConfig

ROOMS = [
    {"id": 1, "name": "1101", "building": "1号館", "capacity": 120, "status": "空き", "tags": ["プロジェクター", "マイク"]},
    {"id": 2, "name": "1102", "building": "1号館", "capacity": 60, "status": "授業中", "tags": ["プロジェクター"]},
    {"id": 7, "name": "Lab 3301", "building": "3号館", "status": "空き", "tags": []}
]

@pytest.fixture
def app(tmp_path):
    class Config(TestingConfig):
        DATA_DIR = str(tmp_path)

    with open(tmp_path / 'classrooms.json', 'w', encoding='utf-8') as f:
        json.dump(ROOMS, f, ensure_ascii=False)

    return create_app(Config)

@pytest.fixture
def client(app):
    return app.test_client()

def test_health(client):
    assert client.get('/health').get_json()['status'] == 'ok'

def test_list_and_get_classrooms(client):
    res = client.get('/api/classrooms')
    assert res.status_code == 200
    assert [r['id'] for r in res.get_json()] == [1, 2, 7]

    res = client.get('/api/classrooms/7')
    assert res.status_code == 200
    assert res.get_json()['capacity'] is None

    assert client.get('/api/classrooms/99').status_code == 404
    assert client.get('/api/classrooms/abc').status_code == 404

def test_classroom_filters(client):
    res = client.get('/api/classrooms', query_string={'tag': ['プロジェクター', 'マイク']})
    assert [r['id'] for r in res.get_json()] == [1]

    res = client.get('/api/classrooms', query_string={'hideOccupied': '1', 'building': '1号館'})
    assert [r['id'] for r in res.get_json()] == [1]

    res = client.get('/api/classrooms', query_string={'keyword': 'lab'})
    assert [r['id'] for r in res.get_json()] == [7]

def test_classrooms_grouped_by_building(client):
    groups = client.get('/api/classrooms/buildings').get_json()
    assert [g['building'] for g in groups] == ['1号館', '3号館']
    assert len(groups[0]['rooms']) == 2

def test_missing_classrooms_file_degrades_to_empty(tmp_path):
    class Config(TestingConfig):
        DATA_DIR = str(tmp_path / 'nowhere')

    client = create_app(Config).test_client()
    assert client.get('/api/classrooms').get_json() == []
    assert client.get('/api/votes').get_json() == {}
    assert client.get('/api/comments').get_json() == []

def test_vote_flow(client):
    body = {'roomId': 7, 'type': 'garagara', 'day': '水', 'periodId': '3'}
    client.post('/api/votes', json=body)
    res = client.post('/api/votes', json=body)
    assert res.status_code == 200
    assert res.get_json() == {'class': 0, 'free': 0, 'garagara': 2, 'sukuname': 0, 'hutsu': 0, 'konzatsu': 0}

    votes = client.get('/api/votes').get_json()
    assert votes['7']['水']['3']['garagara'] == 2

    bucket = client.get('/api/votes', query_string={'roomId': 7, 'day': '水', 'periodId': '3'}).get_json()
    assert bucket['garagara'] == 2

    assert client.get('/api/votes', query_string={'roomId': 7}).status_code == 400

def test_vote_validation(client):
    res = client.post('/api/votes', json={'roomId': 7, 'type': 'garagara', 'day': '水'})
    assert res.status_code == 400

    res = client.post('/api/votes', json={'roomId': 7, 'type': 'nope', 'day': '水', 'periodId': '3'})
    assert res.status_code == 400
    assert res.get_json()['error'] == 'Invalid vote type.'

    res = client.post('/api/votes', data='not json', content_type='text/plain')
    assert res.status_code == 400

def test_comment_and_like_flow(client):
    res = client.post('/api/comments', json={'roomId': 7, 'text': 'empty', 'periodId': '3', 'day': '水'})
    assert res.status_code == 201
    comment = res.get_json()
    assert comment['roomId'] == '7'
    assert comment['timestamp']

    client.post(f"/api/comments/{comment['id']}/like")
    res = client.post(f"/api/comments/{comment['id']}/like")
    assert res.status_code == 200
    assert res.get_json() == {'id': comment['id'], 'likes': 2}

    listed = client.get('/api/comments', query_string={'roomId': '7', 'day': '水', 'periodId': '3'}).get_json()
    assert listed[0]['likes'] == 2
    assert client.get('/api/comments', query_string={'day': '月'}).get_json() == []

def test_comment_validation(client):
    res = client.post('/api/comments', json={'roomId': 7, 'periodId': '3', 'day': '水'})
    assert res.status_code == 400

def test_like_errors(client):
    assert client.post('/api/comments/abc/like').status_code == 400
    assert client.post('/api/comments/123/like').status_code == 404

def test_periods(client):
    periods = client.get('/api/periods').get_json()
    assert [p['id'] for p in periods] == ['1', '2', '昼休み', '3', '4', '5', '6']
    assert periods[2]['label'] == '昼休み'

    slot = client.get('/api/periods/current').get_json()
    assert set(slot) == {'day', 'periodId', 'isCurrent', 'headerText'}

    slot = client.get('/api/periods/current', query_string={'day': '金', 'periodId': '2'}).get_json()
    assert slot['headerText'] == '金曜 2限'

def test_malformed_votes_document_is_not_a_server_error(app, tmp_path):
    with open(tmp_path / 'votes.json', 'w', encoding='utf-8') as f:
        json.dump({'7': 5}, f)
    client = app.test_client()

    res = client.get('/api/votes', query_string={'roomId': 7, 'day': '水', 'periodId': '3'})
    assert res.status_code == 200
    assert res.get_json()['free'] == 0

    res = client.post('/api/votes', json={'roomId': 7, 'type': 'free', 'day': '水', 'periodId': '3'})
    assert res.status_code == 200
    assert res.get_json()['free'] == 1

def test_like_accepts_numeric_forms(client):
    comment = client.post('/api/comments', json={'roomId': 7, 'text': 'empty', 'periodId': '3', 'day': '水'}).get_json()

    res = client.post(f"/api/comments/{comment['id']}.0/like")
    assert res.status_code == 200
    assert res.get_json() == {'id': comment['id'], 'likes': 1}

    assert client.post(f"/api/comments/{comment['id']}.5/like").status_code == 404
    assert client.post('/api/comments/1_000/like').status_code == 400
    assert client.post('/api/comments/nan/like').status_code == 400
