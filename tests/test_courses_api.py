from conftest import ADMIN_PASSWORD


def _walk_keys(value):
    if isinstance(value, dict):
        for key, item in value.items():
            yield key
            yield from _walk_keys(item)
    elif isinstance(value, list):
        for item in value:
            yield from _walk_keys(item)


def test_public_listing_never_contains_fb_url(client, seeded_courses):
    response = client.get('/api/courses')

    assert response.status_code == 200
    payload = response.get_json()
    assert 'fbUrl' not in set(_walk_keys(payload))
    first = payload['courses'][0]
    assert first['id'] == 'c1'
    assert first['lessons'][0] == {
        'id': 'l1',
        'title': 'Variables',
        'description': 'Names and values',
        'duration': '10:00',
        'order': 1,
    }
    assert payload['courses'][1]['lessons'] == []


def test_public_listing_keeps_extra_course_fields(client, storage):
    storage.courses.save({'courses': [{'id': 'c9', 'title': 'T', 'description': 'D', 'level': 'beginner', 'lessons': []}]})

    course = client.get('/api/courses').get_json()['courses'][0]

    assert course['level'] == 'beginner'


def test_public_listing_on_empty_store(client):
    assert client.get('/api/courses').get_json() == {'courses': []}


def test_admin_listing_returns_full_document(admin_post, seeded_courses):
    response = admin_post('/api/admin/courses')

    assert response.status_code == 200
    assert response.get_json() == seeded_courses.courses.load()
    assert response.get_json()['courses'][0]['lessons'][0]['fbUrl'] == 'https://facebook.com/video/1'


def test_create_course_then_public_listing(client, admin_post):
    response = admin_post('/api/admin/courses/create', course={'title': 'A', 'description': 'B'})

    assert response.status_code == 200
    body = response.get_json()
    assert body['success'] is True
    course = body['course']
    assert course['lessons'] == []
    assert isinstance(course['id'], str) and course['id']
    assert course['id'].isdigit()

    listed = client.get('/api/courses').get_json()['courses']
    assert listed == [{'id': course['id'], 'title': 'A', 'description': 'B', 'lessons': []}]


def test_create_course_keeps_supplied_lessons(admin_post):
    lessons = [{'id': 'x1', 'title': 'Intro', 'fbUrl': 'http://v', 'order': 1}]

    course = admin_post('/api/admin/courses/create', course={'title': 'A', 'description': 'B', 'lessons': lessons}).get_json()['course']

    assert course['lessons'] == lessons


def test_created_course_round_trips_through_admin_listing(admin_post):
    created = admin_post('/api/admin/courses/create', course={'title': 'Round', 'description': 'Trip'}).get_json()['course']

    stored = admin_post('/api/admin/courses').get_json()['courses']

    assert stored == [created]


def test_created_course_ids_are_unique(admin_post):
    ids = {
        admin_post('/api/admin/courses/create', course={'title': str(n), 'description': ''}).get_json()['course']['id']
        for n in range(5)
    }

    assert len(ids) == 5


def test_update_course_preserves_id_and_lessons(admin_post, seeded_courses):
    original = seeded_courses.courses.load()['courses'][0]

    response = admin_post(
        '/api/admin/courses/update',
        courseId='c1',
        course={'title': 'New title', 'description': 'New desc', 'id': 'hijack', 'lessons': []},
    )

    assert response.status_code == 200
    updated = response.get_json()['course']
    assert updated['id'] == 'c1'
    assert updated['lessons'] == original['lessons']
    assert updated['title'] == 'New title'
    assert updated['description'] == 'New desc'

    stored = seeded_courses.courses.load()['courses']
    assert stored[0] == updated
    assert stored[1]['id'] == 'c2'
    assert stored[1]['title'] == 'Flask'


def test_update_unknown_course_is_404(admin_post, seeded_courses):
    before = seeded_courses.courses.load()

    response = admin_post('/api/admin/courses/update', courseId='missing', course={'title': 'X'})

    assert response.status_code == 404
    assert response.get_json() == {'error': 'Course not found'}
    assert seeded_courses.courses.load() == before


def test_delete_course(admin_post, seeded_courses):
    response = admin_post('/api/admin/courses/delete', courseId='c1')

    assert response.get_json() == {'success': True}
    assert [c['id'] for c in seeded_courses.courses.load()['courses']] == ['c2']


def test_delete_unknown_course_is_idempotent(admin_post, seeded_courses):
    before = seeded_courses.courses.load()

    response = admin_post('/api/admin/courses/delete', courseId='nope')

    assert response.status_code == 200
    assert response.get_json() == {'success': True}
    assert seeded_courses.courses.load() == before


def test_course_ids_match_exactly(admin_post, seeded_courses):
    response = admin_post('/api/admin/courses/delete', courseId='C1')

    assert response.status_code == 200
    assert len(seeded_courses.courses.load()['courses']) == 2


def test_admin_password_goes_in_body(client, seeded_courses):
    response = client.post('/api/admin/courses', json={'password': ADMIN_PASSWORD})

    assert response.status_code == 200


def test_public_listing_omits_absent_lesson_fields(client, storage):
    storage.courses.save({'courses': [{
        'id': 'c5',
        'title': 'Sparse',
        'description': '',
        'lessons': [{'id': 'l5', 'title': 'No duration', 'fbUrl': 'http://v', 'order': 1}],
    }]})

    lesson = client.get('/api/courses').get_json()['courses'][0]['lessons'][0]

    assert lesson == {'id': 'l5', 'title': 'No duration', 'order': 1}
