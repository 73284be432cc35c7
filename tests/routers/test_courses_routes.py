import pytest

COURSE = {
    'title': 'Intro',
    'description': 'desc',
    'estimatedTime': '4 hours',
    'materialsNeeded': 'Laptop',
}


def _create_course(client, headers, **overrides) -> str:
    response = client.post('/api/courses', json=dict(COURSE, **overrides), headers=headers)
    assert response.status_code == 201
    return response.headers['location']


def test_list_courses_returns_empty_array(client) -> None:
    response = client.get('/api/courses')

    assert response.status_code == 200
    assert response.json() == []


def test_create_course_returns_location_and_no_body(client, ann) -> None:
    response = client.post('/api/courses', json=COURSE, headers=ann)

    assert response.status_code == 201
    assert response.headers['location'] == '/courses/1'
    assert response.content == b''


def test_list_courses_includes_owner_without_password_or_timestamps(client, ann) -> None:
    _create_course(client, ann)

    response = client.get('/api/courses')

    assert response.status_code == 200
    assert response.json() == [
        {
            'id': 1,
            'title': 'Intro',
            'description': 'desc',
            'estimatedTime': '4 hours',
            'materialsNeeded': 'Laptop',
            'userId': 1,
            'owner': {'id': 1, 'firstName': 'Ann', 'lastName': 'Lee', 'emailAddress': 'ann@x.com'},
        }
    ]
    assert 'password' not in response.text
    assert 'createdAt' not in response.text


def test_get_course_wraps_course_with_owner(client, ann) -> None:
    location = _create_course(client, ann)

    response = client.get(f'/api{location}')

    assert response.status_code == 200
    course = response.json()['course']
    assert course['title'] == 'Intro'
    assert course['owner']['emailAddress'] == 'ann@x.com'
    assert 'password' not in response.text


def test_get_course_returns_not_found_for_unknown_id(client) -> None:
    response = client.get('/api/courses/999')

    assert response.status_code == 404
    assert response.json() == {'message': 'Course not exist'}


def test_create_course_requires_authentication(client) -> None:
    response = client.post('/api/courses', json=COURSE)

    assert response.status_code == 401
    assert response.json() == {'message': 'Access Denied'}


def test_create_course_reports_missing_fields(client, ann) -> None:
    response = client.post('/api/courses', json={'description': ' '}, headers=ann)

    assert response.status_code == 400
    assert response.json() == {'errors': ['Please provide "title"', 'Please provide "description"']}
    assert client.get('/api/courses').json() == []


def test_create_course_without_user_id_is_owned_by_caller(client, ann, bob) -> None:
    _create_course(client, bob, title='Bob course')

    course = client.get('/api/courses/1').json()['course']

    assert course['userId'] == 2
    assert course['owner']['firstName'] == 'Bob'


def test_create_course_honours_explicit_user_id(client, ann, bob) -> None:
    _create_course(client, ann, userId=2)

    course = client.get('/api/courses/1').json()['course']

    assert course['userId'] == 2


def test_create_course_rejects_unknown_user_id(client, ann) -> None:
    response = client.post('/api/courses', json=dict(COURSE, userId=42), headers=ann)

    assert response.status_code == 400
    assert response.json() == {'errors': ['Please provide a valid "userId"']}


def test_create_course_rejects_non_string_title(client, ann) -> None:
    response = client.post('/api/courses', json=dict(COURSE, title=5), headers=ann)

    assert response.status_code == 400
    assert response.json()['errors'][0].startswith('"title"')


def test_update_course_by_owner_changes_fields(client, ann) -> None:
    _create_course(client, ann)

    response = client.put(
        '/api/courses/1',
        json={'title': 'Advanced', 'description': 'more', 'materialsNeeded': 'Book'},
        headers=ann,
    )

    assert response.status_code == 204
    assert response.content == b''
    course = client.get('/api/courses/1').json()['course']
    assert course['title'] == 'Advanced'
    assert course['description'] == 'more'
    assert course['estimatedTime'] == '4 hours'
    assert course['materialsNeeded'] == 'Book'
    assert course['userId'] == 1


def test_update_course_clears_optional_field_sent_as_null(client, ann) -> None:
    _create_course(client, ann)

    client.put('/api/courses/1', json={'title': 't', 'description': 'd', 'estimatedTime': None}, headers=ann)

    assert client.get('/api/courses/1').json()['course']['estimatedTime'] is None


def test_update_course_by_other_user_is_forbidden(client, ann, bob) -> None:
    _create_course(client, ann)
    before = client.get('/api/courses/1').json()

    response = client.put('/api/courses/1', json={'title': 'Hijack', 'description': 'x'}, headers=bob)

    assert response.status_code == 403
    assert response.json() == {'message': 'User has no course'}
    assert client.get('/api/courses/1').json() == before


def test_update_course_returns_not_found_for_unknown_id(client, ann) -> None:
    response = client.put('/api/courses/5', json={'title': 't', 'description': 'd'}, headers=ann)

    assert response.status_code == 404
    assert response.json() == {'message': 'Course not exist'}


def test_update_course_validates_before_loading(client, ann) -> None:
    _create_course(client, ann)

    response = client.put('/api/courses/1', json={'title': 'only title'}, headers=ann)

    assert response.status_code == 400
    assert response.json() == {'errors': ['Please provide "description"']}


def test_delete_course_by_owner_removes_it(client, ann) -> None:
    _create_course(client, ann)

    response = client.delete('/api/courses/1', headers=ann)

    assert response.status_code == 204
    assert client.get('/api/courses/1').status_code == 404
    assert client.get('/api/courses').json() == []


def test_delete_course_by_other_user_is_forbidden(client, ann, bob) -> None:
    _create_course(client, ann)

    response = client.delete('/api/courses/1', headers=bob)

    assert response.status_code == 403
    assert client.get('/api/courses/1').status_code == 200


def test_delete_course_returns_not_found_for_unknown_id(client, ann) -> None:
    response = client.delete('/api/courses/7', headers=ann)

    assert response.status_code == 404
    assert response.json() == {'message': 'Course not exist'}


@pytest.mark.parametrize(
    ('method', 'path'),
    [
        ('post', '/api/courses'),
        ('put', '/api/courses/1'),
        ('delete', '/api/courses/1'),
    ],
)
def test_course_writes_with_wrong_password_are_denied(client, ann, basic_auth, method, path) -> None:
    _create_course(client, ann)

    response = client.request(method.upper(), path, json=COURSE, headers=basic_auth('ann@x.com', 'nope'))

    assert response.status_code == 401
    assert response.json() == {'message': 'Access Denied'}
    assert len(client.get('/api/courses').json()) == 1
