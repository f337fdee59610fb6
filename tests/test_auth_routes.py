from conftest import ADMIN_EMAIL, bearer, login, register


class TestRegister:

    def test_register_success(self, client):
        resp = register(client)
        assert resp.status_code == 200
        user = resp.get_json()['user']
        assert user['email'] == 'jane@example.com'
        assert user['skills'] == ['js', 'sql']
        assert user['preferredLocation'] == 'Remote'
        assert user['role'] == 'job_seeker'
        assert 'password' not in user and 'password_hash' not in user

    def test_register_accepts_skill_list(self, client):
        resp = register(client, skills=['Python', ' docker ', 'python'])
        assert resp.get_json()['user']['skills'] == ['Python', 'docker']

    def test_duplicate_email_conflicts(self, client):
        register(client)
        resp = register(client, email='JANE@example.com')
        assert resp.status_code == 409
        assert 'message' in resp.get_json()

    def test_invalid_email_rejected(self, client):
        resp = register(client, email='not-an-email')
        assert resp.status_code == 400
        assert resp.get_json()['message'].startswith('email')

    def test_short_password_rejected(self, client):
        resp = register(client, password='123')
        assert resp.status_code == 400

    def test_missing_body_rejected(self, client):
        resp = client.post('/api/auth/register', data='nope', content_type='text/plain')
        assert resp.status_code == 400
        assert resp.get_json() == {'message': 'Request body must be a JSON object'}

    def test_admin_email_gets_admin_role(self, client):
        resp = register(client, email=ADMIN_EMAIL)
        assert resp.get_json()['user']['role'] == 'admin'


class TestLogin:

    def test_login_returns_token(self, client):
        register(client)
        resp = login(client)
        assert resp.status_code == 200
        data = resp.get_json()
        assert data['token']
        assert data['user']['email'] == 'jane@example.com'

    def test_login_is_case_insensitive_on_email(self, client):
        register(client)
        assert login(client, email='Jane@Example.com').status_code == 200

    def test_wrong_password(self, client):
        register(client)
        resp = login(client, password='wrong-password')
        assert resp.status_code == 401
        assert resp.get_json() == {'message': 'Invalid email or password'}

    def test_unknown_user(self, client):
        assert login(client, email='ghost@example.com').status_code == 401


class TestProfile:

    def test_me_requires_token(self, client):
        resp = client.get('/api/auth/me')
        assert resp.status_code == 401
        assert 'message' in resp.get_json()

    def test_me_rejects_garbage_token(self, client):
        resp = client.get('/api/auth/me', headers=bearer('not.a.token'))
        assert resp.status_code == 401
        assert 'message' in resp.get_json()

    def test_me_returns_profile(self, client, user_headers):
        resp = client.get('/api/auth/me', headers=user_headers)
        assert resp.status_code == 200
        assert resp.get_json()['user']['name'] == 'Jane Doe'

    def test_update_profile(self, client, user_headers):
        resp = client.put('/api/auth/me', headers=user_headers, json={
            'skills': 'go, rust',
            'experienceLevel': 'Senior',
        })
        assert resp.status_code == 200
        user = resp.get_json()['user']
        assert user['skills'] == ['go', 'rust']
        assert user['experienceLevel'] == 'Senior'
        # untouched fields keep their values
        assert user['preferredLocation'] == 'Remote'
        assert user['name'] == 'Jane Doe'

    def test_update_profile_clears_blank_field(self, client, user_headers):
        resp = client.put('/api/auth/me', headers=user_headers, json={'preferredLocation': '  '})
        assert resp.get_json()['user']['preferredLocation'] is None
