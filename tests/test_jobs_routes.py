JOB_BODY = {
    'title': 'Frontend Developer',
    'company': 'Acme',
    'location': 'Remote',
    'jobType': 'Full-time',
    'experienceLevel': 'Mid',
    'requiredSkills': ['js', 'css'],
    'isActive': True,
}


def create_job(client, headers, **overrides):
    body = dict(JOB_BODY)
    body.update(overrides)
    return client.post('/api/jobs', headers=headers, json=body)


class TestAdminPermissions:

    def test_listing_requires_token(self, client):
        assert client.get('/api/jobs').status_code == 401

    def test_job_seeker_cannot_create(self, client, user_headers):
        resp = create_job(client, user_headers)
        assert resp.status_code == 403
        assert resp.get_json() == {'message': 'Admin access required'}

    def test_job_seeker_cannot_list(self, client, user_headers):
        assert client.get('/api/jobs', headers=user_headers).status_code == 403


class TestJobCrud:

    def test_create_and_list(self, client, admin_headers):
        resp = create_job(client, admin_headers)
        assert resp.status_code == 201
        job = resp.get_json()['job']
        assert job['title'] == 'Frontend Developer'
        assert job['requiredSkills'] == ['js', 'css']
        assert job['isActive'] is True
        assert job['_id'] == job['id']

        listing = client.get('/api/jobs', headers=admin_headers).get_json()
        assert listing['total'] == 1
        assert listing['jobs'][0]['id'] == job['id']

    def test_create_accepts_comma_separated_skills(self, client, admin_headers):
        resp = create_job(client, admin_headers, requiredSkills='python, sql ,')
        assert resp.get_json()['job']['requiredSkills'] == ['python', 'sql']

    def test_create_requires_title(self, client, admin_headers):
        resp = create_job(client, admin_headers, title='')
        assert resp.status_code == 400
        assert resp.get_json()['message'].startswith('title')

    def test_status_filter(self, client, admin_headers):
        create_job(client, admin_headers, title='Open')
        create_job(client, admin_headers, title='Closed', isActive=False)

        active = client.get('/api/jobs?status=active', headers=admin_headers).get_json()['jobs']
        inactive = client.get('/api/jobs?status=inactive', headers=admin_headers).get_json()['jobs']
        assert [j['title'] for j in active] == ['Open']
        assert [j['title'] for j in inactive] == ['Closed']
        assert client.get('/api/jobs?status=bogus', headers=admin_headers).status_code == 400

    def test_search_filter(self, client, admin_headers):
        create_job(client, admin_headers, title='Data Engineer')
        create_job(client, admin_headers, title='Designer', company='Pixel')

        jobs = client.get('/api/jobs?search=Pixel', headers=admin_headers).get_json()['jobs']
        assert [j['title'] for j in jobs] == ['Designer']

    def test_get_update_delete(self, client, admin_headers):
        job_id = create_job(client, admin_headers).get_json()['job']['id']

        assert client.get(f'/api/jobs/{job_id}', headers=admin_headers).status_code == 200

        resp = client.put(f'/api/jobs/{job_id}', headers=admin_headers, json={
            'isActive': False,
            'requiredSkills': ['js'],
        })
        assert resp.status_code == 200
        job = resp.get_json()['job']
        assert job['isActive'] is False
        assert job['requiredSkills'] == ['js']
        assert job['title'] == 'Frontend Developer'

        assert client.delete(f'/api/jobs/{job_id}', headers=admin_headers).status_code == 200
        resp = client.get(f'/api/jobs/{job_id}', headers=admin_headers)
        assert resp.status_code == 404
        assert resp.get_json() == {'message': 'Job not found'}

    def test_update_rejects_null_title(self, client, admin_headers):
        job_id = create_job(client, admin_headers).get_json()['job']['id']
        resp = client.put(f'/api/jobs/{job_id}', headers=admin_headers, json={'title': None})
        assert resp.status_code == 400

    def test_job_applications_listing(self, client, admin_headers, user_headers):
        job_id = create_job(client, admin_headers).get_json()['job']['id']
        client.post('/api/applications', headers=user_headers, json={'jobId': job_id})

        resp = client.get(f'/api/jobs/{job_id}/applications', headers=admin_headers)
        assert resp.status_code == 200
        data = resp.get_json()
        assert data['total'] == 1
        assert data['applications'][0]['applicantEmail'] == 'jane@example.com'

    def test_search_treats_wildcards_literally(self, client, admin_headers):
        create_job(client, admin_headers, title='Designer', company='Pixel')
        create_job(client, admin_headers, title='100% Remote Engineer')

        jobs = client.get('/api/jobs?search=%25', headers=admin_headers).get_json()['jobs']
        assert [j['title'] for j in jobs] == ['100% Remote Engineer']
        jobs = client.get('/api/jobs?search=D_signer', headers=admin_headers).get_json()['jobs']
        assert jobs == []

    def test_out_of_range_job_id_is_not_found(self, client, admin_headers):
        huge = 2**70
        for path in (f'/api/jobs/{huge}', f'/api/jobs/{huge}/applications'):
            resp = client.get(path, headers=admin_headers)
            assert resp.status_code == 404
            assert resp.get_json() == {'message': 'Job not found'}
        resp = client.delete(f'/api/jobs/{huge}', headers=admin_headers)
        assert resp.status_code == 404
