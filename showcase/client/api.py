import requests

PROJECT_FIELDS = ('title', 'description', 'image_url', 'link', 'category')
RESUME_FIELDS = ('title', 'company', 'duration', 'description', 'type')


class PortfolioClient:
    """
    Thin wrapper over the portfolio REST routes.

    No timeouts or retries are configured. Non-2xx answers raise
    `requests.HTTPError`, except a rejected login which returns None.
    """

    def __init__(self, base_url="http://localhost:8000", session=None):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()

    def _url(self, path):
        return f"{self.base_url}/api/{path}"

    def _request(self, method, path, **kwargs):
        response = self.session.request(method, self._url(path), **kwargs)
        response.raise_for_status()
        return response.json()

    # --- Projects ---

    def list_projects(self):
        return self._request('GET', 'projects')

    def create_project(self, fields):
        payload = {name: fields.get(name) for name in PROJECT_FIELDS if name in fields}
        return self._request('POST', 'projects', json=payload)['id']

    def delete_project(self, project_id):
        return self._request('DELETE', f'projects/{project_id}')['success']

    # --- Resume ---

    def list_resume(self):
        return self._request('GET', 'resume')

    def create_resume_entry(self, fields):
        payload = {name: fields.get(name) for name in RESUME_FIELDS if name in fields}
        return self._request('POST', 'resume', json=payload)['id']

    def delete_resume_entry(self, entry_id):
        return self._request('DELETE', f'resume/{entry_id}')['success']

    # --- Admin ---

    def login(self, password):
        response = self.session.post(self._url('admin/login'), json={"password": password})
        if response.status_code == requests.codes.unauthorized:
            return None
        response.raise_for_status()
        return response.json()['token']
