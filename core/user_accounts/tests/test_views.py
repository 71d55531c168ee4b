"""
Tests for User Account API Views.
Covers login, token refresh and the profile endpoint.
"""
from rest_framework import status
from rest_framework.test import APITestCase, APIClient

from core.base.test_utils import create_user


class LoginAPITest(APITestCase):
    """Test user login endpoint"""

    def setUp(self):
        self.client = APIClient()
        self.url = '/auth/login/'
        self.user = create_user('testuser@example.com', password='TestPass123')

    def test_login_success(self):
        response = self.client.post(self.url, {
            'email': 'testuser@example.com',
            'password': 'TestPass123'
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['user']['email'], 'testuser@example.com')
        self.assertIn('access', response.data['data']['tokens'])
        self.assertIn('refresh', response.data['data']['tokens'])

    def test_login_wrong_password(self):
        response = self.client.post(self.url, {
            'email': 'testuser@example.com',
            'password': 'WrongPass'
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_login_inactive_user(self):
        self.user.status = False
        self.user.save()

        response = self.client.post(self.url, {
            'email': 'testuser@example.com',
            'password': 'TestPass123'
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_login_missing_fields(self):
        response = self.client.post(self.url, {'email': 'testuser@example.com'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_access_token_authenticates_requests(self):
        login = self.client.post(self.url, {
            'email': 'testuser@example.com',
            'password': 'TestPass123'
        }, format='json')
        access = login.data['data']['tokens']['access']

        self.client.credentials(HTTP_AUTHORIZATION=f'Bearer {access}')
        response = self.client.get('/contacts/persons/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_token_refresh(self):
        login = self.client.post(self.url, {
            'email': 'testuser@example.com',
            'password': 'TestPass123'
        }, format='json')

        response = self.client.post('/auth/token/refresh/', {
            'refresh': login.data['data']['tokens']['refresh']
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('access', response.json()['data'])


class ProfileAPITest(APITestCase):
    """Test the profile endpoint"""

    def setUp(self):
        self.client = APIClient()
        self.user = create_user('profile@example.com', name='Profile User', groups=['sales'])

    def test_profile_requires_authentication(self):
        response = self.client.get('/accounts/profile/')

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_profile(self):
        self.client.force_authenticate(user=self.user)

        response = self.client.get('/accounts/profile/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['name'], 'Profile User')
        self.assertEqual(response.data['data']['role']['name'], 'Administrator')
        self.assertEqual([g['name'] for g in response.data['data']['groups']], ['sales'])
