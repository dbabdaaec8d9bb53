"""Accounts app tests."""

from datetime import timedelta
from unittest import mock

from django.contrib.auth import get_user_model
from django.core import mail
from django.test import TestCase, override_settings
from django.utils import timezone
from rest_framework.test import APIClient

from accounts.models import UserAddress
from accounts.tokens import hash_token, issue_access_token
from accounts.views import FORGOT_PASSWORD_MESSAGE


@override_settings(ALLOWED_HOSTS=['testserver', 'localhost', '127.0.0.1'])
class SignupLoginTests(TestCase):
	@classmethod
	def setUpTestData(cls):
		User = get_user_model()
		cls.user = User.objects.create_user(
			email='asha@example.com',
			password='secret12',
			first_name='Asha',
			last_name='Rao',
		)

	def setUp(self):
		self.client = APIClient()

	def test_signup_creates_user_and_sends_verification(self):
		res = self.client.post('/api/auth/signup/', data={
			'firstName': 'Meera',
			'lastName': 'Iyer',
			'email': 'Meera@Example.com',
			'password': 'abcdef',
		}, format='json')
		self.assertEqual(res.status_code, 201)

		user = get_user_model().objects.get(email='meera@example.com')
		self.assertTrue(user.check_password('abcdef'))
		self.assertTrue(user.password.startswith('bcrypt_sha256$'))
		self.assertIsNotNone(user.email_verification_token)
		self.assertEqual(len(mail.outbox), 1)

	def test_signup_missing_field(self):
		res = self.client.post('/api/auth/signup/', data={'email': 'x@example.com'}, format='json')
		self.assertEqual(res.status_code, 400)
		self.assertEqual(res.data, {'error': 'All fields are required'})

	def test_signup_rejects_bad_email_and_short_password(self):
		payload = {'firstName': 'A', 'lastName': 'B', 'email': 'not-an-email', 'password': 'abcdef'}
		res = self.client.post('/api/auth/signup/', data=payload, format='json')
		self.assertEqual(res.data, {'error': 'Invalid email format'})

		payload.update(email='ok@example.com', password='abc')
		res = self.client.post('/api/auth/signup/', data=payload, format='json')
		self.assertEqual(res.status_code, 400)
		self.assertEqual(res.data, {'error': 'Password must be at least 6 characters'})

	def test_signup_duplicate_email_is_conflict(self):
		res = self.client.post('/api/auth/signup/', data={
			'firstName': 'Asha',
			'lastName': 'Rao',
			'email': 'ASHA@example.com',
			'password': 'secret12',
		}, format='json')
		self.assertEqual(res.status_code, 409)
		self.assertEqual(res.data, {'error': 'User already exists'})

	def test_login_sets_cookie_and_returns_token(self):
		res = self.client.post('/api/auth/login/', data={'email': 'asha@example.com', 'password': 'secret12'}, format='json')
		self.assertEqual(res.status_code, 200)
		self.assertIn('token', res.data)
		self.assertEqual(res.data['user']['email'], 'asha@example.com')
		cookie = res.cookies['token']
		self.assertEqual(cookie.value, res.data['token'])
		self.assertTrue(cookie['httponly'])

	def test_login_invalid_credentials(self):
		res = self.client.post('/api/auth/login/', data={'email': 'asha@example.com', 'password': 'wrong!!'}, format='json')
		self.assertEqual(res.status_code, 401)
		self.assertEqual(res.data, {'error': 'Invalid credentials'})

	def test_login_missing_fields(self):
		res = self.client.post('/api/auth/login/', data={'email': 'asha@example.com'}, format='json')
		self.assertEqual(res.status_code, 400)

	def test_logout_clears_cookie(self):
		res = self.client.post('/api/auth/logout/')
		self.assertEqual(res.status_code, 200)
		self.assertEqual(res.cookies['token'].value, '')


@override_settings(ALLOWED_HOSTS=['testserver', 'localhost', '127.0.0.1'])
class MeEndpointTests(TestCase):
	@classmethod
	def setUpTestData(cls):
		cls.user = get_user_model().objects.create_user(
			email='staff@example.com',
			password='secret12',
			first_name='Staff',
			last_name='User',
			role='shopmanager',
		)

	def test_me_without_header(self):
		res = APIClient().get('/api/auth/me/')
		self.assertEqual(res.status_code, 401)
		self.assertEqual(res.data, {'error': 'No token provided'})

	def test_me_with_invalid_token(self):
		client = APIClient()
		client.credentials(HTTP_AUTHORIZATION='Bearer not-a-token')
		res = client.get('/api/auth/me/')
		self.assertEqual(res.status_code, 401)
		self.assertEqual(res.data, {'error': 'Invalid token'})

	def test_me_returns_user(self):
		client = APIClient()
		client.credentials(HTTP_AUTHORIZATION=f'Bearer {issue_access_token(self.user)}')
		res = client.get('/api/auth/me/')
		self.assertEqual(res.status_code, 200)
		self.assertEqual(res.data['user']['role'], 'shopmanager')

	def test_cookie_token_authenticates_admin_requests(self):
		client = APIClient()
		client.cookies['token'] = issue_access_token(self.user)
		res = client.get('/api/admin/wholesalers/')
		self.assertEqual(res.status_code, 200)

	def test_stale_cookie_does_not_break_public_pages(self):
		client = APIClient()
		client.cookies['token'] = 'garbage'
		res = client.get('/api/categories/')
		self.assertEqual(res.status_code, 200)


@override_settings(ALLOWED_HOSTS=['testserver', 'localhost', '127.0.0.1'])
class PasswordResetTests(TestCase):
	@classmethod
	def setUpTestData(cls):
		cls.user = get_user_model().objects.create_user(
			email='reset@example.com',
			password='oldpass1',
			first_name='Re',
			last_name='Set',
		)

	def test_forgot_password_same_answer_for_known_and_unknown(self):
		client = APIClient()
		known = client.post('/api/auth/forgot-password/', data={'email': 'reset@example.com'}, format='json')
		unknown = client.post('/api/auth/forgot-password/', data={'email': 'nobody@example.com'}, format='json')

		self.assertEqual(known.status_code, 200)
		self.assertEqual(unknown.status_code, 200)
		self.assertEqual(known.data, unknown.data)
		self.assertEqual(known.data['message'], FORGOT_PASSWORD_MESSAGE)
		self.assertEqual(len(mail.outbox), 1)

		self.user.refresh_from_db()
		self.assertIsNotNone(self.user.password_reset_token)
		self.assertGreater(self.user.password_reset_expires, timezone.now())

	def test_forgot_password_hides_email_failures(self):
		with mock.patch('accounts.views.send_password_reset_email', side_effect=OSError('smtp down')):
			res = APIClient().post('/api/auth/forgot-password/', data={'email': 'reset@example.com'}, format='json')
		self.assertEqual(res.status_code, 200)
		self.assertEqual(res.data['message'], FORGOT_PASSWORD_MESSAGE)

	def test_reset_password_with_valid_token(self):
		self.user.password_reset_token = hash_token('raw-token')
		self.user.password_reset_expires = timezone.now() + timedelta(minutes=10)
		self.user.save()

		res = APIClient().post('/api/auth/reset-password/', data={'token': 'raw-token', 'password': 'newpass1'}, format='json')
		self.assertEqual(res.status_code, 200)

		self.user.refresh_from_db()
		self.assertTrue(self.user.check_password('newpass1'))
		self.assertIsNone(self.user.password_reset_token)

	def test_reset_password_with_expired_token(self):
		self.user.password_reset_token = hash_token('raw-token')
		self.user.password_reset_expires = timezone.now() - timedelta(minutes=1)
		self.user.save()

		res = APIClient().post('/api/auth/reset-password/', data={'token': 'raw-token', 'password': 'newpass1'}, format='json')
		self.assertEqual(res.status_code, 400)
		self.assertEqual(res.data, {'error': 'Invalid or expired reset token'})

	def test_verify_email(self):
		self.user.email_verification_token = hash_token('verify-me')
		self.user.email_verification_expires = timezone.now() + timedelta(hours=1)
		self.user.save()

		client = APIClient()
		res = client.post('/api/auth/verify-email/', data={'token': 'verify-me'}, format='json')
		self.assertEqual(res.status_code, 200)
		self.user.refresh_from_db()
		self.assertTrue(self.user.email_verified)
		self.assertIsNone(self.user.email_verification_token)

		again = client.post('/api/auth/verify-email/', data={'token': 'verify-me'}, format='json')
		self.assertEqual(again.status_code, 400)

	def test_change_password(self):
		client = APIClient()
		client.force_authenticate(user=self.user)
		bad = client.post('/api/auth/change-password/', data={'currentPassword': 'nope', 'newPassword': 'another1'}, format='json')
		self.assertEqual(bad.status_code, 400)

		ok = client.post('/api/auth/change-password/', data={'currentPassword': 'oldpass1', 'newPassword': 'another1'}, format='json')
		self.assertEqual(ok.status_code, 200)
		self.user.refresh_from_db()
		self.assertTrue(self.user.check_password('another1'))


ADDRESS = {
	'address': '12 MG Road',
	'city': 'Bengaluru',
	'state': 'Karnataka',
	'zipcode': '560001',
	'country': 'India',
	'countryCode': '+91',
	'mobileNumber': '9876543210',
}


@override_settings(ALLOWED_HOSTS=['testserver', 'localhost', '127.0.0.1'])
class ProfileTests(TestCase):
	@classmethod
	def setUpTestData(cls):
		User = get_user_model()
		cls.user = User.objects.create_user(email='kavya@example.com', password='secret12', first_name='Kavya', last_name='N')
		User.objects.create_user(email='taken@example.com', password='secret12', first_name='T', last_name='K')

	def setUp(self):
		self.client = APIClient()
		self.client.force_authenticate(user=self.user)

	def test_get_profile(self):
		res = self.client.get('/api/user/profile/')
		self.assertEqual(res.status_code, 200)
		self.assertEqual(
			set(res.data['user']),
			{'id', 'firstName', 'lastName', 'email', 'role', 'createdAt', 'updatedAt'},
		)
		self.assertEqual(res.data['user']['role'], 'user')

	def test_update_profile(self):
		res = self.client.post('/api/user/update-profile/', data={
			'firstName': ' Kavya ',
			'lastName': 'Nair',
			'email': 'Kavya.Nair@Example.com',
		}, format='json')
		self.assertEqual(res.status_code, 200)
		self.assertEqual(res.data['message'], 'Profile updated successfully')
		self.user.refresh_from_db()
		self.assertEqual((self.user.first_name, self.user.email), ('Kavya', 'kavya.nair@example.com'))

	def test_update_profile_errors(self):
		cases = [
			({'firstName': 'K', 'lastName': '', 'email': 'k@example.com'}, 'All fields are required'),
			({'firstName': 'K', 'lastName': 'N', 'email': 'not-an-email'}, 'Invalid email format'),
			({'firstName': 'K', 'lastName': 'N', 'email': 'TAKEN@example.com'}, 'Email already exists'),
		]
		for payload, message in cases:
			with self.subTest(message=message):
				res = self.client.post('/api/user/profile/', data=payload, format='json')
				self.assertEqual(res.status_code, 400)
				self.assertEqual(res.data, {'error': message})

	def test_keeping_own_email_is_allowed(self):
		res = self.client.post('/api/user/profile/', data={'firstName': 'K', 'lastName': 'N', 'email': 'kavya@example.com'}, format='json')
		self.assertEqual(res.status_code, 200)

	def test_requires_login(self):
		self.assertEqual(APIClient().get('/api/user/profile/').status_code, 401)


@override_settings(ALLOWED_HOSTS=['testserver', 'localhost', '127.0.0.1'])
class AddressBookTests(TestCase):
	@classmethod
	def setUpTestData(cls):
		User = get_user_model()
		cls.user = User.objects.create_user(email='ravi@example.com', password='secret12', first_name='Ravi', last_name='K')
		cls.other = User.objects.create_user(email='sita@example.com', password='secret12', first_name='Sita', last_name='R')

	def setUp(self):
		self.client = APIClient()
		self.client.force_authenticate(user=self.user)

	def _add(self, **extra):
		return self.client.post('/api/user/addresses/', data={**ADDRESS, **extra}, format='json')

	def test_first_address_becomes_default(self):
		res = self._add()
		self.assertEqual(res.status_code, 201)
		self.assertIs(res.data['address']['isDefault'], True)
		self.assertEqual(res.data['address']['countryCode'], '+91')

		second = self._add(city='Mysuru')
		self.assertIs(second.data['address']['isDefault'], False)

		default = self.client.get('/api/user/default-address/')
		self.assertEqual(default.data['address']['id'], res.data['address']['id'])

	def test_all_fields_required(self):
		payload = {**ADDRESS}
		del payload['mobileNumber']
		res = self.client.post('/api/user/addresses/', data=payload, format='json')
		self.assertEqual(res.status_code, 400)
		self.assertEqual(res.data, {'error': 'All fields are required'})

		res = self._add(address='A' * 600, city='')
		self.assertEqual(res.data, {'error': 'All fields are required'})
		self.assertFalse(UserAddress.objects.exists())

	def test_only_one_default(self):
		first = self._add().data['address']
		second = self._add(isDefault=True).data['address']

		listed = self.client.get('/api/user/addresses/').data['addresses']
		self.assertEqual([a['id'] for a in listed], [second['id'], first['id']])
		self.assertEqual([a['isDefault'] for a in listed], [True, False])

		res = self.client.put(f"/api/user/addresses/{first['id']}/default/")
		self.assertIs(res.data['address']['isDefault'], True)
		self.assertEqual(UserAddress.objects.filter(user=self.user, is_default=True).get().pk, first['id'])

	def test_update(self):
		address = self._add().data['address']
		res = self.client.put(f"/api/user/addresses/{address['id']}/", data={**ADDRESS, 'city': 'Hubli', 'isDefault': True}, format='json')
		self.assertEqual(res.status_code, 200)
		self.assertEqual(res.data['address']['city'], 'Hubli')

	def test_delete_rules(self):
		first = self._add().data['address']
		only = self.client.delete(f"/api/user/addresses/{first['id']}/")
		self.assertEqual(only.status_code, 400)
		self.assertEqual(only.data, {'error': 'Cannot delete the only address. Add another address first.'})

		second = self._add(city='Mysuru').data['address']
		res = self.client.delete(f"/api/user/addresses/{first['id']}/")
		self.assertEqual(res.data, {'message': 'Address deleted successfully'})
		self.assertTrue(UserAddress.objects.get(pk=second['id']).is_default)

	def test_other_users_addresses_are_hidden(self):
		theirs = UserAddress.objects.create(user=self.other, is_default=True, **{
			'address': 'x', 'city': 'y', 'state': 'z', 'zipcode': '1', 'mobile_number': '2',
		})
		self.assertEqual(self.client.get('/api/user/addresses/').data['addresses'], [])
		for method in ('put', 'delete'):
			with self.subTest(method=method):
				res = getattr(self.client, method)(f'/api/user/addresses/{theirs.pk}/', data=ADDRESS, format='json')
				self.assertEqual(res.status_code, 404)
				self.assertEqual(res.data, {'error': 'Address not found or does not belong to user'})
		self.assertEqual(self.client.put(f'/api/user/addresses/{theirs.pk}/default/').status_code, 404)
		self.assertIsNone(self.client.get('/api/user/default-address/').data['address'])
