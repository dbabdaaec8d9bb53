"""Cart app tests."""

import uuid
from decimal import Decimal

from django.conf import settings
from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from cart.models import CartItem, WishlistItem
from products.models import Product


@override_settings(ALLOWED_HOSTS=['testserver', 'localhost', '127.0.0.1'])
class GuestCartTests(TestCase):
	@classmethod
	def setUpTestData(cls):
		cls.kurti = Product.objects.create(name='Cotton Kurti', price='500.00', total_price='590.00', status='live')
		cls.blouse = Product.objects.create(name='Plain Blouse', price='250.00', status='live')

	def setUp(self):
		self.client = APIClient()

	def test_first_visit_issues_session_cookie(self):
		res = self.client.get('/api/cart/')
		self.assertEqual(res.status_code, 200)
		self.assertEqual(res.data['cart'], [])
		self.assertEqual(res.data['totalItems'], 0)
		cookie = res.cookies[settings.CART_SESSION_COOKIE]
		self.assertTrue(cookie['httponly'])
		uuid.UUID(cookie.value)

	def test_add_increments_and_totals(self):
		res = self.client.post('/api/cart/', data={'productId': self.kurti.pk, 'quantity': 1}, format='json')
		self.assertEqual(res.status_code, 201)
		self.assertEqual(res.data['message'], 'Added to cart')

		res = self.client.post('/api/cart/', data={'productId': self.kurti.pk, 'quantity': 2}, format='json')
		self.assertEqual(res.status_code, 200)
		self.assertEqual(res.data['message'], 'Updated quantity in cart')
		self.assertEqual(res.data['item']['quantity'], 3)

		self.client.post('/api/cart/', data={'productId': self.blouse.pk}, format='json')

		res = self.client.get('/api/cart/')
		self.assertEqual(res.data['totalItems'], 4)
		# total_price when set, plain price otherwise
		self.assertEqual(res.data['totalAmount'], Decimal('2020.00'))

	def test_unknown_product(self):
		res = self.client.post('/api/cart/', data={'productId': 9999}, format='json')
		self.assertEqual(res.status_code, 400)

	def test_patch_quantity(self):
		self.client.post('/api/cart/', data={'productId': self.kurti.pk}, format='json')
		item = CartItem.objects.get()

		res = self.client.patch('/api/cart/', data={'itemId': item.pk, 'quantity': 0}, format='json')
		self.assertEqual(res.status_code, 400)
		self.assertEqual(res.data, {'error': 'quantity: Quantity must be at least 1'})

		res = self.client.patch('/api/cart/', data={'itemId': item.pk, 'quantity': 5}, format='json')
		self.assertEqual(res.status_code, 200)
		item.refresh_from_db()
		self.assertEqual(item.quantity, 5)

	def test_other_guests_cannot_touch_my_items(self):
		self.client.post('/api/cart/', data={'productId': self.kurti.pk}, format='json')
		item = CartItem.objects.get()

		stranger = APIClient()
		res = stranger.patch('/api/cart/', data={'itemId': item.pk, 'quantity': 2}, format='json')
		self.assertEqual(res.status_code, 404)
		self.assertEqual(res.data, {'error': 'Item not found in cart'})
		self.assertEqual(stranger.delete(f'/api/cart/?itemId={item.pk}').status_code, 404)
		self.assertTrue(CartItem.objects.filter(pk=item.pk).exists())

	def test_delete_and_clear(self):
		self.client.post('/api/cart/', data={'productId': self.kurti.pk}, format='json')
		self.client.post('/api/cart/', data={'productId': self.blouse.pk}, format='json')
		item = CartItem.objects.get(product=self.kurti)

		res = self.client.delete(f'/api/cart/?itemId={item.pk}')
		self.assertEqual(res.status_code, 200)
		self.assertEqual(CartItem.objects.count(), 1)

		res = self.client.post('/api/cart/clear/')
		self.assertEqual(res.data['message'], 'Cleared 1 items from cart')
		self.assertEqual(CartItem.objects.count(), 0)


@override_settings(ALLOWED_HOSTS=['testserver', 'localhost', '127.0.0.1'])
class UserCartTests(TestCase):
	@classmethod
	def setUpTestData(cls):
		cls.user = get_user_model().objects.create_user(
			email='shopper@example.com',
			password='12345678',
			first_name='Shop',
			last_name='Per',
		)
		cls.product = Product.objects.create(name='Lehenga', price='4000.00', status='live')

	def test_signed_in_cart_is_keyed_by_user(self):
		client = APIClient()
		client.force_authenticate(user=self.user)
		res = client.post('/api/cart/', data={'productId': self.product.pk}, format='json')
		self.assertEqual(res.status_code, 201)
		self.assertNotIn(settings.CART_SESSION_COOKIE, res.cookies)
		self.assertEqual(CartItem.objects.get().owner_key, f'user:{self.user.pk}')


@override_settings(ALLOWED_HOSTS=['testserver', 'localhost', '127.0.0.1'])
class WishlistTests(TestCase):
	@classmethod
	def setUpTestData(cls):
		cls.product = Product.objects.create(name='Silk Dupatta', price='800.00', status='live')

	def setUp(self):
		self.client = APIClient()

	def test_add_twice(self):
		res = self.client.post('/api/wishlist/', data={'productId': self.product.pk}, format='json')
		self.assertEqual(res.status_code, 201)

		res = self.client.post('/api/wishlist/', data={'productId': self.product.pk}, format='json')
		self.assertEqual(res.status_code, 200)
		self.assertEqual(res.data, {'success': False, 'message': 'Item already in wishlist'})

		res = self.client.get('/api/wishlist/')
		self.assertEqual([w['productId'] for w in res.data['wishlist']], [self.product.pk])

	def test_remove(self):
		self.client.post('/api/wishlist/', data={'productId': self.product.pk}, format='json')
		res = self.client.delete(f'/api/wishlist/?productId={self.product.pk}')
		self.assertEqual(res.status_code, 200)
		self.assertFalse(WishlistItem.objects.exists())

		res = self.client.delete(f'/api/wishlist/?productId={self.product.pk}')
		self.assertEqual(res.status_code, 404)
		self.assertEqual(res.data, {'error': 'Item not found in wishlist'})
