"""Orders app tests."""

from decimal import Decimal
from unittest import mock

import requests
from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from orders.models import Order, OrderLine
from orders.payments import to_paise
from products.models import Product


def _checkout_payload(product, **overrides):
	payload = {
		'customer': {
			'firstName': 'Priya',
			'lastName': 'Sharma',
			'email': 'priya@example.com',
			'phone': '98765 43210',
		},
		'shippingAddress': {'line1': '12 MG Road', 'city': 'Pune', 'pincode': '411001'},
		'items': [
			{'productId': product.pk, 'name': product.name, 'price': '1200.00', 'quantity': 2, 'size': 'M'},
		],
		'subtotal': '2400.00',
		'discount': '240.00',
		'total': '2160.00',
		'paymentMethod': 'cod',
		'promoCode': 'save10',
	}
	payload.update(overrides)
	return payload


@override_settings(ALLOWED_HOSTS=['testserver', 'localhost', '127.0.0.1'])
class CheckoutTests(TestCase):
	@classmethod
	def setUpTestData(cls):
		cls.customer = get_user_model().objects.create_user(
			email='priya@example.com',
			password='12345678',
			first_name='Priya',
			last_name='Sharma',
		)
		cls.product = Product.objects.create(name='Anarkali Kurti', price='1200.00', status='live')

	def setUp(self):
		self.client = APIClient()
		self.client.force_authenticate(user=self.customer)

	def test_create_order(self):
		with self.assertLogs('orders.views', level='INFO'):
			res = self.client.post('/api/orders/create/', data=_checkout_payload(self.product), format='json')
		self.assertEqual(res.status_code, 201)
		self.assertTrue(res.data['success'])

		order = res.data['order']
		self.assertTrue(order['orderId'].startswith('ORD'))
		self.assertTrue(order['trackingNumber'].startswith('TRK'))
		self.assertEqual(order['status'], 'pending')
		self.assertEqual(order['paymentStatus'], 'pending')
		self.assertEqual(order['promoCode'], 'SAVE10')
		self.assertEqual(order['customer']['phone'], '+919876543210')
		self.assertEqual(order['items'][0]['quantity'], 2)
		self.assertEqual(order['items'][0]['subtotal'], '2400.00')

		saved = Order.objects.get(order_id=order['orderId'])
		self.assertEqual(saved.user, self.customer)
		self.assertEqual(saved.owner_key, f'user:{self.customer.pk}')
		self.assertEqual(saved.total, Decimal('2160.00'))

	def test_missing_required_data(self):
		for field in ('customer', 'items', 'total'):
			payload = _checkout_payload(self.product)
			del payload[field]
			res = self.client.post('/api/orders/create/', data=payload, format='json')
			self.assertEqual(res.status_code, 400)
			self.assertEqual(res.data, {'error': 'Missing required order data'})
		self.assertFalse(Order.objects.exists())

	def test_invalid_phone(self):
		payload = _checkout_payload(self.product)
		payload['customer']['phone'] = '12345'
		res = self.client.post('/api/orders/create/', data=payload, format='json')
		self.assertEqual(res.status_code, 400)
		self.assertIn('Invalid phone number', res.data['error'])

	def test_history_is_per_owner(self):
		self.client.post('/api/orders/create/', data=_checkout_payload(self.product), format='json')
		self.client.post('/api/orders/create/', data=_checkout_payload(self.product, total='999.00'), format='json')

		res = self.client.get('/api/orders/')
		self.assertEqual(len(res.data['orders']), 2)
		# newest first
		self.assertEqual(res.data['orders'][0]['total'], '999.00')

		stranger = APIClient()
		self.assertEqual(stranger.get('/api/orders/').data['orders'], [])
		order_id = res.data['orders'][0]['orderId']
		missing = stranger.get(f'/api/orders/{order_id}/')
		self.assertEqual(missing.status_code, 404)
		self.assertEqual(missing.data, {'error': 'Order not found'})

		own = self.client.get(f'/api/orders/{order_id}/')
		self.assertEqual(own.status_code, 200)
		self.assertEqual(own.data['order']['orderId'], order_id)

	def test_guest_checkout_uses_cart_session(self):
		guest = APIClient()
		res = guest.post('/api/orders/create/', data=_checkout_payload(self.product), format='json')
		self.assertEqual(res.status_code, 201)
		self.assertIsNone(Order.objects.get().user)
		self.assertEqual(len(guest.get('/api/orders/').data['orders']), 1)


@override_settings(ALLOWED_HOSTS=['testserver', 'localhost', '127.0.0.1'])
class CancelOrderTests(TestCase):
	@classmethod
	def setUpTestData(cls):
		cls.customer = get_user_model().objects.create_user(
			email='cancel@example.com',
			password='12345678',
			first_name='Can',
			last_name='Cel',
		)
		owner_key = f'user:{cls.customer.pk}'
		cls.pending = Order.objects.create(owner_key=owner_key, user=cls.customer, total='500.00')
		cls.shipped = Order.objects.create(owner_key=owner_key, user=cls.customer, total='800.00', status='shipped')

	def setUp(self):
		self.client = APIClient()
		self.client.force_authenticate(user=self.customer)

	def test_cancel_pending(self):
		res = self.client.post('/api/orders/cancel/', data={'orderId': self.pending.order_id}, format='json')
		self.assertEqual(res.status_code, 200)
		self.assertEqual(res.data['order']['status'], 'cancelled')
		self.pending.refresh_from_db()
		self.assertEqual(self.pending.status, 'cancelled')

	def test_cannot_cancel_shipped(self):
		res = self.client.post('/api/orders/cancel/', data={'orderId': self.shipped.order_id}, format='json')
		self.assertEqual(res.status_code, 400)
		self.assertEqual(res.data, {
			'error': 'Cannot cancel order with status: shipped. Only pending and confirmed orders can be cancelled.',
		})

	def test_order_id_required(self):
		res = self.client.post('/api/orders/cancel/', data={}, format='json')
		self.assertEqual(res.status_code, 400)
		self.assertEqual(res.data, {'error': 'Order ID is required'})


@override_settings(ALLOWED_HOSTS=['testserver', 'localhost', '127.0.0.1'])
class AdminOrderTests(TestCase):
	@classmethod
	def setUpTestData(cls):
		cls.manager = get_user_model().objects.create_user(
			email='desk@example.com',
			password='12345678',
			first_name='Order',
			last_name='Desk',
			role='shopmanager',
		)
		cls.order = Order.objects.create(
			owner_key='user:999',
			customer={'firstName': 'Meera', 'lastName': 'Iyer'},
			total='1500.00',
		)
		OrderLine.objects.create(order=cls.order, name='Silk Saree', price='1500.00', quantity=1)

	def setUp(self):
		self.client = APIClient()
		self.client.force_authenticate(user=self.manager)

	def test_list_and_retrieve(self):
		res = self.client.get('/api/admin/orders/')
		self.assertEqual(res.status_code, 200)
		self.assertEqual([o['orderId'] for o in res.data['orders']], [self.order.order_id])
		self.assertEqual(self.client.get('/api/admin/orders/', {'status': 'shipped'}).data['orders'], [])

		res = self.client.get(f'/api/admin/orders/{self.order.order_id}/')
		self.assertEqual(res.data['order']['items'][0]['name'], 'Silk Saree')
		self.assertEqual(self.client.get(f'/api/admin/orders/{self.order.pk}/').status_code, 200)

	def test_patch_status_stamps_dates(self):
		res = self.client.patch(f'/api/admin/orders/{self.order.order_id}/', data={
			'status': 'delivered',
			'paymentStatus': 'completed',
			'trackingNumber': 'DTDC123',
		}, format='json')
		self.assertEqual(res.status_code, 200)
		self.assertEqual(res.data['message'], 'Order updated successfully')

		self.order.refresh_from_db()
		self.assertEqual(self.order.status, 'delivered')
		self.assertEqual(self.order.payment_status, 'completed')
		self.assertEqual(self.order.tracking_number, 'DTDC123')
		self.assertIsNotNone(self.order.shipped_at)
		self.assertIsNotNone(self.order.delivered_at)

	def test_patch_rejects_unknown_status(self):
		res = self.client.patch(f'/api/admin/orders/{self.order.order_id}/', data={'status': 'lost'}, format='json')
		self.assertEqual(res.status_code, 400)

	def test_missing_order(self):
		res = self.client.get('/api/admin/orders/ORD0_NOPE/')
		self.assertEqual(res.status_code, 404)
		self.assertEqual(res.data, {'error': 'Order not found'})

	def test_customers_are_forbidden(self):
		client = APIClient()
		client.force_authenticate(user=get_user_model().objects.create_user(
			email='shopper@example.com', password='12345678', first_name='A', last_name='B',
		))
		self.assertEqual(client.get('/api/admin/orders/').status_code, 403)


@override_settings(
	ALLOWED_HOSTS=['testserver', 'localhost', '127.0.0.1'],
	RAZORPAY_KEY_ID='rzp_test_key',
	RAZORPAY_KEY_SECRET='secret',
	RAZORPAY_PUBLIC_KEY_ID='rzp_test_public',
	RAZORPAY_API_BASE='https://gateway.example.com',
)
class PaymentOrderTests(TestCase):
	def test_to_paise_rounds(self):
		self.assertEqual(to_paise('499.99'), 49999)
		self.assertEqual(to_paise(Decimal('10.005')), 1001)

	@mock.patch('orders.payments.requests.post')
	def test_creates_gateway_order(self, post):
		post.return_value.json.return_value = {'id': 'order_abc', 'amount': 49999, 'currency': 'INR'}
		res = APIClient().post('/api/payment/create-order/', data={'amount': '499.99', 'receipt': 'r1'}, format='json')

		self.assertEqual(res.status_code, 200)
		self.assertEqual(res.data, {
			'success': True,
			'order': {'id': 'order_abc', 'amount': 49999, 'currency': 'INR'},
			'razorpayKeyId': 'rzp_test_public',
		})
		args, kwargs = post.call_args
		self.assertEqual(args[0], 'https://gateway.example.com/v1/orders')
		self.assertEqual(kwargs['json'], {'amount': 49999, 'currency': 'INR', 'receipt': 'r1'})
		self.assertEqual(kwargs['auth'], ('rzp_test_key', 'secret'))

	@mock.patch('orders.payments.requests.post', side_effect=requests.ConnectionError('down'))
	def test_gateway_failure(self, post):
		with self.assertLogs('orders.views', level='ERROR'):
			res = APIClient().post('/api/payment/create-order/', data={'amount': '100'}, format='json')
		self.assertEqual(res.status_code, 500)
		self.assertEqual(res.data, {'success': False, 'error': 'Failed to create order'})
