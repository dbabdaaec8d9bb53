"""Marketing app tests."""

from datetime import timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from django.utils import timezone
from rest_framework.test import APIClient

from marketing.models import AboutUs, Banner, Coupon, Policy, Testimonial


def _user(email, role):
	return get_user_model().objects.create_user(
		email=email,
		password='12345678',
		first_name='Test',
		last_name='User',
		role=role,
	)


class CouponDiscountTests(TestCase):
	def test_percentage_capped_by_max_discount(self):
		coupon = Coupon(code='BIG20', discount_type='percentage', discount_value=Decimal('20'), max_discount=Decimal('150'))
		self.assertEqual(coupon.discount_for(Decimal('500')), Decimal('100.00'))
		self.assertEqual(coupon.discount_for(Decimal('1000')), Decimal('150.00'))

	def test_flat_never_exceeds_total(self):
		coupon = Coupon(code='FLAT300', discount_type='flat', discount_value=Decimal('300'))
		self.assertEqual(coupon.discount_for(Decimal('1000')), Decimal('300.00'))
		self.assertEqual(coupon.discount_for(Decimal('200')), Decimal('200.00'))

	def test_code_stored_upper_case_with_slug(self):
		coupon = Coupon.objects.create(code=' diwali50 ', discount_type='flat', discount_value=Decimal('50'))
		self.assertEqual(coupon.code, 'DIWALI50')
		self.assertEqual(coupon.slug, 'diwali50')


@override_settings(ALLOWED_HOSTS=['testserver', 'localhost', '127.0.0.1'])
class CouponValidateTests(TestCase):
	@classmethod
	def setUpTestData(cls):
		Coupon.objects.create(
			code='SAVE10',
			description='10% off',
			discount_type='percentage',
			discount_value=Decimal('10'),
			min_purchase=Decimal('500'),
			max_discount=Decimal('200'),
		)
		Coupon.objects.create(
			code='OLD',
			discount_type='flat',
			discount_value=Decimal('100'),
			expires_at=timezone.now() - timedelta(days=1),
		)
		Coupon.objects.create(code='OFF', discount_type='flat', discount_value=Decimal('100'), is_active=False)

	def setUp(self):
		self.client = APIClient()

	def test_valid_coupon_case_insensitive(self):
		with self.assertLogs('marketing.views', level='INFO'):
			res = self.client.post('/api/coupons/validate/', data={'code': 'save10', 'orderTotal': 1000}, format='json')
		self.assertEqual(res.status_code, 200)
		self.assertTrue(res.data['success'])
		self.assertEqual(res.data['message'], 'Coupon applied successfully')
		self.assertEqual(res.data['coupon']['code'], 'SAVE10')
		self.assertEqual(res.data['coupon']['discountAmount'], Decimal('100.00'))

	def test_missing_code(self):
		res = self.client.post('/api/coupons/validate/', data={'orderTotal': 1000}, format='json')
		self.assertEqual(res.status_code, 400)
		self.assertEqual(res.data, {'error': 'Coupon code is required'})

	def test_unknown_and_inactive(self):
		for code in ('NOPE', 'OFF'):
			res = self.client.post('/api/coupons/validate/', data={'code': code, 'orderTotal': 1000}, format='json')
			self.assertEqual(res.status_code, 404)
			self.assertEqual(res.data, {'error': 'Invalid coupon code'})

	def test_expired(self):
		res = self.client.post('/api/coupons/validate/', data={'code': 'OLD', 'orderTotal': 1000}, format='json')
		self.assertEqual(res.status_code, 400)
		self.assertEqual(res.data, {'error': 'Coupon has expired'})

	def test_minimum_purchase(self):
		res = self.client.post('/api/coupons/validate/', data={'code': 'SAVE10', 'orderTotal': 300}, format='json')
		self.assertEqual(res.status_code, 400)
		self.assertEqual(res.data, {'error': 'Minimum purchase of ₹500 required for this coupon'})


@override_settings(ALLOWED_HOSTS=['testserver', 'localhost', '127.0.0.1'])
class AdminCouponTests(TestCase):
	@classmethod
	def setUpTestData(cls):
		cls.manager = _user('manager@example.com', 'shopmanager')
		Coupon.objects.create(code='WELCOME', discount_type='flat', discount_value=Decimal('50'))

	def setUp(self):
		self.client = APIClient()
		self.client.force_authenticate(user=self.manager)

	def test_create_upper_cases_code(self):
		res = self.client.post('/api/admin/coupons/', data={
			'code': 'summer15',
			'discountType': 'percentage',
			'discountValue': '15',
		}, format='json')
		self.assertEqual(res.status_code, 201)
		self.assertEqual(res.data['code'], 'SUMMER15')
		self.assertTrue(res.data['isActive'])

	def test_duplicate_code_ignores_case(self):
		res = self.client.post('/api/admin/coupons/', data={
			'code': 'welcome',
			'discountType': 'flat',
			'discountValue': '10',
		}, format='json')
		self.assertEqual(res.status_code, 400)
		self.assertEqual(res.data, {'error': 'Coupon code already exists'})

	def test_market_manager_cannot_manage_coupons(self):
		client = APIClient()
		client.force_authenticate(user=_user('mm@example.com', 'marketmanager'))
		self.assertEqual(client.get('/api/admin/coupons/').status_code, 403)


@override_settings(ALLOWED_HOSTS=['testserver', 'localhost', '127.0.0.1'])
class ContentTests(TestCase):
	@classmethod
	def setUpTestData(cls):
		cls.market_manager = _user('mm@example.com', 'marketmanager')
		Banner.objects.create(image='banner.jpg', link='/sale')
		Testimonial.objects.create(name='Asha', image='asha.jpg', rating=Decimal('4.5'), review='Lovely fabric')

	def setUp(self):
		self.client = APIClient()
		self.client.force_authenticate(user=self.market_manager)

	def test_blog_slug_from_title(self):
		res = self.client.post('/api/admin/blogs/', data={
			'title': 'How to Drape a Saree!',
			'description': 'Five styles',
			'image': 'drape.jpg',
			'content': '...',
		}, format='json')
		self.assertEqual(res.status_code, 201)
		self.assertEqual(res.data['slug'], 'how-to-drape-a-saree')

		public = APIClient().get('/api/blogs/how-to-drape-a-saree/')
		self.assertEqual(public.status_code, 200)
		self.assertEqual(public.data['title'], 'How to Drape a Saree!')

	def test_missing_blog(self):
		res = APIClient().get('/api/blogs/nothing-here/')
		self.assertEqual(res.status_code, 404)
		self.assertEqual(res.data, {'error': 'Blog not found'})

	def test_public_lists(self):
		self.assertEqual(APIClient().get('/api/banners/').data[0]['link'], '/sale')
		self.assertEqual(APIClient().get('/api/testimonials/').data[0]['name'], 'Asha')

	def test_testimonial_rating_range(self):
		res = self.client.post('/api/admin/testimonials/', data={
			'name': 'Ravi',
			'image': 'ravi.jpg',
			'rating': 6,
			'review': 'Too good',
		}, format='json')
		self.assertEqual(res.status_code, 400)
		self.assertTrue(res.data['error'].startswith('rating:'))

	def test_delete_banner(self):
		banner = Banner.objects.create(image='old.jpg')
		res = self.client.delete(f'/api/admin/banners/{banner.pk}/')
		self.assertEqual(res.status_code, 200)
		self.assertEqual(res.data, {'message': 'Banner deleted successfully'})
		self.assertFalse(Banner.objects.filter(pk=banner.pk).exists())


@override_settings(ALLOWED_HOSTS=['testserver', 'localhost', '127.0.0.1'])
class StaticPageTests(TestCase):
	@classmethod
	def setUpTestData(cls):
		cls.market_manager = _user('mm@example.com', 'marketmanager')

	def setUp(self):
		self.client = APIClient()
		self.client.force_authenticate(user=self.market_manager)

	def test_about_us_upsert_keeps_one_page(self):
		self.assertEqual(self.client.get('/api/admin/aboutus/').data, {})
		missing = APIClient().get('/api/aboutus/')
		self.assertEqual(missing.status_code, 404)
		self.assertEqual(missing.data, {'error': 'About Us content not found'})

		res = self.client.post('/api/admin/aboutus/', data={
			'title': 'Our Story',
			'videos': [{'url': 'story.mp4', 'poster': 'story.jpg'}],
		}, format='json')
		self.assertEqual(res.status_code, 201)

		res = self.client.post('/api/admin/aboutus/', data={'description': 'Family weavers since 1982'}, format='json')
		self.assertEqual(res.status_code, 201)
		self.assertEqual(AboutUs.objects.count(), 1)

		public = APIClient().get('/api/aboutus/')
		self.assertEqual(public.data['title'], 'Our Story')
		self.assertEqual(public.data['description'], 'Family weavers since 1982')
		self.assertEqual(public.data['videos'], [{'url': 'story.mp4', 'poster': 'story.jpg'}])

	def test_about_us_delete(self):
		res = self.client.delete('/api/admin/aboutus/')
		self.assertEqual(res.status_code, 404)
		self.assertEqual(res.data, {'error': 'No About Us content found to delete'})

		AboutUs.objects.create(title='Our Story')
		res = self.client.delete('/api/admin/aboutus/')
		self.assertEqual(res.data, {'message': 'About Us content deleted successfully'})
		self.assertFalse(AboutUs.objects.exists())

	def test_policies_are_kept_per_kind(self):
		res = self.client.post('/api/admin/shippingpolicy/', data={'title': 'Shipping', 'description': 'Ships in 48 hours'}, format='json')
		self.assertEqual(res.status_code, 201)
		Policy.objects.create(kind=Policy.KIND_PRIVACY, title='Privacy', description='We never sell data')

		self.assertEqual([p['title'] for p in APIClient().get('/api/shippingpolicy/').data], ['Shipping'])
		self.assertEqual([p['title'] for p in APIClient().get('/api/privacypolicy/').data], ['Privacy'])
		self.assertEqual(APIClient().get('/api/stitchingpolicy/').data, [])

		other_kind = self.client.get(f"/api/admin/privacypolicy/{res.data['id']}/")
		self.assertEqual(other_kind.status_code, 404)
		self.assertEqual(other_kind.data, {'error': 'Policy not found'})

		updated = self.client.put(
			f"/api/admin/shippingpolicy/{res.data['id']}/",
			data={'title': 'Shipping', 'description': 'Ships in 24 hours'},
			format='json',
		)
		self.assertEqual(updated.data['description'], 'Ships in 24 hours')

	def test_customers_cannot_edit_pages(self):
		client = APIClient()
		client.force_authenticate(user=_user('shopper@example.com', 'user'))
		self.assertEqual(client.post('/api/admin/aboutus/', data={'title': 'x'}, format='json').status_code, 403)
		self.assertEqual(client.get('/api/admin/stitchingpolicy/').status_code, 403)
